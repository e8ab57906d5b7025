from utils.db import mongo, to_object_id, projection
from datetime import datetime

ROLES = ("admin", "caregiver", "carereceiver")


class Group:

    @staticmethod
    def collection():
        return mongo.db.groups

    def __init__(self, name, members=None, created_at=None, updated_at=None):
        self.name = name
        self.members = members or []  # [{"user", "role", "familialRelation"}]
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()

    def to_dict(self):
        return {
            "name": self.name,
            "members": self.members,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at
        }

    def save(self):
        return self.collection().insert_one(self.to_dict())

    @staticmethod
    def member(user_id, role, familial_relation=None):
        return {
            "user": to_object_id(user_id),
            "role": role,
            "familialRelation": familial_relation
        }

    @staticmethod
    def find_by_id(group_id, fields=None):
        return Group.collection().find_one({"_id": to_object_id(group_id)}, projection(fields))

    @staticmethod
    def find_many(group_ids, fields=None):
        ids = [to_object_id(g) for g in group_ids]
        return list(Group.collection().find({"_id": {"$in": ids}}, projection(fields)))

    # Linear scan; families are small
    @staticmethod
    def find_member_index(group, user_id):
        for index, member in enumerate(group.get("members") or []):
            if str(member.get("user")) == str(user_id):
                return index
        return -1

    @staticmethod
    def find_member(group, user_id):
        index = Group.find_member_index(group, user_id)
        if index == -1:
            return None
        return group["members"][index]

    # Persist the whole member list (last write wins)
    @staticmethod
    def save_members(group):
        return Group.collection().update_one(
            {"_id": group["_id"]},
            {"$set": {
                "members": group["members"],
                "updatedAt": datetime.utcnow()
            }}
        )
