from utils.db import mongo, to_object_id, projection
from datetime import datetime
from pymongo import ReturnDocument

DEFAULT_NOTIFICATION_PREFERENCES = {
    "doNotDisturb": False,
    "newFeed": True,
    "newActivity": True,
    "invites": True,
}


class User:

    @staticmethod
    def collection():
        return mongo.db.users

    def __init__(self, clerk_id, email, first_name=None, last_name=None, image_url=None,
                 group_id=None, additional_groups=None, notification_preferences=None,
                 created_at=None, updated_at=None):
        self.clerk_id = clerk_id
        self.email = email
        self.first_name = first_name
        self.last_name = last_name
        self.image_url = image_url
        self.group_id = to_object_id(group_id) if group_id else None

        # Stored as [{"groupID": ObjectId}, ...]
        self.additional_groups = [
            {"groupID": to_object_id(g)} for g in (additional_groups or [])
        ]
        self.notification_preferences = notification_preferences

        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()

    # Convert to dictionary for MongoDB
    def to_dict(self):
        return {
            "clerkID": self.clerk_id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "imageURL": self.image_url,
            "groupID": self.group_id,
            "additionalGroups": self.additional_groups,
            "notificationPreferences": self.notification_preferences,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at
        }

    # Save new user
    def save(self):
        return self.collection().insert_one(self.to_dict())

    # Find user by ID
    @staticmethod
    def find_by_id(user_id, fields=None):
        return User.collection().find_one({"_id": to_object_id(user_id)}, projection(fields))

    # Find user by external (Clerk) identity
    @staticmethod
    def find_by_clerk_id(clerk_id):
        return User.collection().find_one({"clerkID": str(clerk_id)})

    # Batch lookup for a set of user ids
    @staticmethod
    def find_many(user_ids, fields=None):
        ids = [to_object_id(u) for u in user_ids]
        return list(User.collection().find({"_id": {"$in": ids}}, projection(fields)))

    # Apply a partial update and return the stored document after it
    @staticmethod
    def update_fields(user_id, fields):
        if not fields:
            return User.find_by_id(user_id)

        return User.collection().find_one_and_update(
            {"_id": to_object_id(user_id)},
            {"$set": {**fields, "updatedAt": datetime.utcnow()}},
            return_document=ReturnDocument.AFTER
        )

    @staticmethod
    def delete_by_id(user_id):
        return User.collection().find_one_and_delete({"_id": to_object_id(user_id)})

    @staticmethod
    def full_name(user):
        return f"{user.get('firstName') or ''} {user.get('lastName') or ''}".strip()

    # Primary group first, then additional groups in stored order
    @staticmethod
    def group_ids(user):
        ids = []
        if user.get("groupID"):
            ids.append(str(user["groupID"]))

        for group in user.get("additionalGroups") or []:
            if group and group.get("groupID"):
                ids.append(str(group["groupID"]))
        return ids

    @staticmethod
    def preferences_of(user):
        return user.get("notificationPreferences") or dict(DEFAULT_NOTIFICATION_PREFERENCES)
