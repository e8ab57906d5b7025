from utils.db import mongo, to_object_id, populate
from datetime import datetime
from pymongo import ASCENDING


class Task:
    @staticmethod
    def collection():
        return mongo.db.tasks

    def __init__(self, description, assigned_to, assigned_by=None, deadline=None, status=None,
                 created_at=None, updated_at=None):
        self.description = description
        self.assigned_to = to_object_id(assigned_to)
        self.assigned_by = to_object_id(assigned_by) if assigned_by else None
        self.deadline = deadline
        self.status = status or "todo"  # todo | in-progress | done
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()

    def to_dict(self):
        return {
            "description": self.description,
            "assignedTo": self.assigned_to,
            "assignedBy": self.assigned_by,
            "deadline": self.deadline,
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def save(self):
        return Task.collection().insert_one(self.to_dict())

    # Tasks assigned to a user, soonest deadline first, with the assigner's name
    @staticmethod
    def find_for_user(user_id):
        tasks = list(
            Task.collection()
            .find({"assignedTo": to_object_id(user_id)})
            .sort("deadline", ASCENDING)
        )
        return populate(tasks, "assignedBy", mongo.db.users, ["firstName", "lastName"])
