from utils.db import mongo, to_object_id, populate
from datetime import datetime
from pymongo import DESCENDING


class Notification:

    @staticmethod
    def collection():
        return mongo.db.notifications

    def __init__(self, user_id, message, task_id=None, created_at=None):
        self.user_id = to_object_id(user_id)
        self.message = message
        self.task_id = to_object_id(task_id) if task_id else None
        self.created_at = created_at or datetime.utcnow()

    def to_dict(self):
        return {
            "userID": self.user_id,
            "taskID": self.task_id,
            "message": self.message,
            "createdAt": self.created_at
        }

    def save(self):
        return Notification.collection().insert_one(self.to_dict())

    # Newest first, with the related task's description
    @staticmethod
    def find_for_user(user_id):
        notifications = list(
            Notification.collection()
            .find({"userID": to_object_id(user_id)})
            .sort("createdAt", DESCENDING)
        )
        return populate(notifications, "taskID", mongo.db.tasks, ["description"])
