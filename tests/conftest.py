"""
Pytest configuration: every test gets a fresh app whose `mongo` handle
points at an in-memory mongomock database.
"""

from datetime import datetime

import mongomock
import pytest

from app import create_app
from config import Config
from models import Group, Notification, Task, User
from utils.db import mongo, to_object_id


class TestingConfig(Config):
    TESTING = True
    MONGO_URI = "mongodb://localhost:27017/familycare_test"


@pytest.fixture
def app(monkeypatch):
    app = create_app(TestingConfig)
    cx = mongomock.MongoClient()
    monkeypatch.setattr(mongo, "cx", cx)
    monkeypatch.setattr(mongo, "db", cx["familycare_test"])
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


def insert_user(**kwargs):
    kwargs.setdefault("clerk_id", None)
    kwargs.setdefault("email", "someone@example.com")
    return str(User(**kwargs).save().inserted_id)


def insert_group(name, members=None):
    return str(Group(name, members=members).save().inserted_id)


@pytest.fixture
def family(app):
    """
    Two groups: "Smith" (admin, caregiver, carereceiver) and "Jones"
    (admin only, the Smith caregiver is listed there as additional group).
    """
    admin = insert_user(clerk_id="clerk_admin", email="ann@example.com",
                        first_name="Ann", last_name="Smith", image_url="https://img/ann.png")
    caregiver = insert_user(clerk_id="clerk_care", email="bob@example.com",
                            first_name="Bob", last_name="Smith")
    receiver = insert_user(clerk_id="clerk_recv", email="cat@example.com", first_name="Cat")

    smith = insert_group("Smith", members=[
        Group.member(admin, "admin", "daughter"),
        Group.member(caregiver, "caregiver", "son"),
        Group.member(receiver, "carereceiver"),
    ])
    jones = insert_group("Jones", members=[Group.member(caregiver, "admin", "friend")])

    for user_id in (admin, receiver):
        User.update_fields(user_id, {"groupID": to_object_id(smith)})
    User.update_fields(caregiver, {
        "groupID": to_object_id(smith),
        "additionalGroups": [{"groupID": to_object_id(jones)}],
    })

    return {
        "admin": admin,
        "caregiver": caregiver,
        "receiver": receiver,
        "smith": smith,
        "jones": jones,
    }


@pytest.fixture
def activity(family):
    task_late = Task("Refill prescriptions", family["receiver"], assigned_by=family["admin"],
                     deadline=datetime(2026, 5, 3)).save().inserted_id
    task_soon = Task("Book checkup", family["receiver"], assigned_by=family["caregiver"],
                     deadline=datetime(2026, 5, 1)).save().inserted_id
    Task("Walk the dog", family["admin"], deadline=datetime(2026, 4, 1)).save()

    Notification(family["receiver"], "New task", task_id=task_late,
                 created_at=datetime(2026, 4, 1, 9, 0)).save()
    Notification(family["receiver"], "Task updated", task_id=task_soon,
                 created_at=datetime(2026, 4, 2, 9, 0)).save()
    return {"task_late": str(task_late), "task_soon": str(task_soon)}
