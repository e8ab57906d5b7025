"""
utils/db.py
-----------------
Shared PyMongo handle for the family care API, plus the small id and
reference helpers the models build their queries with.
"""

import logging

from bson import ObjectId
from flask_pymongo import PyMongo

logger = logging.getLogger(__name__)

# Create a global MongoDB instance
mongo = PyMongo()


def init_db_connection(app):
    """
    Initialize MongoDB connection with Flask app.
    Expects MONGO_URI to be present in app.config.
    """
    mongo.init_app(app)

    logger.info("MongoDB connection initialized")
    return mongo


def to_object_id(value):
    # Raises bson.errors.InvalidId for malformed ids
    if isinstance(value, ObjectId):
        return value
    return ObjectId(str(value))


def projection(fields):
    if not fields:
        return None
    return {field: 1 for field in fields}


def populate(documents, field, collection, fields):
    """
    Replace the reference stored under `field` in each document with the
    referenced document (restricted to `fields`), or None if it is gone.
    One query is issued for the whole batch.
    """
    ref_ids = {doc[field] for doc in documents if doc.get(field) is not None}
    if not ref_ids:
        return documents

    found = collection.find({"_id": {"$in": list(ref_ids)}}, projection(fields))
    by_id = {doc["_id"]: doc for doc in found}

    for doc in documents:
        if doc.get(field) is not None:
            doc[field] = by_id.get(doc[field])
    return documents
