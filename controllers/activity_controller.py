from flask import Blueprint, jsonify
from models.tasks import Task
from models.notifications import Notification
from utils.errors import api_errors

activity_bp = Blueprint("activity", __name__, url_prefix="/api/users")


# Tasks assigned to the user, soonest deadline first
@activity_bp.route("/<userID>/tasks", methods=["GET"])
@api_errors()
def get_user_tasks(userID):
    return jsonify(Task.find_for_user(userID)), 200


# Newest notifications first
@activity_bp.route("/<userID>/notifications", methods=["GET"])
@api_errors()
def get_user_notifications(userID):
    return jsonify(Notification.find_for_user(userID)), 200
