from flask import Blueprint, request, jsonify
from models.users import User, DEFAULT_NOTIFICATION_PREFERENCES
from utils.errors import api_errors, NotFound, ValidationError

preferences_bp = Blueprint("preferences", __name__, url_prefix="/api/users")

PREFERENCE_FLAGS = tuple(DEFAULT_NOTIFICATION_PREFERENCES)


@preferences_bp.route("/<userID>/notification-preferences", methods=["GET"])
@api_errors("Failed to fetch notification preferences")
def get_notification_preferences(userID):
    user = User.find_by_id(userID, ["notificationPreferences"])
    if not user:
        raise NotFound("User not found")

    return jsonify(User.preferences_of(user)), 200


@preferences_bp.route("/<userID>/notification-preferences", methods=["PUT"])
@api_errors("Failed to update notification preferences")
def update_notification_preferences(userID):
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict) or not all(isinstance(data.get(f), bool) for f in PREFERENCE_FLAGS):
        raise ValidationError("Invalid preferences format. All preference values must be boolean.")

    preferences = {f: data[f] for f in PREFERENCE_FLAGS}

    updated_user = User.update_fields(userID, {"notificationPreferences": preferences})
    if not updated_user:
        raise NotFound("User not found")

    return jsonify({
        "message": "Notification preferences updated successfully",
        "preferences": updated_user["notificationPreferences"]
    }), 200
