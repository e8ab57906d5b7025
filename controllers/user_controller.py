from flask import Blueprint, request, jsonify
from datetime import datetime
from models.users import User
from utils.errors import api_errors, NotFound, ValidationError

user_bp = Blueprint("users", __name__, url_prefix="/api/users")

ONBOARDING_FIELDS = ("firstName", "lastName", "dateOfBirth", "gender", "weight", "height")

# Fields that can never be changed through the profile update
PROTECTED_FIELDS = ("email", "_id")


def _parse_date(value):
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        pass

    for fmt in ("%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%SZ", "%Y-%m-%dT%H:%M:%S.%fZ"):
        try:
            return datetime.strptime(str(value), fmt)
        except ValueError:
            continue
    raise ValidationError(f"Invalid dateOfBirth: {value}")


def _parse_number(name, value):
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {name}: {value}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {name}: {value}")


# ==========================================================
# GET USER
# ==========================================================
@user_bp.route("/<userID>", methods=["GET"])
@api_errors("Internal server error")
def get_user(userID):
    user = User.find_by_id(userID)
    if not user:
        raise NotFound("User not found")

    return jsonify(user), 200


# ==========================================================
# UPDATE USER (email is never changed here)
# ==========================================================
@user_bp.route("/<userID>", methods=["PUT"])
@api_errors()
def update_user(userID):
    updates = request.get_json(silent=True)
    if updates is None:
        updates = {}
    if not isinstance(updates, dict):
        raise ValidationError("Request body must be a JSON object")

    updates = {k: v for k, v in updates.items() if k not in PROTECTED_FIELDS}

    updated_user = User.update_fields(userID, updates)
    if not updated_user:
        raise NotFound("User not found")

    return jsonify(updated_user), 200


# ==========================================================
# DELETE USER
# ==========================================================
@user_bp.route("/<userID>", methods=["DELETE"])
@api_errors()
def delete_user(userID):
    deleted_user = User.delete_by_id(userID)
    if not deleted_user:
        raise NotFound("User not found")

    return jsonify({"message": "User deleted successfully"}), 200


# ==========================================================
# ONBOARDING
# ==========================================================
@user_bp.route("/<userID>/onboarding", methods=["PUT"])
@api_errors("Failed to save additional info")
def provide_additional_user_info(userID):
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict) or not all(data.get(f) for f in ONBOARDING_FIELDS):
        raise ValidationError("Please fill out all fields to complete onboarding")

    updated_user = User.update_fields(userID, {
        "firstName": data["firstName"],
        "lastName": data["lastName"],
        "dateOfBirth": _parse_date(data["dateOfBirth"]),
        "gender": data["gender"],
        "weight": _parse_number("weight", data["weight"]),
        "height": _parse_number("height", data["height"])
    })
    if not updated_user:
        raise NotFound("User not found")

    return jsonify({
        "message": "Additional info saved successfully",
        "user": updated_user
    }), 200


# ==========================================================
# NAME + AVATAR
# ==========================================================
@user_bp.route("/<userID>/info", methods=["GET"])
@api_errors("Internal server error")
def get_user_info(userID):
    user = User.find_by_id(userID, ["firstName", "lastName", "imageURL"])
    if not user:
        raise NotFound("User not found")

    return jsonify({
        "fullName": User.full_name(user),
        "imageURL": user.get("imageURL") or None
    }), 200


# ==========================================================
# LOOKUP BY CLERK ID
# ==========================================================
@user_bp.route("/clerk/<clerkID>", methods=["GET"])
@api_errors("Internal server error")
def get_user_id_by_clerk_id(clerkID):
    if not clerkID:
        raise ValidationError("clerkID is required")

    user = User.find_by_clerk_id(clerkID)
    if not user:
        raise NotFound("User not found")

    return jsonify({"userID": user["_id"]}), 200
