import logging

from flask import Blueprint, request, jsonify
from models.users import User
from models.groups import Group, ROLES
from utils.errors import api_errors, Forbidden, NotFound, ValidationError
from utils.family import resolve_family_group, build_family_roster
from utils.permissions import is_user_admin_of_group

logger = logging.getLogger(__name__)

group_bp = Blueprint("groups", __name__, url_prefix="/api/users")


# -----------------------------
# PRIMARY GROUP
# -----------------------------
@group_bp.route("/<userID>/group", methods=["GET"])
@api_errors("Failed to fetch user group")
def get_user_group(userID):
    user = User.find_by_id(userID, ["groupID"])
    if not user:
        raise NotFound("User not found")

    return jsonify({"groupID": user.get("groupID")}), 200


# -----------------------------
# ALL GROUP IDS
# -----------------------------
@group_bp.route("/<userID>/groups", methods=["GET"])
@api_errors()
def get_all_groups(userID):
    if not userID:
        raise ValidationError("User ID is required")

    user = User.find_by_id(userID)
    if not user:
        raise NotFound("User not found")

    group_ids = User.group_ids(user)

    return jsonify({
        "message": "User groups retrieved successfully",
        "userID": userID,
        "groupIDs": group_ids,
        "totalGroups": len(group_ids),
        "hasAdditionalGroups": bool(user.get("additionalGroups"))
    }), 200


# -----------------------------
# ALL GROUPS WITH NAMES
# -----------------------------
@group_bp.route("/<userID>/groups/details", methods=["GET"])
@api_errors("Failed to fetch user groups")
def get_all_user_groups(userID):
    user = User.find_by_id(userID)
    if not user:
        raise NotFound("User not found")

    group_ids = User.group_ids(user)
    groups = Group.find_many(group_ids, ["name"])

    return jsonify({
        "groupIDs": group_ids,
        "groups": [{"id": str(g["_id"]), "name": g.get("name")} for g in groups]
    }), 200


# -----------------------------
# ADMIN STATUS
# -----------------------------
@group_bp.route("/<userID>/groups/<groupID>/admin-status", methods=["GET"])
@api_errors()
def check_user_admin_status(userID, groupID):
    if not userID or not groupID:
        raise ValidationError("User ID and Group ID are required")

    if not User.find_by_id(userID, ["_id"]):
        raise NotFound("User not found")

    group = Group.find_by_id(groupID)
    if not group:
        raise NotFound("Group not found")

    is_admin = is_user_admin_of_group(userID, groupID)

    member = Group.find_member(group, userID)
    if not member:
        return jsonify({
            "isAdmin": False,
            "isMember": False,
            "message": "User is not a member of this group"
        }), 200

    return jsonify({
        "isAdmin": is_admin,
        "isMember": True,
        "role": member.get("role"),
        "familialRelation": member.get("familialRelation") or None,
        "groupName": group.get("name")
    }), 200


# -----------------------------
# FAMILY ROSTER
# -----------------------------
@group_bp.route("/<userID>/family-members", methods=["GET"])
@api_errors("Internal server error")
def get_family_members(userID):
    _, group = resolve_family_group(userID, request.args.get("groupID"))

    return jsonify(build_family_roster(group["members"])), 200


@group_bp.route("/<userID>/family-role", methods=["GET"])
@api_errors("Internal server error")
def get_current_user_family_role(userID):
    group_id, group = resolve_family_group(userID, request.args.get("groupID"))

    member = Group.find_member(group, userID)
    if not member:
        raise NotFound("User is not a member of this group")

    return jsonify({"role": member.get("role"), "groupID": group_id}), 200


# -----------------------------
# UPDATE MEMBER ROLE (admins only)
# -----------------------------
@group_bp.route("/<userID>/members/<targetUserID>/role", methods=["PUT"])
@api_errors("Internal server error")
def update_user_role(userID, targetUserID):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    role = data.get("role")
    group_id = data.get("groupID")

    if not userID or not targetUserID or not role or not group_id:
        raise ValidationError("User ID, target user ID, role, and group ID are required")

    if role not in ROLES:
        raise ValidationError("Invalid role. Must be admin, caregiver, or carereceiver")

    if userID == targetUserID:
        raise ValidationError("Cannot change your own role")

    if not is_user_admin_of_group(userID, group_id):
        raise Forbidden("Only group admins can update user roles")

    group = Group.find_by_id(group_id)
    if not group:
        raise NotFound("Group not found")

    index = Group.find_member_index(group, targetUserID)
    if index == -1:
        raise NotFound("Target user is not a member of this group")

    group["members"][index]["role"] = role
    Group.save_members(group)
    logger.info("User %s set role of %s in group %s to %s", userID, targetUserID, group_id, role)

    return jsonify({
        "message": "User role updated successfully",
        "updatedMember": {
            "userID": targetUserID,
            "role": role,
            "groupID": group_id
        }
    }), 200
