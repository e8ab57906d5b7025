from models.users import User
from models.groups import Group
from utils.errors import NotFound


def resolve_family_group(user_id, requested_group_id=None):
    """
    Load the group a family request targets: the requested group when
    given, otherwise the user's primary group. The user must exist and
    have a primary group either way.
    """
    user = User.find_by_id(user_id, ["groupID", "additionalGroups"])
    if not user or not user.get("groupID"):
        raise NotFound("User or group not found")

    target_group_id = requested_group_id or user["groupID"]

    group = Group.find_by_id(target_group_id, ["members"])
    if not group or group.get("members") is None:
        raise NotFound("Group not found or has no members")

    return target_group_id, group


def build_family_roster(members):
    # One batch lookup for every member's profile
    member_ids = [member["user"] for member in members]
    users = User.find_many(member_ids, ["firstName", "lastName", "imageURL"])
    user_map = {str(u["_id"]): u for u in users}

    roster = []
    for member in members:
        info = user_map.get(str(member["user"]))
        roster.append({
            "userID": member["user"],
            "fullName": User.full_name(info) if info else "",
            "imageURL": (info or {}).get("imageURL") or None,
            "role": member.get("role"),
            "familialRelation": member.get("familialRelation") or None,
        })
    return roster
