import logging

from models.groups import Group

logger = logging.getLogger(__name__)


def is_user_admin_of_group(user_id, group_id, groups=Group):
    """
    True iff the group exists and lists `user_id` as a member with the
    "admin" role. Any lookup failure counts as "not an admin".
    """
    try:
        group = groups.find_by_id(group_id)
        if not group:
            return False

        # Any entry for the user may carry the role; entries are not unique
        return any(
            str(member.get("user")) == str(user_id) and member.get("role") == "admin"
            for member in group.get("members") or []
        )
    except Exception as e:
        logger.warning("Error checking admin status of %s in %s: %s", user_id, group_id, e)
        return False
