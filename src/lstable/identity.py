"""Owner id to user name resolution."""

import logging
import pwd
from collections.abc import Callable

logger = logging.getLogger(__name__)

OwnerLookup = Callable[[int], str | None]


def lookup_user_name(uid: int) -> str | None:
    """Look up a numeric user id in the POSIX user database.

    Args:
        uid: Numeric owner id

    Returns:
        The login name, or None if the id has no entry
    """
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        logger.debug("No user database entry for uid %s", uid)
        return None
