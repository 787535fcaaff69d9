"""Ownership guard for user-scoped records."""

import enum
import logging

from app.errors import ForbiddenError

logger = logging.getLogger(__name__)


class Access(enum.Enum):
    ALLOW = "allow"
    DENY = "deny"


def check(record, caller_id: str) -> Access:
    """Decide access to an existing record. Pure; the caller handles not-found."""
    if record.owner_id == caller_id:
        return Access.ALLOW
    return Access.DENY


def authorize(record, caller_id: str) -> None:
    """Raise ForbiddenError unless ``caller_id`` owns ``record``."""
    if check(record, caller_id) is Access.DENY:
        logger.warning("User %s denied access to %s %s", caller_id, type(record).__name__, record.id)
        raise ForbiddenError("Not authorized")
