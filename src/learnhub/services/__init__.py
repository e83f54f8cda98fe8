"""Business logic services for the LearnHub chat core."""

from .access import AccessGuard, get_access_guard
from .errors import (
    ChatAccessForbiddenError,
    ChatConflictError,
    ChatError,
    ChatNotFoundError,
    UserNotFoundError,
)

__all__ = [
    "AccessGuard", "get_access_guard",
    "ChatError",
    "ChatAccessForbiddenError",
    "ChatConflictError",
    "ChatNotFoundError",
    "UserNotFoundError",
]
