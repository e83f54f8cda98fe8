"""SQLAlchemy models for the LearnHub chat core."""

from .chat import Chat, chat_participant, pair_key_for
from .message import Message
from .user import ROLE_ADMIN, ROLE_STUDENT, ROLE_TEACHER, ROLES, User

__all__ = [
    "Chat", "chat_participant", "pair_key_for",
    "Message",
    "User", "ROLES", "ROLE_ADMIN", "ROLE_STUDENT", "ROLE_TEACHER",
]
