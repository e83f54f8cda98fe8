"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .chat import (
    ChatRead,
    DirectChatCreate,
    DirectMessageCreate,
    MessageCreate,
    MessagePage,
    MessageRead,
)
from .user import UserSearchResponse, UserSummary

__all__ = [
    "ChatRead", "DirectChatCreate",
    "DirectMessageCreate", "MessageCreate", "MessagePage", "MessageRead",
    "UserSearchResponse", "UserSummary",
]
