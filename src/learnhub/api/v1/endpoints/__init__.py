"""API endpoint modules for version 1."""

from .chats import router as chats_router
from .messages import router as messages_router
from .users import router as users_router

__all__ = [
    "chats_router",
    "messages_router",
    "users_router",
]
