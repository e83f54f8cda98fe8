"""Version 1 API endpoints."""

from .endpoints import chats_router, messages_router, users_router

__all__ = [
    "chats_router",
    "messages_router",
    "users_router",
]
