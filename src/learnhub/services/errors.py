"""Exceptions raised by the conversation core.

Callers map these onto transport responses; the core keeps ``NotFound`` and
``Forbidden`` distinct and leaves it to the transport layer how much to reveal.
"""

from __future__ import annotations


class ChatError(RuntimeError):
    """Base exception raised for conversation failures."""


class ChatNotFoundError(ChatError):
    """Raised when a referenced chat does not exist."""

    def __init__(self, chat_id: int) -> None:
        super().__init__(f"Chat {chat_id} not found")
        self.chat_id = chat_id


class UserNotFoundError(ChatError):
    """Raised when a referenced user does not exist."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class ChatAccessForbiddenError(ChatError):
    """Raised when an authenticated user is not allowed to use a chat.

    The message deliberately carries no chat contents or participant data.
    """

    def __init__(self) -> None:
        super().__init__("Forbidden")


class ChatConflictError(ChatError):
    """Raised when a direct chat for the same pair of users already exists.

    The resolver recovers from this once by repeating its lookup; seeing it a
    second time means the store is inconsistent.
    """
