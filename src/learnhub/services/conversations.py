"""Conversation service orchestrating chat listing, reads and posting."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from learnhub.core.settings import settings
from learnhub.models import Chat, Message, User
from learnhub.repositories.chat_repo import ChatRepository
from learnhub.services.access import AccessGuard
from learnhub.services.chat_resolver import ChatResolver
from learnhub.services.errors import (
    ChatAccessForbiddenError,
    ChatNotFoundError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


class ConversationService:
    """Entry point used by the HTTP layer for everything chat related.

    Every path that exposes or adds messages goes through the access guard
    first; nothing is read from a chat the caller may not see.
    """

    def __init__(
        self,
        session: Session,
        access_guard: AccessGuard,
        *,
        page_size: int | None = None,
        user_search_limit: int | None = None,
    ) -> None:
        self.chats = ChatRepository(session)
        self.resolver = ChatResolver(self.chats)
        self.access_guard = access_guard
        self.page_size = page_size or settings.messages_page_size
        self.user_search_limit = user_search_limit or settings.user_search_limit

    def list_my_chats(self, user: User) -> list[Chat]:
        """Return the chats ``user`` participates in, ordered by chat id."""
        return self.chats.list_for_user(user.id)

    def get_chat(self, user: User, chat_id: int) -> Chat:
        """Return a chat the user is allowed to see.

        Raises:
            ChatNotFoundError: If the chat does not exist.
            ChatAccessForbiddenError: If the user may not access it.
        """
        chat = self.chats.get_by_id(chat_id)
        if chat is None:
            raise ChatNotFoundError(chat_id)
        if not self.access_guard.can_access(user, chat):
            logger.warning("User %s denied access to chat %s", user.id, chat_id)
            raise ChatAccessForbiddenError()
        return chat

    def get_messages_page(self, user: User, chat_id: int, page: int = 1) -> list[Message]:
        """Return page ``page`` of a chat's messages, newest first.

        Args:
            user: Authenticated caller.
            chat_id: Chat to read.
            page: 1-indexed page number.

        Returns:
            Up to ``page_size`` messages; empty once past the last page.

        Raises:
            ChatNotFoundError: If the chat does not exist.
            ChatAccessForbiddenError: If the caller may not read the chat. No
                message query is issued in that case.
        """
        chat = self.get_chat(user, chat_id)
        return self.chats.list_messages(chat.id, page, self.page_size)

    def open_direct_chat(self, user: User, recipient_id: int) -> Chat:
        """Return the direct chat between ``user`` and ``recipient_id``, creating it if needed."""
        recipient = self.chats.get_user(recipient_id)
        if recipient is None:
            raise UserNotFoundError(recipient_id)
        return self.resolver.resolve(user, recipient)

    def send_direct_message(self, author: User, recipient_id: int, body: str) -> Message:
        """Send a message to another user, opening their direct chat on first contact."""
        text = _clean_body(body)
        chat = self.open_direct_chat(author, recipient_id)
        return self.chats.append_message(chat.id, author.id, text)

    def post_message(self, author: User, chat_id: int, body: str) -> Message:
        """Post into an existing chat under the same gate as reads."""
        text = _clean_body(body)
        chat = self.get_chat(author, chat_id)
        return self.chats.append_message(chat.id, author.id, text)

    def search_users(self, fragment: str, limit: int | None = None) -> list[User]:
        """Find candidate chat recipients by username fragment."""
        fragment = fragment.strip()
        if not fragment:
            return []
        cap = min(limit or self.user_search_limit, self.user_search_limit)
        return self.chats.search_users(fragment, cap)


def _clean_body(body: str) -> str:
    text = body.strip()
    if not text:
        raise ValueError("Message body must not be empty")
    return text
