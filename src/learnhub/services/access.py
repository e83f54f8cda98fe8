"""Authorization predicate guarding chat contents."""

from __future__ import annotations

from learnhub.core.settings import settings
from learnhub.models import Chat, User


class AccessGuard:
    """Decide whether a user may read or post in a chat.

    The public chat, when one is configured, is open to every user. Any other
    chat is open only to the users in its participant set.
    """

    def __init__(self, public_chat_id: int | None = None) -> None:
        self.public_chat_id = public_chat_id

    def is_public(self, chat: Chat) -> bool:
        """Return True when ``chat`` is the configured public chat.

        A direct chat is never public, even if it holds the configured id.
        """
        if self.public_chat_id is None or chat.is_direct:
            return False
        return chat.id == self.public_chat_id

    def can_access(self, user: User | None, chat: Chat | None) -> bool:
        """Return True if ``user`` may see the messages of ``chat``.

        Total over its inputs: a missing user or chat is simply denied.
        """
        if user is None or chat is None:
            return False
        if self.is_public(chat):
            return True
        return user.id in chat.participant_ids


def get_access_guard() -> AccessGuard:
    """Return an access guard bound to the configured public chat."""
    return AccessGuard(settings.public_chat_id)
