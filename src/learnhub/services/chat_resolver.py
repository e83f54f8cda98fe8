"""Get-or-create for the single direct chat between two users."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from learnhub.models import Chat, User
from learnhub.services.errors import ChatConflictError

if TYPE_CHECKING:
    from learnhub.repositories.chat_repo import ChatRepository

logger = logging.getLogger(__name__)


class ChatResolver:
    """Return the direct chat for an unordered pair of users, creating it once.

    Uniqueness of the pair is enforced by the store. When two callers race
    past the lookup, the loser's insert is rejected and it repeats the lookup
    to pick up the winner's chat.
    """

    def __init__(self, repository: ChatRepository) -> None:
        self.repository = repository

    def resolve(self, initiator: User, recipient: User) -> Chat:
        """Return the existing direct chat between the users or create it.

        An existing chat is returned untouched, even when the caller's roles
        are swapped relative to the stored initiator and recipient.

        Raises:
            ValueError: If both users are the same account.
            ChatConflictError: If creation conflicted and the chat still
                cannot be found afterwards.
        """
        initiator_id, recipient_id = initiator.id, recipient.id
        if initiator_id == recipient_id:
            raise ValueError("A direct chat needs two distinct users")

        chat = self.repository.find_direct_between(initiator_id, recipient_id)
        if chat is not None:
            return chat

        try:
            chat = self.repository.create_direct(initiator, recipient)
        except ChatConflictError:
            logger.info(
                "Direct chat between users %s and %s created concurrently; repeating lookup",
                initiator_id,
                recipient_id,
            )
            chat = self.repository.find_direct_between(initiator_id, recipient_id)
            if chat is None:
                logger.error(
                    "Direct chat between users %s and %s conflicted but cannot be found",
                    initiator_id,
                    recipient_id,
                )
                raise
            return chat

        logger.info(
            "Created direct chat %s between users %s and %s",
            chat.id,
            initiator_id,
            recipient_id,
        )
        return chat
