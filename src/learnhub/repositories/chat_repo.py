"""Data access helpers for chats, participants and messages."""
from __future__ import annotations

from sqlalchemy import and_, or_, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from learnhub.models import Chat, Message, User, chat_participant, pair_key_for
from learnhub.services.errors import ChatConflictError

__all__ = ["ChatRepository"]


class ChatRepository:
    """Thin wrapper around database access for chat entities.

    Every chat returned carries its participants eagerly loaded so access
    checks need no further queries.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, chat_id: int) -> Chat | None:
        """Return a chat by identifier."""
        stmt = (
            select(Chat)
            .where(Chat.id == chat_id)
            .options(selectinload(Chat.participants))
        )
        return self.session.execute(stmt).scalars().first()

    def list_for_user(self, user_id: int) -> list[Chat]:
        """Return every chat the user participates in, each exactly once."""
        stmt = (
            select(Chat)
            .join(chat_participant, chat_participant.c.chat_id == Chat.id)
            .where(chat_participant.c.user_id == user_id)
            .options(selectinload(Chat.participants))
            .distinct()
            .order_by(Chat.id)
        )
        return list(self.session.execute(stmt).scalars().unique())

    def find_direct_between(self, user_a_id: int, user_b_id: int) -> Chat | None:
        """Return the direct chat between two users regardless of who opened it."""
        stmt = (
            select(Chat)
            .where(
                or_(
                    and_(Chat.initiator_id == user_a_id, Chat.recipient_id == user_b_id),
                    and_(Chat.initiator_id == user_b_id, Chat.recipient_id == user_a_id),
                )
            )
            .options(selectinload(Chat.participants))
            .order_by(Chat.id)
            .limit(1)
        )
        return self.session.execute(stmt).scalars().first()

    def create_direct(self, initiator: User, recipient: User) -> Chat:
        """Insert a direct chat together with both participants.

        The chat row and its participant rows are committed in one transaction.

        Args:
            initiator: User opening the chat.
            recipient: User the chat is opened with.

        Returns:
            The persisted chat with participants populated.

        Raises:
            ValueError: If both users are the same account.
            ChatConflictError: If a chat for this pair was committed concurrently.
            IntegrityError: For any other constraint violation.
        """
        if initiator.id == recipient.id:
            raise ValueError("A direct chat needs two distinct users")

        chat = Chat(
            initiator_id=initiator.id,
            recipient_id=recipient.id,
            pair_key=pair_key_for(initiator.id, recipient.id),
        )
        chat.participants = [initiator, recipient]
        self.session.add(chat)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            if not _is_pair_key_violation(exc):
                raise
            raise ChatConflictError(
                f"Direct chat between users {initiator.id} and {recipient.id} already exists"
            ) from exc
        return chat

    def create_public(self, chat_id: int) -> Chat:
        """Insert the participant-less public chat if it is missing.

        Raises:
            ChatConflictError: If a direct chat already holds ``chat_id``.
        """
        chat = self.get_by_id(chat_id)
        if chat is not None:
            if chat.is_direct:
                raise ChatConflictError(
                    f"Chat {chat_id} is a direct chat and cannot be the public chat"
                )
            return chat
        chat = Chat(id=chat_id)
        self.session.add(chat)
        self.session.flush()
        self._sync_chat_id_sequence()
        self.session.commit()
        return chat

    def _sync_chat_id_sequence(self) -> None:
        """Move the PostgreSQL id sequence past explicitly inserted chat ids."""
        if self.session.get_bind().dialect.name != "postgresql":
            return
        self.session.execute(
            text(
                "SELECT setval(pg_get_serial_sequence('chat', 'id'), "
                "(SELECT MAX(id) FROM chat))"
            )
        )

    def append_message(self, chat_id: int, author_id: int, body: str) -> Message:
        """Insert a message into a chat and return the persisted instance."""
        message = Message(chat_id=chat_id, author_id=author_id, body=body)
        self.session.add(message)
        self.session.commit()
        self.session.refresh(message)
        return message

    def list_messages(self, chat_id: int, page: int, page_size: int) -> list[Message]:
        """Return one page of a chat's messages, newest first.

        Pages are 1-indexed; a page past the end is empty.
        """
        if page < 1:
            raise ValueError("page must be >= 1")
        if page_size < 1:
            raise ValueError("page_size must be >= 1")

        stmt = (
            select(Message)
            .where(Message.chat_id == chat_id)
            .order_by(Message.created_at.desc(), Message.id.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        return list(self.session.execute(stmt).scalars())

    def get_user(self, user_id: int) -> User | None:
        """Return a user by identifier."""
        return self.session.get(User, user_id)

    def search_users(self, fragment: str, limit: int) -> list[User]:
        """Return users whose username contains ``fragment``, case-insensitively."""
        stmt = (
            select(User)
            .where(User.username.icontains(fragment, autoescape=True))
            .order_by(User.username)
            .limit(limit)
        )
        return list(self.session.execute(stmt).scalars())


def _is_pair_key_violation(exc: IntegrityError) -> bool:
    """Return True when ``exc`` comes from the unique pair key on ``chat``."""
    diag = getattr(exc.orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)
    if constraint is not None:
        return constraint == "uq_chat_pair_key"
    # SQLite reports the column rather than the constraint name.
    detail = str(exc.orig)
    return "uq_chat_pair_key" in detail or "chat.pair_key" in detail
