"""SQLAlchemy models for chats and their participant sets."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Table, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from learnhub.db.session import Base
from learnhub.db.time import utcnow
from learnhub.db.types import BigIntId

from .user import User

# Presence of a row grants read access; the composite key keeps the set unique.
chat_participant = Table(
    "chat_participant",
    Base.metadata,
    Column("chat_id", BigIntId, ForeignKey("chat.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "user_id",
        BigIntId,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


def pair_key_for(user_a_id: int, user_b_id: int) -> str:
    """Return the order-independent key identifying a direct chat between two users."""
    low, high = sorted((user_a_id, user_b_id))
    return f"{low}:{high}"


class Chat(Base):
    """Conversation between users.

    Direct chats record who opened them and carry a canonical ``pair_key`` so the
    database rejects a second chat for the same pair of users. Non-direct chats,
    such as the public chat, leave initiator, recipient and pair key empty.
    """

    __tablename__ = "chat"
    __table_args__ = (UniqueConstraint("pair_key", name="uq_chat_pair_key"),)

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    initiator_id: Mapped[int | None] = mapped_column(
        BigIntId, ForeignKey("user_account.id"), nullable=True
    )
    recipient_id: Mapped[int | None] = mapped_column(
        BigIntId, ForeignKey("user_account.id"), nullable=True
    )
    pair_key: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    initiator: Mapped[User | None] = relationship(User, foreign_keys=[initiator_id])
    recipient: Mapped[User | None] = relationship(User, foreign_keys=[recipient_id])
    participants: Mapped[list[User]] = relationship(
        User,
        secondary=chat_participant,
        order_by=User.id,
    )

    @property
    def is_direct(self) -> bool:
        """Return True for chats opened between two specific users."""
        return self.pair_key is not None

    @property
    def participant_ids(self) -> set[int]:
        """Return identifiers of every user attached to the chat."""
        return {user.id for user in self.participants}
