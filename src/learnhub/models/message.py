"""Models describing messages posted into chats."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from learnhub.db.session import Base
from learnhub.db.time import utcnow
from learnhub.db.types import BigIntId

from .user import User


class Message(Base):
    """Immutable message belonging to exactly one chat."""

    __tablename__ = "message"
    __table_args__ = (Index("ix_message_chat_created", "chat_id", "created_at"),)

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    chat_id: Mapped[int] = mapped_column(
        BigIntId, ForeignKey("chat.id", ondelete="CASCADE"), nullable=False
    )
    author_id: Mapped[int] = mapped_column(BigIntId, ForeignKey("user_account.id"), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    # Pages are ordered newest first on (created_at, id).
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    author: Mapped[User] = relationship(User)
