"""SQLAlchemy model for platform users."""

from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column, validates

from learnhub.db.session import Base
from learnhub.db.types import BigIntId

ROLE_STUDENT = "student"
ROLE_TEACHER = "teacher"
ROLE_ADMIN = "admin"
ROLES = frozenset({ROLE_STUDENT, ROLE_TEACHER, ROLE_ADMIN})


class User(Base):
    """Platform account.

    Accounts are created and authenticated elsewhere; the chat core only reads
    them by identifier or username.
    """

    __tablename__ = "user_account"

    id: Mapped[int] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False, default=ROLE_STUDENT)
    avatar: Mapped[str | None] = mapped_column(Text, nullable=True)

    @validates("role")
    def validate_role(self, key: str, value: str) -> str:
        """Reject roles outside student, teacher and admin."""
        if value not in ROLES:
            raise ValueError(f"Unknown role: {value!r}")
        return value
