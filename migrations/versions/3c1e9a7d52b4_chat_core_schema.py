"""chat core schema

Revision ID: 3c1e9a7d52b4
Revises:
Create Date: 2026-10-17 10:12:41.318204

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3c1e9a7d52b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

BigIntId = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    """Create users, chats, chat participants and messages."""
    op.create_table(
        "user_account",
        sa.Column("id", BigIntId, autoincrement=True, nullable=False),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("role", sa.Text(), nullable=False),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_table(
        "chat",
        sa.Column("id", BigIntId, autoincrement=True, nullable=False),
        sa.Column("initiator_id", BigIntId, nullable=True),
        sa.Column("recipient_id", BigIntId, nullable=True),
        sa.Column("pair_key", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["initiator_id"], ["user_account.id"]),
        sa.ForeignKeyConstraint(["recipient_id"], ["user_account.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("pair_key", name="uq_chat_pair_key"),
    )
    op.create_table(
        "chat_participant",
        sa.Column("chat_id", BigIntId, nullable=False),
        sa.Column("user_id", BigIntId, nullable=False),
        sa.ForeignKeyConstraint(["chat_id"], ["chat.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["user_account.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("chat_id", "user_id"),
    )
    op.create_table(
        "message",
        sa.Column("id", BigIntId, autoincrement=True, nullable=False),
        sa.Column("chat_id", BigIntId, nullable=False),
        sa.Column("author_id", BigIntId, nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["author_id"], ["user_account.id"]),
        sa.ForeignKeyConstraint(["chat_id"], ["chat.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_message_chat_created", "message", ["chat_id", "created_at"])


def downgrade() -> None:
    """Drop the chat core tables."""
    op.drop_index("ix_message_chat_created", table_name="message")
    op.drop_table("message")
    op.drop_table("chat_participant")
    op.drop_table("chat")
    op.drop_table("user_account")
