"""Create the database schema and the configured public chat.

Usage:
    python -m learnhub.scripts.init_db [--public-chat-id ID]
"""

from __future__ import annotations

import argparse

from learnhub.core.settings import settings
from learnhub.db.session import SessionLocal, create_tables
from learnhub.repositories.chat_repo import ChatRepository


def init_db(public_chat_id: int | None = None) -> int | None:
    """Create all tables and ensure the public chat row exists.

    Returns:
        Identifier of the public chat, or None when no public chat is configured.
    """
    create_tables()
    if public_chat_id is None:
        return None
    with SessionLocal() as db:
        chat = ChatRepository(db).create_public(public_chat_id)
        return chat.id


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--public-chat-id",
        type=int,
        default=settings.public_chat_id,
        help="Identifier of the chat readable by every user (default: PUBLIC_CHAT_ID)",
    )
    args = parser.parse_args()

    public_chat_id = init_db(args.public_chat_id)
    print("Database initialized.")
    if public_chat_id is not None:
        print(f"Public chat: {public_chat_id}")


if __name__ == "__main__":
    main()
