"""Apply Alembic migrations up to the latest revision.

The configured public chat is created right after the upgrade so its id is
taken before any direct chat can claim it.
"""
from __future__ import annotations

import os

from alembic import command
from alembic.config import Config

from learnhub.core.settings import settings
from learnhub.db.session import SessionLocal
from learnhub.repositories.chat_repo import ChatRepository

MIGRATIONS_DIR = os.path.join(os.path.dirname(__file__), "..", "..", "..", "migrations")


def run_upgrade_head(public_chat_id: int | None = None) -> None:
    cfg = Config(os.path.join(MIGRATIONS_DIR, "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", settings.database_url_sync)
    cfg.set_main_option("script_location", os.path.abspath(MIGRATIONS_DIR))
    command.upgrade(cfg, "head")

    if public_chat_id is None:
        public_chat_id = settings.public_chat_id
    if public_chat_id is not None:
        with SessionLocal() as db:
            ChatRepository(db).create_public(public_chat_id)


if __name__ == "__main__":
    run_upgrade_head()
