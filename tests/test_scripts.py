"""Tests for operational scripts."""

from sqlalchemy.orm import sessionmaker

from learnhub.db.session import Base
from learnhub.models import Chat
from learnhub.scripts import init_db as init_db_module


def test_init_db_creates_public_chat(engine, db_session, mocker):
    mocker.patch.object(
        init_db_module,
        "create_tables",
        side_effect=lambda: Base.metadata.create_all(bind=engine),
    )
    mocker.patch.object(init_db_module, "SessionLocal", sessionmaker(bind=engine))

    assert init_db_module.init_db(77) == 77
    assert init_db_module.init_db(77) == 77

    chats = db_session.query(Chat).all()
    assert [chat.id for chat in chats] == [77]
    assert chats[0].participant_ids == set()


def test_init_db_without_public_chat(engine, db_session, mocker):
    create_tables = mocker.patch.object(init_db_module, "create_tables")

    assert init_db_module.init_db(None) is None
    create_tables.assert_called_once_with()
    assert db_session.query(Chat).count() == 0


def test_migrate_claims_public_chat_after_upgrade(engine, db_session, mocker):
    from learnhub.scripts import migrate as migrate_module

    upgrade = mocker.patch.object(migrate_module.command, "upgrade")
    mocker.patch.object(migrate_module, "SessionLocal", sessionmaker(bind=engine))

    migrate_module.run_upgrade_head(public_chat_id=5)

    upgrade.assert_called_once()
    assert upgrade.call_args.args[1] == "head"
    chat = db_session.get(Chat, 5)
    assert chat is not None
    assert not chat.is_direct
