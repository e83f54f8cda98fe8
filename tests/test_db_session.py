"""Tests for engine and session configuration."""

from learnhub.db import session as session_module


def test_sqlite_engine_options_allow_threadpool_use():
    options = session_module.engine_options("sqlite:///./learnhub.db")

    assert options["connect_args"] == {"check_same_thread": False}
    assert "pool_pre_ping" not in options


def test_server_engine_options_ping_connections():
    options = session_module.engine_options("postgresql+psycopg://localhost/learnhub")

    assert options["pool_pre_ping"] is True
    assert "connect_args" not in options


def test_get_db_closes_session(mocker):
    db = mocker.MagicMock()
    mocker.patch.object(session_module, "SessionLocal", return_value=db)

    dependency = session_module.get_db()
    assert next(dependency) is db
    dependency.close()

    db.close.assert_called_once_with()
