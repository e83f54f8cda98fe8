# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("PUBLIC_CHAT_ID", "1000")
os.environ.setdefault("MESSAGES_PAGE_SIZE", "2")

from learnhub.core.security import create_access_token  # noqa: E402
from learnhub.core.settings import Settings, settings  # noqa: E402
from learnhub.db.session import Base  # noqa: E402
from learnhub.db.session import get_db as app_get_session  # noqa: E402
from learnhub.main import app as fastapi_app  # noqa: E402
from learnhub.models import Chat, User  # noqa: E402
from learnhub.repositories.chat_repo import ChatRepository  # noqa: E402
from learnhub.services.access import AccessGuard  # noqa: E402
from learnhub.services.conversations import ConversationService  # noqa: E402

TEST_DB_URL = "sqlite://"

_USERNAME_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Provide the Settings instance the application runs with."""
    return settings


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory persisting users with unique usernames."""

    def _make_user(username: str | None = None, **fields: object) -> User:
        user = User(username=username or f"user{next(_USERNAME_COUNTER)}", **fields)
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user


@pytest.fixture()
def alice(make_user: Callable[..., User]) -> User:
    return make_user("alice")


@pytest.fixture()
def bob(make_user: Callable[..., User]) -> User:
    return make_user("bob")


@pytest.fixture()
def carol(make_user: Callable[..., User]) -> User:
    return make_user("carol")


@pytest.fixture()
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Return a helper building bearer headers for a user."""

    def _headers(user: User) -> dict[str, str]:
        token = create_access_token(user.id)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def chat_repository(db_session: Session) -> ChatRepository:
    return ChatRepository(db_session)


@pytest.fixture()
def public_chat(chat_repository: ChatRepository, test_settings: Settings) -> Chat:
    """Create the configured public chat."""
    assert test_settings.public_chat_id is not None
    return chat_repository.create_public(test_settings.public_chat_id)


@pytest.fixture()
def access_guard(test_settings: Settings) -> AccessGuard:
    return AccessGuard(test_settings.public_chat_id)


@pytest.fixture()
def conversation_service(db_session: Session, access_guard: AccessGuard) -> ConversationService:
    return ConversationService(db_session, access_guard, page_size=2, user_search_limit=10)
