"""
Test configuration and shared fixtures for the clinic chatbot test suite.

Uses an in-memory SQLite database. Each test gets its own engine with the
schema created from the SQLAlchemy models, so tests never share state.
"""

import os

# Point the application engine at a throwaway database before anything imports core.database
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from typing import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import Base, get_db
from chatbot.conversation import ChatbotConversation
from chatbot.types import Locale
import models  # noqa: F401  (registers tables on Base.metadata)


@pytest.fixture(scope="function")
def db_engine():
    """
    Create an in-memory database engine for a single test.

    StaticPool keeps one connection alive so every session (including the
    ones FastAPI opens in its threadpool) sees the same in-memory database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Provide a database session bound to the per-test engine."""
    TestingSession = sessionmaker(bind=db_engine, autoflush=False, expire_on_commit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session) -> Generator[TestClient, None, None]:
    """Create test client with database override."""
    from main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def conversation() -> ChatbotConversation:
    """An English conversation already at the body-area question."""
    conv = ChatbotConversation(locale=Locale.EN, typing_delays=False)
    conv.start()
    return conv


@pytest.fixture
def zh_conversation() -> ChatbotConversation:
    """A Traditional Chinese conversation already at the body-area question."""
    conv = ChatbotConversation(locale=Locale.ZH_TW, typing_delays=False)
    conv.start()
    return conv
