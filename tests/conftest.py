# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Generator, Iterator
from datetime import timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from neoping_feed.core.security import create_access_token
from neoping_feed.db.session import Base
from neoping_feed.db.session import get_db as app_get_session
from neoping_feed.db.time import utcnow
from neoping_feed.main import app as fastapi_app
from neoping_feed.models import ContentItem, ContentKind, News, Post, User

TEST_DB_URL = "sqlite://"


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
    # Services commit and roll back for real, so each test wipes the tables
    # afterwards instead of wrapping everything in an outer transaction.
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
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


def _make_user(db_session: Session, username: str) -> User:
    user = User(username=username, display_name=username.title(), email=f"{username}@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture()
def alice(db_session: Session) -> User:
    """Primary author used by most tests."""
    return _make_user(db_session, "alice")


@pytest.fixture()
def bob(db_session: Session) -> User:
    """Second user, typically the one interacting with alice's content."""
    return _make_user(db_session, "bob")


@pytest.fixture()
def alice_headers(alice: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(alice.username)}"}


@pytest.fixture()
def bob_headers(bob: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(bob.username)}"}


@pytest.fixture()
def make_item(db_session: Session) -> Callable[..., ContentItem]:
    """Factory inserting committed content with strictly increasing timestamps."""
    base = utcnow() - timedelta(days=1)
    created = {"n": 0}

    def _make(
        author: User,
        *,
        kind: ContentKind = ContentKind.POST,
        title: str = "Untitled",
        body: str = "",
        category: str | None = None,
        like_count: int = 0,
        upvotes: int = 0,
    ) -> ContentItem:
        created["n"] += 1
        model = Post if kind is ContentKind.POST else News
        item = model(
            author_id=author.id,
            title=title,
            body=body,
            category=category,
            created_at=base + timedelta(seconds=created["n"]),
            like_count=like_count,
            upvotes=upvotes,
            comment_count=0,
        )
        db_session.add(item)
        db_session.commit()
        db_session.refresh(item)
        return item

    return _make
