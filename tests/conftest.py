from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_USERS"] = "[]"

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from markblog.db.bootstrap import create_tables, drop_tables
from markblog.db.session import Base, SessionLocal
from markblog.db.session import engine as app_engine
from markblog.db.session import get_db as app_get_session
from markblog.main import app as fastapi_app
from markblog.models import Post
from markblog.repositories.post_repo import PostRepository


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    create_tables(app_engine)
    try:
        yield app_engine
    finally:
        drop_tables(app_engine)


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    session = SessionLocal()
    try:
        yield session
    finally:
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


@pytest.fixture()
def repo(db_session: Session) -> PostRepository:
    return PostRepository(db_session)


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Return a factory that persists a post and returns it."""

    def _make_post(user: str, title: str = "A title", body: str = "A body") -> Post:
        post = Post(title=title, body=body, user=user)
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post

    return _make_post
