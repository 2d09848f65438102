"""Table creation and demo-content seeding run at startup."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import exists, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from markblog.db.session import Base
from markblog.models.post import Post

logger = logging.getLogger(__name__)


def seed_body(user: str) -> str:
    """Return the placeholder body used for a seeded user's first post."""
    return f"{user}'s body content"


def create_tables(engine: Engine) -> None:
    """Create all database tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)


def drop_tables(engine: Engine) -> None:
    """Drop all database tables."""
    Base.metadata.drop_all(bind=engine)


def seed_posts(session: Session, users: Iterable[str]) -> int:
    """Insert one placeholder post per user unless an identical row exists.

    A row counts as identical when title, body and user all match, so
    running this twice never duplicates seeded content.

    Returns:
        Number of rows inserted.
    """
    inserted = 0
    for user in users:
        title, body = user, seed_body(user)
        already_seeded = session.scalar(
            select(
                exists().where(
                    Post.title == title,
                    Post.body == body,
                    Post.user == user,
                )
            )
        )
        if already_seeded:
            logger.debug("Seed post for %s already present", user)
            continue
        session.add(Post(title=title, body=body, user=user))
        session.flush()
        inserted += 1
        logger.info("Seeded default post for %s", user)
    session.commit()
    return inserted


def bootstrap(engine: Engine, session: Session, users: Iterable[str]) -> int:
    """Create the schema and seed default users; return the rows inserted."""
    create_tables(engine)
    return seed_posts(session, users)
