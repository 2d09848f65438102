"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy.orm import Session

from markblog.db.mapper import MappedRecord, RecordMapper
from markblog.models.post import POSTS_TABLE, Post

__all__ = ["PostRepository"]

SELECT_USERS = f"SELECT user FROM {POSTS_TABLE}"
SELECT_USER_POSTS = f"SELECT id, title, body, user FROM {POSTS_TABLE} WHERE user = ?"
SELECT_USER_POST = f"SELECT id, title, body FROM {POSTS_TABLE} WHERE id = ? AND user = ?"


class PostRepository:
    """Thin wrapper around database access for posts.

    Reads go through :class:`RecordMapper`, so records are keyed by the
    projection text of the statements above.
    """

    def __init__(self, session: Session, *, log_row_count: bool = False) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session
        self.mapper = RecordMapper(
            session,
            count_table=POSTS_TABLE if log_row_count else None,
        )

    def list_authors(self) -> list[MappedRecord]:
        """Return one ``{"user": ...}`` record per post, in store order."""
        return self.mapper.query(SELECT_USERS)

    def list_for_user(self, user: str) -> list[MappedRecord]:
        """Return every post owned by ``user``."""
        return self.mapper.query(SELECT_USER_POSTS, [user])

    def find_for_user(self, post_id: str | int, user: str) -> list[MappedRecord]:
        """Return the posts matching both id and owner (zero or one)."""
        return self.mapper.query(SELECT_USER_POST, [post_id, user])

    def create(self, *, title: str, body: str, user: str) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(title=title, body=body, user=user)
        self.session.add(post)
        self.session.flush()
        return post
