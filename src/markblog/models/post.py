"""SQLAlchemy model for blog posts."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from markblog.db.session import Base

POSTS_TABLE = "posts"


class Post(Base):
    """A titled text post owned by a single author handle.

    There is no separate user table: the set of users is the distinct
    values of ``user`` across all posts.
    """

    __tablename__ = POSTS_TABLE
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    user: Mapped[str | None] = mapped_column(Text, nullable=True)
