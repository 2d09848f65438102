"""SQLAlchemy models for markblog."""

from .post import Post

__all__ = ["Post"]
