"""Data access layer."""

from .post_repo import PostRepository

__all__ = ["PostRepository"]
