"""Service-level helpers for browsing and creating posts."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from markblog.db.mapper import MappedRecord
from markblog.repositories.post_repo import PostRepository
from markblog.models.post import Post
from markblog.schemas.post import PostCreate

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class PostNotFoundError(LookupError):
    """Raised when no post matches the requested id and owner."""

    def __init__(self, post_id: str | int, user: str) -> None:
        super().__init__(f"No post {post_id!r} owned by {user!r}")
        self.post_id = post_id
        self.user = user


def unique_users(records: Iterable[MappedRecord]) -> list[MappedRecord]:
    """Drop records whose ``user`` was already seen, keeping first-seen order."""
    seen: set[Any] = set()
    unique: list[MappedRecord] = []
    for record in records:
        user = record.get("user")
        if user in seen:
            continue
        seen.add(user)
        unique.append(record)
    return unique


def list_users(repo: PostRepository) -> list[MappedRecord]:
    """Return the user directory derived from the authors of all posts."""
    return unique_users(repo.list_authors())


def get_post(repo: PostRepository, post_id: str | int, user: str) -> MappedRecord:
    """Return the post with ``post_id`` owned by ``user``.

    Raises:
        PostNotFoundError: If the id does not exist or belongs to someone else.
    """
    posts = repo.find_for_user(post_id, user)
    if not posts:
        logger.info("Post %s for user %s not found", post_id, user)
        raise PostNotFoundError(post_id, user)
    return posts[0]


def is_form_encoded(content_type: str | None) -> bool:
    """Return True for ``application/x-www-form-urlencoded`` bodies, ignoring parameters."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == FORM_CONTENT_TYPE


def decode_post_form(form: Mapping[str, Any]) -> PostCreate:
    """Build the submission payload from decoded form fields."""
    return PostCreate.model_validate(
        {key: form[key] for key in ("title", "body") if key in form}
    )


def create_post(repo: PostRepository, *, user: str, payload: PostCreate) -> Post:
    """Persist a new post owned by ``user``."""
    post = repo.create(title=payload.title, body=payload.body, user=user)
    logger.info("Created post %s for user %s", post.id, user)
    return post
