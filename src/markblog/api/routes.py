"""Blog page endpoints.

Five routes: the user directory, a user's post list, the submission form,
a single post and the form target that creates a post.
"""
from __future__ import annotations

import logging
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from markblog.core.settings import settings
from markblog.db.session import get_db
from markblog.render import PageRenderer
from markblog.repositories.post_repo import PostRepository
from markblog.services import post_service
from markblog.services.post_service import PostNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["blog"])


def get_renderer() -> PageRenderer:
    """Return a renderer configured from settings."""
    return PageRenderer(escape_html=settings.html_escape)


def get_post_repo(db: Annotated[Session, Depends(get_db)]) -> PostRepository:
    """Return a post repository bound to the request session."""
    return PostRepository(db, log_row_count=settings.log_row_count)


RepoDep = Annotated[PostRepository, Depends(get_post_repo)]
RendererDep = Annotated[PageRenderer, Depends(get_renderer)]


@router.get("/", response_class=HTMLResponse)
async def list_users(repo: RepoDep, renderer: RendererDep) -> str:
    """List every distinct author, in order of first appearance."""
    return renderer.user_list(post_service.list_users(repo))


@router.get("/{user}/", response_class=HTMLResponse)
async def list_titles(user: str, repo: RepoDep, renderer: RendererDep) -> str:
    """List the titles of every post owned by ``user``."""
    return renderer.title_list(user, repo.list_for_user(user))


@router.get("/{user}/post/new", response_class=HTMLResponse)
async def new_post_form(user: str, renderer: RendererDep) -> str:
    """Serve the empty submission form."""
    return renderer.new_post(user)


@router.get("/{user}/post/{post_id}", response_class=HTMLResponse)
async def show_post(
    user: str,
    post_id: str,
    repo: RepoDep,
    renderer: RendererDep,
) -> str:
    """Show a single post.

    Raises:
        HTTPException: 404 when the id does not exist or is owned by another user.
    """
    try:
        post = post_service.get_post(repo, post_id, user)
    except PostNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="invalid post id",
        ) from exc
    return renderer.show_post(user, post)


@router.post("/{user}/post")
async def create_post(user: str, request: Request, repo: RepoDep) -> Response:
    """Create a post from a url-encoded form and redirect to the user's list.

    Bodies of any other content type are ignored: nothing is stored and an
    empty response is returned, unless strict content-type checking is
    enabled, in which case the request is rejected with 415.
    """
    content_type = request.headers.get("content-type")
    if not post_service.is_form_encoded(content_type):
        if settings.strict_form_content_type:
            raise HTTPException(
                status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                detail="unsupported body type",
            )
        logger.warning("Ignoring post for %s with content type %r", user, content_type)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    form = await request.form()
    payload = post_service.decode_post_form(form)
    post_service.create_post(repo, user=user, payload=payload)
    repo.session.commit()
    return RedirectResponse(
        url=f"/{quote(user, safe='')}/",
        status_code=status.HTTP_302_FOUND,
    )
