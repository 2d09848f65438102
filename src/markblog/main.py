"""FastAPI application for markblog."""

from __future__ import annotations

from fastapi import FastAPI

from markblog.api import blog_router
from markblog.core.settings import settings
from markblog.db.bootstrap import bootstrap
from markblog.db.session import SessionLocal, engine

app = FastAPI(
    title=settings.app_name,
    description="Minimal multi-user blog",
    version=settings.app_version,
    debug=settings.debug,
)

app.include_router(blog_router)


@app.on_event("startup")
def on_startup() -> None:
    """Create the posts table if absent and seed the default users."""
    with SessionLocal() as session:
        bootstrap(engine, session, settings.seed_users)
