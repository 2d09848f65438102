"""HTTP endpoints for markblog."""

from .routes import router as blog_router

__all__ = ["blog_router"]
