"""Pydantic schemas for request payloads."""

from .post import PostCreate

__all__ = ["PostCreate"]
