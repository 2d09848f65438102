"""Pydantic schemas for post submission."""

from pydantic import BaseModel, ConfigDict


class PostCreate(BaseModel):
    """Fields decoded from the new-post form; missing fields are empty."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    body: str = ""
