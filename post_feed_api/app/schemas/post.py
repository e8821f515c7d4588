"""
Pydantic models for posts.

A ``Post`` is immutable once created: both models are frozen, and the
author is embedded by value.  The serialized shape of ``Post`` is the
one stable contract with API callers, so ``POST /post`` accepts exactly
what ``GET /feed`` and ``GET /post/{id}`` emit.  Validation is strict
and closed: ``created_at`` must be a timezone‑aware ISO‑8601 string,
``id`` a UUID string, and unknown fields are rejected.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


class Author(BaseModel):
    name: str = Field(..., examples=["Me"])

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")


class Post(BaseModel):
    """A single authored entry in the feed."""

    id: UUID = Field(..., examples=["00000000-0000-0000-0000-000000000001"])
    title: str = Field(..., examples=["First Post"])
    body: str = Field(..., examples=["This is the first post ever"])
    author: Author
    created_at: AwareDatetime = Field(..., examples=["2024-01-01T00:00:00Z"])

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    @classmethod
    def new(cls, title: str, body: str, author: Author) -> "Post":
        """Build a post with a fresh identifier stamped with the current time."""
        return cls(
            id=uuid4(),
            title=title,
            body=body,
            author=author,
            created_at=datetime.now(timezone.utc),
        )
