"""Pydantic schemas for response serialization."""

from reddit.schemas.post import PostResponse
from reddit.schemas.pagination import PagedListResponse

__all__ = [
    "PostResponse",
    "PagedListResponse",
]
