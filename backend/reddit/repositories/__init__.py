"""Data access for ORM models."""

from reddit.repositories.post_repository import PostRepository

__all__ = ["PostRepository"]
