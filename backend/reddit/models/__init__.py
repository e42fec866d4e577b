"""SQLAlchemy ORM models."""

from reddit.models.post import Post

__all__ = ["Post"]
