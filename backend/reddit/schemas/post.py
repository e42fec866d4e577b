"""Pydantic schemas for posts."""

from pydantic import BaseModel, ConfigDict


class PostResponse(BaseModel):
    """Schema for post response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    upvote: int
    downvote: int
    score: int
