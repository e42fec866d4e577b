"""Post model."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from reddit.database import Base


class Post(Base):
    """Model representing a user-submitted post."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    upvote: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    downvote: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    @property
    def score(self) -> int:
        """Net votes."""
        return self.upvote - self.downvote

    def __repr__(self) -> str:
        return f"<Post {self.id}: {self.title[:50]}>"
