"""Post repository."""

import logging
from collections.abc import Iterable
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from reddit.config import get_settings
from reddit.models import Post
from reddit.utils.pagination import PagedList, paginate_query

logger = logging.getLogger(__name__)

POST_ORDERINGS = {
    "id": (Post.id.asc(),),
    "newest": (Post.id.desc(),),
    "score": ((Post.upvote - Post.downvote).desc(), Post.id.asc()),
}


class PostRepository:
    """Reads and writes posts through an async session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add_many(self, posts: Iterable[Post]) -> list[Post]:
        """Add posts to the session and flush them."""
        posts = list(posts)
        self.session.add_all(posts)
        await self.session.flush()
        logger.debug(f"Added {len(posts)} posts")
        return posts

    async def get_paged(
        self,
        page_number: int,
        page_size: int | None = None,
        order_by: str = "id",
    ) -> PagedList[Post]:
        """
        Fetch one page of posts.

        Args:
            page_number: Page to return (1-indexed)
            page_size: Posts per page, defaults to the configured page size
            order_by: One of "id", "newest" or "score"
        """
        if order_by not in POST_ORDERINGS:
            raise ValueError(
                f"Unknown ordering {order_by!r}, expected one of {sorted(POST_ORDERINGS)}"
            )
        if page_size is None:
            page_size = get_settings().default_page_size

        query = select(Post).order_by(*POST_ORDERINGS[order_by])
        return await paginate_query(self.session, query, page_number, page_size)
