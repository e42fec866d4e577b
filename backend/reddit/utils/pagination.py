"""Pagination utilities."""

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from reddit.exceptions import InvalidPaginationParameter

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
T_co = TypeVar("T_co", covariant=True)


class PageSource(Protocol[T_co]):
    """An ordered collection that can report its size and return a slice."""

    async def count(self) -> int:
        ...

    async def fetch(self, offset: int, limit: int) -> Sequence[T_co]:
        ...


class QuerySource(Generic[T]):
    """
    Page source backed by a SQLAlchemy select statement.

    The statement's ORDER BY decides page contents; an unordered statement
    may return different rows for the same page across calls.
    """

    def __init__(self, session: AsyncSession, statement: Select[Any]):
        self.session = session
        self.statement = statement

    async def count(self) -> int:
        count_query = select(func.count()).select_from(
            self.statement.order_by(None).subquery()
        )
        return (await self.session.execute(count_query)).scalar() or 0

    async def fetch(self, offset: int, limit: int) -> Sequence[T]:
        query = self.statement.offset(offset).limit(limit)
        # Single-entity selects yield objects, wider selects yield rows
        if len(self.statement.column_descriptions) == 1:
            return (await self.session.scalars(query)).all()
        return (await self.session.execute(query)).all()


class SequenceSource(Generic[T]):
    """Page source over an in-memory sequence."""

    def __init__(self, items: Sequence[T]):
        self.items = items

    async def count(self) -> int:
        return len(self.items)

    async def fetch(self, offset: int, limit: int) -> Sequence[T]:
        return list(self.items[offset:offset + limit])


def _validate_page(page_number: int, page_size: int) -> None:
    if page_number < 1:
        logger.warning(f"Rejected page request with page_number={page_number}")
        raise InvalidPaginationParameter("page_number", page_number)
    if page_size < 1:
        logger.warning(f"Rejected page request with page_size={page_size}")
        raise InvalidPaginationParameter("page_size", page_size)


@dataclass(frozen=True)
class PagedList(Generic[T]):
    """One page of an ordered collection plus totals for the whole collection."""

    items: tuple[T, ...]
    page_number: int
    page_size: int
    total_count: int

    def __post_init__(self) -> None:
        _validate_page(self.page_number, self.page_size)
        if self.total_count < 0:
            raise ValueError(f"total_count must be >= 0, got {self.total_count}")
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def has_next_page(self) -> bool:
        return self.page_number * self.page_size < self.total_count

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def total_pages(self) -> int:
        """Calculate total number of pages."""
        if self.total_count == 0:
            return 0
        return (self.total_count + self.page_size - 1) // self.page_size

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def map(self, func: Callable[[T], U]) -> "PagedList[U]":
        """Return a copy of this page with every item transformed by func."""
        return PagedList(
            items=tuple(func(item) for item in self.items),
            page_number=self.page_number,
            page_size=self.page_size,
            total_count=self.total_count,
        )

    @classmethod
    async def create(
        cls,
        source: PageSource[T],
        page_number: int,
        page_size: int,
    ) -> "PagedList[T]":
        """
        Build a page from a source.

        Args:
            source: Ordered collection to slice
            page_number: Page to return (1-indexed)
            page_size: Maximum number of items per page

        Returns:
            PagedList holding the requested page. A page past the end of the
            source is returned empty rather than treated as an error.

        Raises:
            InvalidPaginationParameter: page_number or page_size is below 1.
                Raised before the source is queried.
        """
        _validate_page(page_number, page_size)

        total_count = await source.count()
        offset = (page_number - 1) * page_size
        items = await source.fetch(offset, page_size)

        logger.debug(
            f"Page {page_number} (size {page_size}): "
            f"{len(items)} of {total_count} items"
        )
        return cls(
            items=tuple(items),
            page_number=page_number,
            page_size=page_size,
            total_count=total_count,
        )


async def paginate_query(
    session: AsyncSession,
    statement: Select[Any],
    page_number: int,
    page_size: int,
) -> PagedList[Any]:
    """Paginate a select statement using the given session."""
    return await PagedList.create(QuerySource(session, statement), page_number, page_size)
