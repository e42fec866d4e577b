"""Pydantic schema for paginated responses."""

from typing import Generic, TypeVar
from pydantic import BaseModel

from reddit.utils.pagination import PagedList

T = TypeVar("T")


class PagedListResponse(BaseModel, Generic[T]):
    """Serializable view of a PagedList, including its derived flags."""

    items: list[T]
    page_number: int
    page_size: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_paged(cls, paged: PagedList[T]) -> "PagedListResponse[T]":
        return cls(
            items=list(paged.items),
            page_number=paged.page_number,
            page_size=paged.page_size,
            total_count=paged.total_count,
            total_pages=paged.total_pages,
            has_next_page=paged.has_next_page,
            has_previous_page=paged.has_previous_page,
        )
