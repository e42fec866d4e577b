"""Utility functions and helpers."""

from reddit.utils.pagination import (
    PagedList,
    PageSource,
    QuerySource,
    SequenceSource,
    paginate_query,
)

__all__ = ["PagedList", "PageSource", "QuerySource", "SequenceSource", "paginate_query"]
