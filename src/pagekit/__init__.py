"""Pagination over deferred, composable queries."""

from pagekit.models.errors import FilterError, PagerError, SortExpressionError
from pagekit.models.pagination import Page, PageFilter, PaginationInfo
from pagekit.services.pager import Pager, paginate
from pagekit.sources.in_memory_source import InMemorySource
from pagekit.sources.query_source import QuerySource

__version__ = "1.0.0"
__description__ = "Count-and-slice pagination over in-memory and DynamoDB queries"

__all__ = [
    "FilterError",
    "InMemorySource",
    "Page",
    "PageFilter",
    "Pager",
    "PagerError",
    "PaginationInfo",
    "QuerySource",
    "SortExpressionError",
    "paginate",
]
