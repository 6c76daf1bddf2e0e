"""
Pagination over deferred query sources.
"""

from typing import TypeVar

from aws_lambda_powertools import Logger

from pagekit.filters.offset_pagination import OffsetPagination
from pagekit.models.errors import FilterError
from pagekit.models.pagination import Page, PageFilter
from pagekit.sources.query_source import QuerySource

T = TypeVar("T")

logger = Logger(UTC=True)


class Pager:
    """Produces a Page from a QuerySource and a PageFilter.

    Each call performs exactly two evaluations against the source:
    - one count over the unpaged query
    - one materialization of the ordered, skipped and limited query

    The Pager holds no state between calls and never retries. Source
    failures are logged and re-raised unchanged.
    """

    def __init__(self, *, max_result_count_limit: int | None = None) -> None:
        """
        Args:
            max_result_count_limit: Optional upper bound for
                PageFilter.max_result_count; requests above it are rejected
        """
        self._max_result_count_limit = max_result_count_limit

    def paginate(self, source: QuerySource[T], page_filter: PageFilter) -> Page[T]:
        """Return the total count and the requested slice of `source`.

        Raises:
            FilterError: If skip or take are negative or above the limit
            Any error raised while evaluating the source, unchanged
        """
        self._validate(page_filter)

        logger.debug(
            "Paginating source",
            extra={
                "source": type(source).__name__,
                "sort_expression": page_filter.sort_expression,
                "skip_count": page_filter.skip_count,
                "max_result_count": page_filter.max_result_count,
            },
        )

        try:
            query = source
            if page_filter.sort_expression:
                query = query.order_by(page_filter.sort_expression)

            # Counted on the ordered query; under an ordering a source may
            # reach only part of its collection (sparse sort indexes).
            total_count = query.count()

            items = (
                query.skip(page_filter.skip_count)
                .take(page_filter.max_result_count)
                .to_list()
            )
        except Exception:
            logger.exception(
                "Failed to evaluate source",
                extra={
                    "source": type(source).__name__,
                    "sort_expression": page_filter.sort_expression,
                },
            )
            raise

        logger.info(
            "Page produced",
            extra={"total_count": total_count, "count": len(items)},
        )

        return Page(total_count=total_count, items=items)

    def _validate(self, page_filter: PageFilter) -> None:
        is_valid, error_message = OffsetPagination.validate(
            page_filter.skip_count,
            page_filter.max_result_count,
            self._max_result_count_limit,
        )
        if not is_valid:
            logger.error(
                "Invalid pagination parameters",
                extra={
                    "skip_count": page_filter.skip_count,
                    "max_result_count": page_filter.max_result_count,
                    "error": error_message,
                },
            )
            raise FilterError(
                message=error_message,
                details={
                    "skip_count": page_filter.skip_count,
                    "max_result_count": page_filter.max_result_count,
                },
            )


def paginate(source: QuerySource[T], page_filter: PageFilter) -> Page[T]:
    """Paginate `source` with a default Pager."""
    return Pager().paginate(source, page_filter)
