"""
Offset-based pagination utilities.
"""

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")


class OffsetPagination:
    """
    Offset-based pagination helper.

    Holds the arithmetic shared by sources and the Pager:
    1. Validate skip and take parameters
    2. Slice an already ordered sequence
    3. Describe a page for API consumers
    """

    @staticmethod
    def slice(
        items: Sequence[T],
        offset: int,
        limit: int | None,
    ) -> list[T]:
        """
        Return at most `limit` items of `items` starting at `offset`.

        A `limit` of None means "no limit".

        Example:
            slice([1, 2, 3, 4, 5], offset=1, limit=2)

            → [2, 3]
        """
        if limit is None:
            return list(items[offset:])
        return list(items[offset : offset + limit])

    @staticmethod
    def validate(
        skip_count: int,
        max_result_count: int,
        max_result_count_limit: int | None = None,
    ) -> tuple[bool, str]:
        """
        Validate pagination parameters.

        Validation rules:
        - skip_count must be zero or positive
        - max_result_count must be zero or positive
        - max_result_count must not exceed max_result_count_limit, when set

        Returns:
            A tuple of:
            - is_valid: Whether parameters are valid
            - error_message: Human-readable error message if invalid

        Example:
            validate(skip_count=0, max_result_count=20)
            → (True, "")
        """
        if skip_count < 0:
            return False, "Skip count must be zero or a positive integer"

        if max_result_count < 0:
            return False, "Max result count must be zero or a positive integer"

        if max_result_count_limit is not None and max_result_count > max_result_count_limit:
            return False, f"Max result count must not exceed {max_result_count_limit}"

        return True, ""

    @staticmethod
    def get_page_info(
        offset: int,
        limit: int,
        total_count: int,
    ) -> dict[str, Any]:
        """
        Generate pagination metadata for API responses.

        Args:
            offset: Current offset
            limit: Page size
            total_count: Total number of available items

        Returns:
            Dictionary containing pagination metadata:
            - offset
            - limit
            - total_count
            - has_more
            - next_offset
            - current_page
            - total_pages

        Notes:
            - Page numbering starts at 1
            - total_pages is rounded up
            - a zero limit never reports more pages
        """
        total_pages = (total_count + limit - 1) // limit if limit > 0 else 0
        current_page = (offset // limit) + 1 if limit > 0 else 1
        has_more = limit > 0 and offset + limit < total_count

        return {
            "offset": offset,
            "limit": limit,
            "total_count": total_count,
            "has_more": has_more,
            "next_offset": offset + limit if has_more else None,
            "current_page": current_page,
            "total_pages": total_pages,
        }
