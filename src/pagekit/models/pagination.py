"""Pagination models."""

from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    field_validator,
)

from pagekit.filters.offset_pagination import OffsetPagination
from pagekit.utils.constants import DEFAULT_MAX_RESULT_COUNT, DEFAULT_SKIP_COUNT

T = TypeVar("T")


class PageFilter(BaseModel):
    """
    Paging and sorting request supplied by a caller.

    Accepts both snake_case field names and the camelCase aliases
    (sortExpression, skipCount, maxResultCount) used on the wire.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    sort_expression: str | None = Field(
        None,
        alias="sortExpression",
        description="Ordering to apply before paging, e.g. 'name desc'",
    )
    skip_count: StrictInt = Field(
        default=DEFAULT_SKIP_COUNT,
        alias="skipCount",
        ge=0,
        description="Number of items to skip",
    )
    max_result_count: StrictInt = Field(
        default=DEFAULT_MAX_RESULT_COUNT,
        alias="maxResultCount",
        ge=0,
        description="Maximum number of items to return",
    )

    @field_validator("sort_expression")
    @classmethod
    def blank_sort_expression_to_none(cls, value: str | None) -> str | None:
        """Treat an empty sort expression as no ordering."""
        if not value:
            return None
        return value


class PaginationInfo(BaseModel):
    """Pagination metadata for list responses."""

    limit: StrictInt = Field(..., description="Maximum number of items requested")
    offset: StrictInt = Field(..., description="Current offset in the result set")
    total_count: StrictInt = Field(..., description="Number of items before paging")
    has_more: StrictBool = Field(..., description="Whether more items are available after this page")
    next_offset: StrictInt | None = Field(
        None,
        description="Offset to use for the next page, if available",
    )
    current_page: StrictInt = Field(..., description="1-based page number")
    total_pages: StrictInt = Field(..., description="Number of pages, rounded up")


class Page(BaseModel, Generic[T]):
    """Materialized result of applying a PageFilter to a source."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    total_count: StrictInt = Field(..., ge=0, description="Number of items before paging")
    items: list[T] = Field(default_factory=list, description="Current page of items")

    def page_info(self, page_filter: PageFilter) -> PaginationInfo:
        """Build pagination metadata for this page and the filter that produced it."""
        info: dict[str, Any] = OffsetPagination.get_page_info(
            offset=page_filter.skip_count,
            limit=page_filter.max_result_count,
            total_count=self.total_count,
        )
        return PaginationInfo(**info)
