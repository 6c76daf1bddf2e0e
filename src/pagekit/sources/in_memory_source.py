"""
Query source over an in-memory collection.

Evaluation is deferred: ordering, skipping and limiting are recorded by the
builder methods and applied in a single pass when the source is evaluated.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from aws_lambda_powertools import Logger

from pagekit.filters.offset_pagination import OffsetPagination
from pagekit.filters.sort_expression import SortKey, parse_sort_expression
from pagekit.models.errors import SortExpressionError
from pagekit.sources.query_source import QuerySource

T = TypeVar("T")

logger = Logger(UTC=True)

_MISSING = object()


class InMemorySource(QuerySource[T]):
    """
    Deferred query over a Python collection.

    Items may be mappings (fields looked up by key) or plain objects
    (fields looked up by attribute). The collection is read only when
    count() or to_list() is called, so later changes to a mutable
    collection are visible to an existing source.

    When `sortable_fields` is given, sort fields are checked against it on
    every evaluation, including over an empty collection. Without it an
    unknown field is only detected while comparing items.
    """

    def __init__(
        self,
        items: Sequence[T],
        *,
        sortable_fields: Iterable[str] | None = None,
    ) -> None:
        super().__init__()
        self._items: Sequence[T] = items
        self._sortable_fields: frozenset[str] | None = (
            frozenset(sortable_fields) if sortable_fields is not None else None
        )

    def count(self) -> int:
        self._sort_keys()

        total = len(self._items)
        logger.debug("Counted in-memory items", extra={"total_count": total})
        return total

    def to_list(self) -> list[T]:
        keys = self._sort_keys()
        items: list[T] = list(self._items)

        if keys:
            items = self._sort(items, keys)

        result = OffsetPagination.slice(items, self._offset, self._limit)

        logger.debug(
            "Materialized in-memory items",
            extra={
                "sort_expression": self._sort_expression,
                "offset": self._offset,
                "limit": self._limit,
                "count": len(result),
            },
        )
        return result

    def _sort_keys(self) -> list[SortKey]:
        """Parse the sort expression and check it against sortable_fields."""
        if not self._sort_expression:
            return []

        keys = parse_sort_expression(self._sort_expression)

        if self._sortable_fields is not None:
            for key in keys:
                if key.field not in self._sortable_fields:
                    raise SortExpressionError(
                        message=f"Unknown sort field '{key.field}'",
                        details={
                            "sort_expression": self._sort_expression,
                            "field": key.field,
                            "sortable_fields": sorted(self._sortable_fields),
                        },
                    )

        return keys

    def _sort(self, items: list[T], keys: list[SortKey]) -> list[T]:
        # Stable sorts applied from the least significant key outwards.
        for key in reversed(keys):
            try:
                if key.descending:
                    items = sorted(
                        items,
                        key=lambda item, field=key.field: self._desc_key(item, field),
                        reverse=True,
                    )
                else:
                    items = sorted(
                        items,
                        key=lambda item, field=key.field: self._asc_key(item, field),
                    )
            except TypeError as exc:
                raise SortExpressionError(
                    message=f"Values of field '{key.field}' cannot be compared",
                    details={"sort_expression": self._sort_expression},
                ) from exc
        return items

    def _asc_key(self, item: T, field: str) -> tuple[bool, Any]:
        value = self._lookup(item, field)
        return value is None, value

    def _desc_key(self, item: T, field: str) -> tuple[bool, Any]:
        value = self._lookup(item, field)
        return value is not None, value

    def _lookup(self, item: T, field: str) -> Any:
        if isinstance(item, Mapping):
            value = item.get(field, _MISSING)
        else:
            value = getattr(item, field, _MISSING)

        if value is _MISSING:
            raise SortExpressionError(
                message=f"Unknown sort field '{field}'",
                details={
                    "sort_expression": self._sort_expression,
                    "field": field,
                },
            )
        return value
