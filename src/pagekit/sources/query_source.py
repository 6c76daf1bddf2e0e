"""Abstract contract for deferred, composable queries."""

import copy
from abc import ABC, abstractmethod
from typing import Generic, Self, TypeVar

T = TypeVar("T")


class QuerySource(ABC, Generic[T]):
    """Unevaluated query over a backing collection of T.

    Builder methods (order_by, skip, take) return a new source and never
    touch the backing store. Only count() and to_list() evaluate.

    Implementations could be in-memory, DynamoDB, SQL, etc.
    The Pager depends on this interface, not the implementation.
    """

    def __init__(self) -> None:
        self._sort_expression: str | None = None
        self._offset: int = 0
        self._limit: int | None = None

    @property
    def sort_expression(self) -> str | None:
        return self._sort_expression

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def limit(self) -> int | None:
        return self._limit

    def order_by(self, expression: str | None) -> Self:
        """Return a source ordered by `expression`.

        Field validity is checked by the implementation when the source
        is evaluated. A blank expression leaves the source unordered.

        Raises:
            ValueError: If skip or take has already been applied
        """
        if self._offset or self._limit is not None:
            raise ValueError("order_by must be applied before skip or take")

        derived = self._derive()
        derived._sort_expression = (expression or "").strip() or None
        return derived

    def skip(self, count: int) -> Self:
        """Return a source that bypasses the first `count` items."""
        if count < 0:
            raise ValueError("Skip count must be zero or a positive integer")

        derived = self._derive()
        derived._offset = self._offset + count
        if self._limit is not None:
            derived._limit = max(self._limit - count, 0)
        return derived

    def take(self, count: int) -> Self:
        """Return a source limited to at most `count` items."""
        if count < 0:
            raise ValueError("Take count must be zero or a positive integer")

        derived = self._derive()
        derived._limit = count if self._limit is None else min(self._limit, count)
        return derived

    def _derive(self) -> Self:
        return copy.copy(self)

    @abstractmethod
    def count(self) -> int:
        """Count items matched by the source, ignoring skip and take.

        Raises:
            Whatever the backing store raises; errors are not translated.
        """

    @abstractmethod
    def to_list(self) -> list[T]:
        """Materialize the ordered, offset, limited sequence.

        Raises:
            SortExpressionError: If the source cannot order by the expression
            Whatever else the backing store raises.
        """
