"""DynamoDB-backed implementation of QuerySource."""

from collections.abc import Iterator
from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import ConditionBase

from pagekit.filters.sort_expression import parse_sort_expression
from pagekit.infrastructure.adapters.dynamodb_adapter import (
    DynamoDBAdapter,
    DynamoDBQueryable,
)
from pagekit.models.errors import SortExpressionError
from pagekit.sources.query_source import QuerySource

Item = dict[str, Any]

logger = Logger(UTC=True)


class DynamoDBQuerySource(QuerySource[Item]):
    """Deferred DynamoDB query.

    NOTE:
    - DynamoDB can only order by an index range key, so each sortable
      field must be mapped to the GSI whose range key it is.
    - Only single-field sort expressions are supported.
    - count() and to_list() query the same index, so items missing the
      sort attribute are excluded from both.
    - Skip and take are applied while paging through query results;
      paging stops as soon as the requested slice is filled.
    - boto3 errors are NOT translated; they propagate to the caller.
    """

    def __init__(
        self,
        *,
        key_condition: ConditionBase,
        index_name: str | None = None,
        sort_indexes: dict[str, str] | None = None,
        filter_expression: ConditionBase | None = None,
        page_size: int | None = None,
        adapter: DynamoDBQueryable | None = None,
    ) -> None:
        """
        Args:
            key_condition: Key condition shared by every query
            index_name: Index queried when no ordering is requested
                (None queries the base table)
            sort_indexes: Mapping of sortable field name to index name
            filter_expression: Optional non-key filter
            page_size: Optional DynamoDB `Limit` per round trip
            adapter: DynamoDB adapter, built from the environment if omitted
        """
        super().__init__()
        self._db: DynamoDBQueryable = adapter or DynamoDBAdapter()
        self._key_condition = key_condition
        self._index_name = index_name
        self._sort_indexes: dict[str, str] = dict(sort_indexes or {})
        self._filter_expression = filter_expression
        self._page_size = page_size

    def count(self) -> int:
        """Count items reachable under the current ordering.

        GSIs are sparse, so an ordered source counts against the sort
        index; items lacking the sort attribute are not part of it.
        """
        index_name, _ = self._resolve_ordering()

        query_kwargs = self._query_kwargs(index_name)
        query_kwargs["Select"] = "COUNT"

        total = 0
        for response in self._pages(query_kwargs):
            total += int(response.get("Count", 0))

        logger.debug(
            "Counted DynamoDB items",
            extra={"index_name": index_name, "total_count": total},
        )
        return total

    def to_list(self) -> list[Item]:
        index_name, forward = self._resolve_ordering()

        if self._limit == 0:
            return []

        query_kwargs = self._query_kwargs(index_name)
        query_kwargs["ScanIndexForward"] = forward

        items: list[Item] = []
        to_skip = self._offset

        for response in self._pages(query_kwargs):
            page_items = response.get("Items", [])

            if to_skip:
                skipped = min(to_skip, len(page_items))
                page_items = page_items[skipped:]
                to_skip -= skipped

            items.extend(page_items)

            if self._limit is not None and len(items) >= self._limit:
                items = items[: self._limit]
                break

        logger.debug(
            "Materialized DynamoDB items",
            extra={
                "index_name": index_name,
                "scan_index_forward": forward,
                "offset": self._offset,
                "limit": self._limit,
                "count": len(items),
            },
        )
        return items

    def _resolve_ordering(self) -> tuple[str | None, bool]:
        """Return the index to query and the ScanIndexForward flag."""
        if not self._sort_expression:
            return self._index_name, True

        keys = parse_sort_expression(self._sort_expression)
        if len(keys) > 1:
            raise SortExpressionError(
                message="DynamoDB sources support a single sort field",
                details={"sort_expression": self._sort_expression},
            )

        key = keys[0]
        index_name = self._sort_indexes.get(key.field)
        if index_name is None:
            raise SortExpressionError(
                message=f"Unknown sort field '{key.field}'",
                details={
                    "sort_expression": self._sort_expression,
                    "field": key.field,
                    "sortable_fields": sorted(self._sort_indexes),
                },
            )

        return index_name, not key.descending

    def _query_kwargs(self, index_name: str | None) -> dict[str, Any]:
        query_kwargs: dict[str, Any] = {
            "KeyConditionExpression": self._key_condition,
        }

        if index_name:
            query_kwargs["IndexName"] = index_name

        if self._filter_expression is not None:
            query_kwargs["FilterExpression"] = self._filter_expression

        if self._page_size:
            query_kwargs["Limit"] = self._page_size

        return query_kwargs

    def _pages(self, query_kwargs: dict[str, Any]) -> Iterator[dict[str, Any]]:
        """Yield raw query responses, following LastEvaluatedKey."""
        last_evaluated_key: dict[str, Any] | None = None

        while True:
            if last_evaluated_key:
                query_kwargs["ExclusiveStartKey"] = last_evaluated_key

            response = self._db.query(**query_kwargs)
            yield response

            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                break
