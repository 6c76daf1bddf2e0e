"""Thin DynamoDB adapter wrapping boto3 table operations."""

import os
from typing import Any, Protocol, cast

import boto3

from pagekit.utils.constants import (
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_TABLE_NAME,
)


class DynamoDBQueryable(Protocol):
    """Query surface shared by boto3 tables and DynamoDB adapters."""

    def query(self, **kwargs: Any) -> dict[str, Any]: ...


class DynamoDBAdapter:
    """Low-level DynamoDB operations (mechanical, no error handling).

    This adapter:
    - Wraps boto3 DynamoDB resource
    - Does NOT handle errors (lets them bubble up)
    """

    def __init__(self, table_name: str | None = None) -> None:
        """Initialize DynamoDB table from the argument or environment."""
        table_name = table_name or os.getenv(ENV_TABLE_NAME)
        if not table_name:
            raise RuntimeError(f"{ENV_TABLE_NAME} environment variable is not set")

        dynamodb = boto3.resource(
            "dynamodb",
            endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL),
            region_name=os.getenv(ENV_AWS_REGION),
        )

        self.table_name = table_name
        self.table: DynamoDBQueryable = cast(
            DynamoDBQueryable,
            dynamodb.Table(table_name),
        )

    def query(self, **kwargs: Any) -> dict[str, Any]:
        """Execute DynamoDB query.

        Raises boto3 exceptions unchanged.
        """
        return self.table.query(**kwargs)
