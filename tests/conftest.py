"""
Pytest configuration and fixtures for pagekit tests.
Provides AWS mocking, a DynamoDB table with sort indexes, and in-memory
sources that record how often they are evaluated.
"""

import os
from collections.abc import Callable
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from pagekit.sources.in_memory_source import InMemorySource

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("PAGEKIT_TABLE_NAME", "pagekit-records")

CREATED_INDEX = "owner-created-index"
NAME_INDEX = "owner-name-index"


class RecordingSource(InMemorySource):
    """InMemorySource that counts evaluations across derived sources."""

    def __init__(self, items, calls: dict[str, int] | None = None) -> None:
        super().__init__(items)
        self.calls: dict[str, int] = calls if calls is not None else {"count": 0, "to_list": 0}

    def count(self) -> int:
        self.calls["count"] += 1
        return super().count()

    def to_list(self):
        self.calls["to_list"] += 1
        return super().to_list()


@pytest.fixture
def ten_items() -> list[dict[str, Any]]:
    """Ten items I1..I10 in insertion order; names are not in insertion order."""
    names = ["kiwi", "apple", "mango", "fig", "banana", "lemon", "cherry", "grape", "date", "elder"]
    return [{"Id": f"I{i}", "Name": name} for i, name in enumerate(names, start=1)]


@pytest.fixture
def recording_source(ten_items) -> RecordingSource:
    return RecordingSource(ten_items)


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_dynamodb_table(dynamodb_resource):
    """Helper to create DynamoDB table with sort GSIs."""
    table_name = os.getenv("PAGEKIT_TABLE_NAME")

    return dynamodb_resource.create_table(
        TableName=table_name,
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "record_id", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "record_id", "AttributeType": "S"},
            {"AttributeName": "owner_id", "AttributeType": "S"},
            {"AttributeName": "created_at", "AttributeType": "S"},
            {"AttributeName": "name", "AttributeType": "S"},
        ],
        GlobalSecondaryIndexes=[
            {
                "IndexName": CREATED_INDEX,
                "KeySchema": [
                    {"AttributeName": "owner_id", "KeyType": "HASH"},
                    {"AttributeName": "created_at", "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            },
            {
                "IndexName": NAME_INDEX,
                "KeySchema": [
                    {"AttributeName": "owner_id", "KeyType": "HASH"},
                    {"AttributeName": "name", "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            },
        ],
    )


@pytest.fixture(scope="function")
def dynamodb_table(dynamodb_resource):
    """Create the records table inside the moto context."""
    table_name = os.getenv("PAGEKIT_TABLE_NAME")

    try:
        table = dynamodb_resource.Table(table_name)
        table.load()
    except ClientError:
        table = _create_dynamodb_table(dynamodb_resource)
        table.wait_until_exists()

    yield table


@pytest.fixture
def dynamodb_put_multiple_items(
    dynamodb_table,
) -> Callable[[list[dict[str, Any]]], list[dict[str, Any]]]:
    """
    Helper to insert multiple items into DynamoDB efficiently.

    Usage:
        items = dynamodb_put_multiple_items([item1, item2, item3])
    """

    def _put(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        with dynamodb_table.batch_writer() as batch:
            for item in items:
                batch.put_item(Item=item)
        return items

    return _put


@pytest.fixture
def owner_records(ten_items) -> list[dict[str, Any]]:
    """Ten records for owner 'john' plus two for 'alice'."""
    records = [
        {
            "record_id": item["Id"],
            "owner_id": "john",
            "name": item["Name"],
            "created_at": f"2024-01-{index:02d}T10:00:00+00:00",
        }
        for index, item in enumerate(ten_items, start=1)
    ]
    records += [
        {
            "record_id": f"A{index}",
            "owner_id": "alice",
            "name": f"alice-{index}",
            "created_at": f"2024-02-{index:02d}T10:00:00+00:00",
        }
        for index in (1, 2)
    ]
    return records


@pytest.fixture
def dynamodb_with_records(dynamodb_put_multiple_items, owner_records) -> list[dict[str, Any]]:
    """DynamoDB table pre-populated with owner records."""
    return dynamodb_put_multiple_items(owner_records)
