"""Integration test fixtures for DynamoDB tests.

These fixtures require a running DynamoDB Local instance.
Use docker-compose for testing:

    docker run -p 8000:8000 amazon/dynamodb-local
"""

from collections.abc import AsyncIterator
import os

import pytest
import pytest_asyncio
from ulid import ULID

from catalog.infrastructure.dynamodb_product_repository import (
    DynamoDbProductRepository,
)
from infrastructure.aws import open_aws_client
from infrastructure.settings import AwsSettings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires DynamoDB Local)",
    )


@pytest.fixture(scope="session")
def integration_aws_settings() -> AwsSettings:
    """AWS settings for integration tests.

    Override with environment variables:
        STOCKROOM_AWS_ENDPOINT_URL, STOCKROOM_AWS_REGION
    """
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "local")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "local")
    return AwsSettings(
        region=os.getenv("STOCKROOM_AWS_REGION", "us-east-1"),
        endpoint_url=os.getenv("STOCKROOM_AWS_ENDPOINT_URL", "http://localhost:8000"),
        max_attempts=1,
    )


@pytest_asyncio.fixture
async def dynamodb_client(integration_aws_settings: AwsSettings) -> AsyncIterator:
    """Provide an open DynamoDB client for integration tests."""
    async with open_aws_client("dynamodb", settings=integration_aws_settings) as client:
        yield client


@pytest_asyncio.fixture
async def products_table(dynamodb_client) -> AsyncIterator[str]:
    """Create a throwaway products table and drop it after the test."""
    table_name = f"stockroom-test-{ULID()}"
    await dynamodb_client.create_table(
        TableName=table_name,
        KeySchema=[
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "PK", "AttributeType": "S"},
            {"AttributeName": "SK", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    yield table_name
    await dynamodb_client.delete_table(TableName=table_name)


@pytest.fixture
def dynamodb_repository(dynamodb_client, products_table) -> DynamoDbProductRepository:
    """Repository bound to the throwaway table."""
    return DynamoDbProductRepository(dynamodb_client, table_name=products_table)
