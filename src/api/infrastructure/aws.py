"""AWS client lifecycle.

Opens low-level aioboto3 clients configured from AwsSettings. Clients are
async context managers; callers own them for the lifetime of the
application and hand them to repositories and adapters, which never open or
close clients themselves.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import aioboto3
from botocore.config import Config

from infrastructure.observability import AwsClientProbe, DefaultAwsClientProbe
from infrastructure.settings import AwsSettings, get_settings


def build_client_config(settings: AwsSettings) -> Config:
    """Build botocore configuration with timeouts and retry policy."""
    return Config(
        region_name=settings.region,
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
        retries={
            "max_attempts": settings.max_attempts,
            "mode": settings.retry_mode,
        },
    )


@asynccontextmanager
async def open_aws_client(
    service: str,
    settings: AwsSettings | None = None,
    session: aioboto3.Session | None = None,
    probe: AwsClientProbe | None = None,
) -> AsyncIterator[Any]:
    """Open an aioboto3 client for one AWS service.

    Example:
        async with open_aws_client("dynamodb") as client:
            repository = DynamoDbProductRepository(client, table_name="Stockroom")

    Args:
        service: botocore service name, e.g. "dynamodb" or "cognito-idp"
        settings: AWS settings (defaults to cached environment settings)
        session: aioboto3 session to create the client from
        probe: Optional domain probe for observability

    Yields:
        The open client
    """
    settings = settings or get_settings().aws
    session = session or aioboto3.Session()
    probe = probe or DefaultAwsClientProbe()

    client_kwargs: dict[str, Any] = {
        "region_name": settings.region,
        "config": build_client_config(settings),
    }
    if settings.endpoint_url:
        client_kwargs["endpoint_url"] = settings.endpoint_url

    try:
        context = session.client(service, **client_kwargs)
        client = await context.__aenter__()
    except Exception as e:
        probe.client_open_failed(service, e)
        raise

    probe.client_opened(service, settings.region, settings.endpoint_url)
    try:
        yield client
    finally:
        await context.__aexit__(None, None, None)
        probe.client_closed(service)
