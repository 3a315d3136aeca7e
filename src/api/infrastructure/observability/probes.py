"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AwsClientProbe(Protocol):
    """Domain probe for AWS client lifecycle observability."""

    def client_opened(self, service: str, region: str, endpoint_url: str | None) -> None:
        """Record that an AWS service client was opened."""
        ...

    def client_open_failed(self, service: str, error: Exception) -> None:
        """Record that opening an AWS service client failed."""
        ...

    def client_closed(self, service: str) -> None:
        """Record that an AWS service client was closed."""
        ...

    def with_context(self, context: ObservationContext) -> AwsClientProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAwsClientProbe:
    """Default implementation of AwsClientProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultAwsClientProbe:
        """Create a new probe with observation context bound."""
        return DefaultAwsClientProbe(logger=self._logger, context=context)

    def client_opened(self, service: str, region: str, endpoint_url: str | None) -> None:
        self._logger.info(
            "aws_client_opened",
            service=service,
            region=region,
            endpoint_url=endpoint_url,
            **self._get_context_kwargs(),
        )

    def client_open_failed(self, service: str, error: Exception) -> None:
        self._logger.error(
            "aws_client_open_failed",
            service=service,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def client_closed(self, service: str) -> None:
        self._logger.info(
            "aws_client_closed",
            service=service,
            **self._get_context_kwargs(),
        )
