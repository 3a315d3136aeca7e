"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped metadata that should be included with all
    instrumentation events, so that log lines emitted by a store backend can
    be correlated with the request that caused them. Tenant and actor ids are
    not part of the context: every catalog event names them explicitly.

    Attributes:
        request_id: Unique identifier for the current request/operation.
        backend: Name of the store backend serving the operation.
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(request_id="req-123")
        probe = DefaultProductServiceProbe().with_context(context)
    """

    request_id: str | None = None
    backend: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.backend is not None:
            result["backend"] = self.backend
        result.update(self.extra)
        return result

    def with_backend(self, backend: str) -> ObservationContext:
        """Create a new context with the backend name set."""
        return ObservationContext(
            request_id=self.request_id,
            backend=backend,
            extra=self.extra,
        )

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return ObservationContext(
            request_id=self.request_id,
            backend=self.backend,
            extra={**self.extra, **kwargs},
        )
