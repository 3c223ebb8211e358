"""Request instrumentation for the Supply API.

Metrics are held by an explicitly constructed ``SupplyMetrics`` instance
bound to its own Prometheus registry. ``ApiContext`` bundles that sink
with the domain handle and is injected into every route.
"""

import time
from contextlib import contextmanager
from dataclasses import dataclass, field

from fastapi import Request
from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest
from protean.domain import Domain

from supply.utils.logging import get_logger

logger = get_logger(__name__)


class SupplyMetrics:
    """Request counters and duration histograms, labelled per entity and operation."""

    def __init__(self, registry: CollectorRegistry | None = None):
        self.registry = registry or CollectorRegistry()
        self.requests = Counter(
            "supply_requests_total",
            "Supply API requests by entity, operation and response status",
            ["entity", "operation", "status"],
            registry=self.registry,
        )
        self.duration = Histogram(
            "supply_operation_duration_seconds",
            "Time spent handling Supply API operations",
            ["entity", "operation"],
            registry=self.registry,
        )

    def record(self, entity: str, operation: str, status: int, duration: float | None = None) -> None:
        self.requests.labels(entity=entity, operation=operation, status=str(status)).inc()
        if duration is not None:
            self.duration.labels(entity=entity, operation=operation).observe(duration)

    def request_count(self, entity: str, operation: str, status: int) -> float:
        value = self.registry.get_sample_value(
            "supply_requests_total",
            {"entity": entity, "operation": operation, "status": str(status)},
        )
        return value or 0.0

    def render(self) -> bytes:
        return generate_latest(self.registry)


@dataclass
class Operation:
    """Outcome of an instrumented operation; handlers set ``status`` and may add log ``fields``."""

    entity: str
    name: str
    status: int = 200
    fields: dict = field(default_factory=dict)


@dataclass
class ApiContext:
    domain: Domain
    metrics: SupplyMetrics

    @contextmanager
    def observe(self, entity: str, operation: str, status: int = 200, **fields):
        """Time, count and log one handler invocation.

        Exceptions are counted as 500 and re-raised for the application's
        error translator.
        """
        log = logger.bind(entity=entity, operation=operation, **fields)
        log.debug("operation_started")

        op = Operation(entity=entity, name=operation, status=status)
        started = time.perf_counter()
        try:
            yield op
        except Exception as exc:
            self.metrics.record(entity, operation, 500)
            log.error("operation_failed", error=str(exc), error_type=type(exc).__name__)
            raise

        duration = time.perf_counter() - started
        if op.status == 404:
            log.warning("entity_not_found", **op.fields)
        else:
            log.info(
                "operation_succeeded",
                **{**op.fields, "status_code": op.status, "duration_ms": round(duration * 1000, 3)},
            )

        self.metrics.record(entity, operation, op.status, duration)


def get_context(request: Request) -> ApiContext:
    """FastAPI dependency returning the context installed by ``create_app``."""
    return request.app.state.context
