# src/activity_importer/observability/base.py

import logging
from collections.abc import Mapping
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# Low-cardinality dimensions only: status code, extension. Never file names.
Labels = Mapping[str, str]


@runtime_checkable
class MetricsHook(Protocol):
    """Sink for the importer's timings, counters and gauges.

    Metric names live in `observability.names`. Implementations must not
    raise; a failing backend would otherwise turn into a failed import.
    """

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        """Wall time of one import or extraction, in milliseconds."""
        ...

    def increment(self, name: str, value: int = 1, labels: Labels | None = None) -> None:
        """Count processed files, e.g. per terminal status."""
        ...

    def record_gauge(self, name: str, value: float, labels: Labels | None = None) -> None:
        """Point-in-time value such as page count or detector matches."""
        ...


class NoOpMetricsHook:
    """Default hook: importing works without any metrics backend."""

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        return None

    def increment(self, name: str, value: int = 1, labels: Labels | None = None) -> None:
        return None

    def record_gauge(self, name: str, value: float, labels: Labels | None = None) -> None:
        return None


class LoggingMetricsHook:
    """Writes every metric to the debug log. Handy when no backend is wired."""

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        logger.debug("metric %s=%.1fms labels=%s", name, value_ms, dict(labels or {}))

    def increment(self, name: str, value: int = 1, labels: Labels | None = None) -> None:
        logger.debug("metric %s+=%d labels=%s", name, value, dict(labels or {}))

    def record_gauge(self, name: str, value: float, labels: Labels | None = None) -> None:
        logger.debug("metric %s=%s labels=%s", name, value, dict(labels or {}))
