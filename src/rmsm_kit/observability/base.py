# src/rmsm_kit/observability/base.py

from typing import Protocol, TypeAlias

Labels: TypeAlias = dict[str, str] | None


class MetricsHook(Protocol):
    """Sink for compiler metrics.

    Names come from ``rmsm_kit.observability.names``. The compiler calls
    the hook once per document (``parse``) and once per batch
    (``multiparse``), never per code block.
    """

    def record_latency(self, name: str, value_ms: float, labels: Labels = None) -> None:
        """Wall time of a parse or multiparse, in milliseconds."""

    def increment(self, name: str, value: int = 1, labels: Labels = None) -> None:
        """Counters: blocks seen/selected, files written, diagnostics, conflicts."""

    def record_gauge(self, name: str, value: float, labels: Labels = None) -> None:
        """Point-in-time values such as the number of documents merged."""


class NoOpMetricsHook(MetricsHook):
    """Default hook; every call is discarded."""
