"""Prometheus metrics for outgoing API requests.

A thin wrapper around ``prometheus_client`` so applications can observe how
the client talks to the service. Labels are the HTTP method, a stable
operation name (``predictions.get``, ``models.list``...) and the status, so
resource ids never leak into label values.
"""

from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest


class RequestMetrics:
    """Request counters and latency histograms.

    Parameters
    - registry: Optional custom ``CollectorRegistry``; a fresh one is created
      otherwise so several clients never collide on metric names
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()

        self.request_count = Counter(
            'replicate_client_requests_total',
            'Total requests sent to the Replicate API',
            ['method', 'operation', 'status'],
            registry=self.registry
        )

        self.request_duration = Histogram(
            'replicate_client_request_duration_seconds',
            'Replicate API request duration',
            ['method', 'operation'],
            registry=self.registry
        )

    def record_request(self, method: str, operation: str, status: str, duration: float) -> None:
        """Record one finished request; ``status`` is the code or ``error``."""
        self.request_count.labels(method=method, operation=operation, status=status).inc()
        self.request_duration.labels(method=method, operation=operation).observe(duration)

    def get_metrics(self) -> str:
        """Return metrics in Prometheus exposition format."""
        return generate_latest(self.registry).decode('utf-8')
