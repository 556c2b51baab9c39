"""
Shared metrics configuration for the CRPT document submitter.
"""

from prometheus_client import Counter, Histogram, Gauge, Info, start_http_server, CollectorRegistry, REGISTRY
from typing import Dict, Any, Optional


class MetricsCollector:
    """Centralized metrics collector for the submitter.

    Metrics are registered only into ``registry``; with the default of
    ``None`` they are tracked but not exported, so several collectors can
    coexist in one process (tests, multiple submitters).
    """

    def __init__(self, service_name: str, registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        self.registry = registry
        self._metrics: Dict[str, Any] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up metrics for the service."""

        # Service info
        self._metrics["service_info"] = Info(
            "service_info",
            "Service information",
            registry=self.registry
        )
        self._metrics["service_info"].info({
            "service": self.service_name,
            "version": "1.0.0"
        })

        # Error metrics
        self._metrics["errors_total"] = Counter(
            "errors_total",
            "Total errors",
            ["error_type", "service"],
            registry=self.registry
        )

        # Submission metrics
        self._metrics["documents_submitted_total"] = Counter(
            "documents_submitted_total",
            "Total document submissions",
            ["status"],
            registry=self.registry
        )

        self._metrics["dispatch_total"] = Counter(
            "dispatch_total",
            "Total fire-and-forget dispatches by outcome",
            ["outcome"],
            registry=self.registry
        )

        self._setup_permit_metrics()

    def _setup_permit_metrics(self):
        """Set up permit gate metrics."""
        self._metrics["permits_granted_total"] = Counter(
            "permits_granted_total",
            "Total permits granted",
            ["gate"],
            registry=self.registry
        )

        self._metrics["permit_refills_total"] = Counter(
            "permit_refills_total",
            "Total refill-to-capacity resets",
            ["gate"],
            registry=self.registry
        )

        self._metrics["permits_available"] = Gauge(
            "permits_available",
            "Permits currently available",
            ["gate"],
            registry=self.registry
        )

        self._metrics["permit_wait_seconds"] = Histogram(
            "permit_wait_seconds",
            "Time spent waiting for a permit in seconds",
            ["gate"],
            registry=self.registry
        )

    def get_metric(self, name: str):
        """Get a metric by name."""
        return self._metrics.get(name)

    def start_metrics_server(self, port: int = 9090):
        """Start the Prometheus metrics server."""
        start_http_server(port, registry=self.registry or REGISTRY)

    def record_error(self, error_type: str, service: Optional[str] = None):
        """Record error metrics."""
        service_name = service or self.service_name
        self._metrics["errors_total"].labels(error_type=error_type, service=service_name).inc()

    def record_submission(self, status: str):
        """Record the outcome of a submit call."""
        self._metrics["documents_submitted_total"].labels(status=status).inc()

    def record_dispatch(self, outcome: str):
        """Record the outcome of a background dispatch."""
        self._metrics["dispatch_total"].labels(outcome=outcome).inc()

    def record_permit_granted(self, gate: str, wait_seconds: float, available: int):
        """Record a granted permit."""
        self._metrics["permits_granted_total"].labels(gate=gate).inc()
        self._metrics["permit_wait_seconds"].labels(gate=gate).observe(wait_seconds)
        self._metrics["permits_available"].labels(gate=gate).set(available)

    def record_refill(self, gate: str, available: int):
        """Record a refill of the permit pool."""
        self._metrics["permit_refills_total"].labels(gate=gate).inc()
        self._metrics["permits_available"].labels(gate=gate).set(available)


def get_metrics_collector(service_name: str, registry: Optional[CollectorRegistry] = None) -> MetricsCollector:
    """Get a metrics collector for a service."""
    return MetricsCollector(service_name, registry)
