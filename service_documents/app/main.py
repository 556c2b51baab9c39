"""
Process wiring for the CRPT document submitter.

The submitter (and the permit gate inside it) is a long-lived, process-wide
resource: every submission call site must go through the same instance so
that the request limit holds for the whole process.
"""

from typing import Optional

from prometheus_client import REGISTRY

from shared.config import SubmitterConfig, get_config
from shared.logging import configure_logging, get_logger
from shared.metrics import MetricsCollector, get_metrics_collector
from .submitter import DocumentSubmitter


logger = get_logger("documents.main")

_submitter: Optional[DocumentSubmitter] = None
# The default registry and the exporter port can only be claimed once per process
_exporting_metrics: Optional[MetricsCollector] = None
_exporting_port: Optional[int] = None


def _get_metrics(config: SubmitterConfig) -> MetricsCollector:
    global _exporting_metrics, _exporting_port
    if not config.metrics_port:
        return get_metrics_collector(config.service_name)

    if _exporting_metrics is None:
        _exporting_metrics = get_metrics_collector(config.service_name, REGISTRY)
        _exporting_metrics.start_metrics_server(config.metrics_port)
        _exporting_port = config.metrics_port
    elif config.metrics_port != _exporting_port:
        logger.warning(
            "Metrics already exported on another port",
            requested_port=config.metrics_port,
            metrics_port=_exporting_port
        )
    return _exporting_metrics


def create_submitter(config: Optional[SubmitterConfig] = None) -> DocumentSubmitter:
    """Build a submitter from configuration."""
    config = config or get_config()

    configure_logging(config.service_name, config.log_level)
    metrics = _get_metrics(config)

    submitter = DocumentSubmitter(
        config.time_unit,
        config.request_limit,
        refill_period=config.refill_period,
        http_timeout=config.http_timeout,
        drain_timeout=config.drain_timeout,
        metrics=metrics
    )
    logger.info(
        "Document submitter created",
        time_unit=submitter.time_unit.value,
        request_limit=config.request_limit,
        refill_period=config.refill_period
    )
    return submitter


def get_document_submitter(config: Optional[SubmitterConfig] = None) -> DocumentSubmitter:
    """Return the process-wide submitter, creating it on first use."""
    global _submitter
    if _submitter is None:
        _submitter = create_submitter(config)
    return _submitter


async def shutdown_document_submitter() -> None:
    """Close the process-wide submitter, if one was created."""
    global _submitter
    submitter, _submitter = _submitter, None
    if submitter is not None:
        await submitter.aclose()
