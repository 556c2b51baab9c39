"""
Document submitter: serialize, wait for a permit, dispatch.
"""

import asyncio
from typing import Any, Mapping, Optional, Union

from shared.logging import get_logger, set_submission_id, clear_context
from shared.errors import SerializationError, GateClosedError
from shared.metrics import MetricsCollector
from .adapters import CrptApiClient
from .documents import Document, DocumentSerializer
from .ratelimit import PermitGate, TimeUnit


class DocumentSubmitter:
    """Rate-limited submitter for the CRPT "create document" endpoint.

    At most ``request_limit`` documents are dispatched per window of
    ``refill_period`` x ``time_unit``; the window is refilled to the full
    limit on a fixed schedule. Create one per process and share it.
    """

    def __init__(self,
                 time_unit: Union[TimeUnit, str],
                 request_limit: int,
                 *,
                 refill_period: int = 5,
                 http_timeout: float = 10.0,
                 drain_timeout: Optional[float] = None,
                 serializer: Optional[DocumentSerializer] = None,
                 transport: Optional[CrptApiClient] = None,
                 metrics: Optional[MetricsCollector] = None):
        self.time_unit = TimeUnit.parse(time_unit)
        self.request_limit = request_limit
        self.logger = get_logger("documents.submitter")
        self.metrics = metrics
        self.drain_timeout = drain_timeout

        # Gate first: it validates the limit and owns no timer until started
        self.gate = PermitGate(
            request_limit,
            self.time_unit.to_seconds(refill_period),
            metrics=metrics
        )
        self.serializer = serializer or DocumentSerializer()
        self.transport = transport or CrptApiClient(timeout=http_timeout, metrics=metrics)

    async def submit(self, document: Union[Document, Mapping[str, Any]]) -> None:
        """Submit one document.

        Raises ``SerializationError`` before any permit is taken if the
        document cannot be encoded, and ``GateClosedError`` after shutdown.
        Task cancellation while waiting propagates as
        ``asyncio.CancelledError``. The HTTP call itself is fire-and-forget.
        """
        submission_id = set_submission_id()
        try:
            try:
                payload = self.serializer.serialize(document)
            except SerializationError as e:
                self.logger.warning("Document rejected", **e.to_response().model_dump())
                self._record("rejected", error_type=e.code)
                raise

            try:
                await self.gate.acquire()
            except asyncio.CancelledError:
                self._record("cancelled")
                raise
            except GateClosedError as e:
                self._record("closed", error_type=e.code)
                raise

            # Returned task is intentionally dropped
            self.transport.send_async(payload)
            self._record("dispatched")
            self.logger.info("Document dispatched", submission_id=submission_id, size=len(payload))
        finally:
            clear_context()

    def _record(self, status: str, error_type: Optional[str] = None) -> None:
        if not self.metrics:
            return
        self.metrics.record_submission(status)
        if error_type:
            self.metrics.record_error(error_type)

    async def start(self) -> None:
        """Start the permit refill timer."""
        self.gate.start()

    async def aclose(self, drain_timeout: Optional[float] = None) -> None:
        """Stop admitting documents, then let in-flight dispatches finish.

        Dispatches still running after ``drain_timeout`` seconds (the
        submitter's own ``drain_timeout`` when not given) are cancelled.
        """
        if drain_timeout is None:
            drain_timeout = self.drain_timeout
        await self.gate.close()
        await self.transport.aclose(drain_timeout)
        self.logger.info("Document submitter closed")

    async def __aenter__(self) -> "DocumentSubmitter":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
