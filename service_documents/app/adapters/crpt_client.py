"""
CRPT API client for the document submitter.
"""

import asyncio
from typing import Optional, Set

import httpx

from shared.logging import get_logger
from shared.metrics import MetricsCollector


CRPT_CREATE_DOCUMENT_URL = "https://ismp.crpt.ru/api/v3/lk/documents/create"

JSON_HEADERS = {"Content-Type": "application/json"}


class CrptApiClient:
    """Fire-and-forget HTTP transport for the CRPT document endpoint.

    ``send_async`` schedules the POST and returns the task without awaiting
    it. Responses are not validated and transport failures never reach the
    caller: they are only logged and counted once the task finishes.
    """

    def __init__(self,
                 timeout: float = 10.0,
                 client: Optional[httpx.AsyncClient] = None,
                 metrics: Optional[MetricsCollector] = None):
        self.url = CRPT_CREATE_DOCUMENT_URL
        self.logger = get_logger("documents.crpt_client")
        self.metrics = metrics

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        # Strong references keep scheduled sends alive until they finish
        self._in_flight: Set[asyncio.Task] = set()

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    def send_async(self, body: bytes) -> "asyncio.Task[httpx.Response]":
        """Schedule a POST of ``body`` and return immediately."""
        task = asyncio.get_running_loop().create_task(self._post(body))
        self._in_flight.add(task)
        task.add_done_callback(self._on_sent)
        return task

    async def _post(self, body: bytes) -> httpx.Response:
        return await self._client.post(self.url, content=body, headers=JSON_HEADERS)

    def _on_sent(self, task: asyncio.Task) -> None:
        self._in_flight.discard(task)

        if task.cancelled():
            self.logger.debug("Document dispatch cancelled", url=self.url)
            self._record("cancelled")
            return

        error = task.exception()
        if error is not None:
            self.logger.warning(
                "Document dispatch failed",
                url=self.url,
                error=str(error),
                error_type=type(error).__name__
            )
            self._record("failed")
            return

        response = task.result()
        self.logger.debug("Document dispatched", url=self.url, status_code=response.status_code)
        self._record("sent")

    def _record(self, outcome: str) -> None:
        if self.metrics:
            self.metrics.record_dispatch(outcome)

    async def drain(self, timeout: Optional[float] = None) -> None:
        """Wait for outstanding sends; cancel whatever is left after ``timeout``."""
        if not self._in_flight:
            return

        pending = set(self._in_flight)
        _, still_pending = await asyncio.wait(pending, timeout=timeout)
        if still_pending:
            self.logger.warning("Cancelling unfinished dispatches", count=len(still_pending))
            for task in still_pending:
                task.cancel()
            await asyncio.wait(still_pending)

    async def aclose(self, timeout: Optional[float] = None) -> None:
        """Drain outstanding sends and close the HTTP client if we created it."""
        await self.drain(timeout)
        if self._owns_client:
            await self._client.aclose()
