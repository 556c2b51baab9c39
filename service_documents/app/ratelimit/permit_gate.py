"""
Refill-to-capacity permit gate for outgoing CRPT requests.

The gate holds at most ``capacity`` permits. Each admitted request consumes
one. A background task resets the pool to ``capacity`` every ``period``
seconds on a fixed-rate grid, so availability follows a stair-step curve:
unused permits are not carried over and consumed ones are not trickled back.

One gate is meant to be shared by every submission call site in the process.
"""

import asyncio
import math
from typing import Optional

from shared.logging import get_logger
from shared.errors import ConstructionError, GateClosedError
from shared.metrics import MetricsCollector


def next_refill_deadline(deadline: float, now: float, period: float) -> float:
    """Return the first grid point after ``deadline`` that is still ahead of ``now``.

    Deadlines advance by whole periods from the previous deadline, never from
    ``now``, so window boundaries do not drift with refill latency. Ticks
    missed while the loop was busy collapse into the refill just performed.
    """
    deadline += period
    if deadline <= now:
        missed = int((now - deadline) // period) + 1
        deadline += missed * period
    return deadline


class PermitGate:
    """Counting admission gate replenished to full capacity on a timer."""

    def __init__(self,
                 capacity: int,
                 period: float,
                 *,
                 name: str = "crpt_api",
                 metrics: Optional[MetricsCollector] = None):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ConstructionError(
                "Permit capacity must be a positive integer",
                details={"capacity": capacity}
            )
        if (isinstance(period, bool) or not isinstance(period, (int, float))
                or not math.isfinite(period) or period <= 0):
            raise ConstructionError(
                "Refill period must be a finite positive number",
                details={"period": period}
            )

        self._capacity = capacity
        self._period = float(period)
        self.name = name
        self.metrics = metrics
        self.logger = get_logger(f"documents.permit_gate.{name}")

        self._available = capacity
        self._waiting = 0
        self._condition = asyncio.Condition()
        self._refill_task: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def period(self) -> float:
        return self._period

    @property
    def available(self) -> int:
        return self._available

    @property
    def waiting(self) -> int:
        """Number of tasks currently blocked in ``acquire``."""
        return self._waiting

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def running(self) -> bool:
        return self._refill_task is not None and not self._refill_task.done()

    def start(self) -> None:
        """Start the refill timer on the running event loop.

        Idempotent while the timer runs; a timer that has stopped is replaced.
        """
        if self._closed:
            raise GateClosedError(details={"gate": self.name})
        if self._refill_task is not None and not self._refill_task.done():
            return

        loop = asyncio.get_running_loop()
        self._refill_task = loop.create_task(
            self._run_refill_schedule(), name=f"permit-gate-refill-{self.name}"
        )
        self.logger.info(
            "Permit refill timer started",
            capacity=self._capacity,
            period_seconds=self._period
        )

    async def acquire(self) -> None:
        """Wait for a permit and consume it.

        Raises ``GateClosedError`` if the gate is or becomes closed. If the
        awaiting task is cancelled, ``asyncio.CancelledError`` propagates and
        no permit is consumed.
        """
        self.start()
        loop = asyncio.get_running_loop()
        started_at = loop.time()

        async with self._condition:
            self._waiting += 1
            try:
                while self._available == 0 and not self._closed:
                    await self._condition.wait()
            finally:
                self._waiting -= 1

            if self._closed:
                raise GateClosedError(details={"gate": self.name})

            self._available -= 1
            available = self._available

        if self.metrics:
            self.metrics.record_permit_granted(self.name, loop.time() - started_at, available)

    async def _refill(self) -> None:
        """Reset the pool to capacity and wake every waiter."""
        async with self._condition:
            self._available = self._capacity
            self._condition.notify_all()

        self.logger.debug("Permits refilled", available=self._capacity)
        if self.metrics:
            self.metrics.record_refill(self.name, self._capacity)

    async def _run_refill_schedule(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self._period
        while True:
            await asyncio.sleep(max(0.0, deadline - loop.time()))
            try:
                await self._refill()
            except Exception as e:
                self.logger.error("Error in permit refill", error=str(e), exc_info=True)
                if self.metrics:
                    self.metrics.record_error("REFILL_ERROR")
            deadline = next_refill_deadline(deadline, loop.time(), self._period)

    async def close(self) -> None:
        """Stop the refill timer and release blocked waiters (idempotent)."""
        if self._closed:
            return
        self._closed = True

        task, self._refill_task = self._refill_task, None
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

        async with self._condition:
            self._condition.notify_all()

        self.logger.info("Permit refill timer stopped", blocked_waiters=self._waiting)

    async def __aenter__(self) -> "PermitGate":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
