"""Poll loop that waits for services to converge.

One producer task runs fetch+aggregate cycles: once immediately, then on every
interval tick, until the summary is complete, the timeout fires, or the
cancellation event is set. Snapshots reach the consumer through an unbounded
queue in cycle order.

Timer ties: a tick that would land at or after the deadline is replaced by the
timeout cycle, so ``timeout == 2 * interval`` yields exactly three cycles.
"""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import AsyncGenerator, Coroutine, Sequence
from contextlib import suppress
from typing import Any, Protocol

from swarmwait.constants.enums import WaitOutcome, WaitState
from swarmwait.errors import ConfigurationError, SwarmCommandError
from swarmwait.models.core.progress_info import CycleSnapshot
from swarmwait.models.core.swarm_info import ServiceInfo
from swarmwait.utils.duration import format_duration
from swarmwait.wait.aggregator import aggregate
from swarmwait.wait.snapshot import SnapshotSource

logger = logging.getLogger(__name__)


class ProgressConsumer(Protocol):
    """Receives ordered snapshots and the terminal outcome."""

    def render(self, services: Sequence[ServiceInfo], snapshot: CycleSnapshot) -> None: ...

    def finish(self, outcome: WaitOutcome) -> None: ...


class ServiceWaiter:
    """Drives snapshot cycles against an interval, a timeout and a cancel event."""

    _TICK_TOLERANCE = 1e-9

    def __init__(
        self,
        fetcher: SnapshotSource,
        *,
        interval: float,
        timeout: float,
    ) -> None:
        """Initialize the waiter.

        Args:
            fetcher: Snapshot source queried once per cycle.
            interval: Seconds between cycles.
            timeout: Seconds after start at which the final cycle runs.

        Raises:
            ConfigurationError: If either duration is not positive.
        """
        for name, value in (("interval", interval), ("timeout", timeout)):
            if value < 0:
                raise ConfigurationError(f"{name} cannot be negative")
            if value == 0:
                raise ConfigurationError(f"{name} must be positive")
        self._fetcher = fetcher
        self.interval = interval
        self.timeout = timeout
        self.state = WaitState.IDLE

    async def _cycle(self, services: Sequence[ServiceInfo], index: int) -> CycleSnapshot:
        tasks, nodes = await self._fetcher.fetch(services)
        progress, summary = aggregate(services, nodes, tasks)
        logger.debug(
            "Cycle %d: %d/%d running",
            index,
            summary.total_running,
            summary.total_expected,
        )
        return CycleSnapshot(index=index, progress=progress, summary=summary)

    @staticmethod
    async def _race_cancel(
        coro: Coroutine[Any, Any, CycleSnapshot],
        cancel: asyncio.Event,
    ) -> CycleSnapshot | None:
        """Run one cycle unless cancellation wins; None means cancelled.

        The in-flight cycle is cancelled as soon as the event is set.
        """
        if cancel.is_set():
            coro.close()
            return None

        cycle_task = asyncio.ensure_future(coro)
        cancel_task = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait(
                {cycle_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            for task in (cycle_task, cancel_task):
                if not task.done():
                    task.cancel()
                    with suppress(asyncio.CancelledError):
                        await task

        if cancel.is_set():
            if not cycle_task.cancelled():
                # Mark any failure as retrieved; a cancelled wait discards it.
                cycle_task.exception()
            return None
        return cycle_task.result()

    @staticmethod
    async def _sleep_until(deadline: float, cancel: asyncio.Event) -> bool:
        """Sleep until ``deadline`` on the loop clock; True if cancelled first."""
        delay = max(0.0, deadline - asyncio.get_running_loop().time())
        try:
            await asyncio.wait_for(cancel.wait(), timeout=delay)
        except asyncio.TimeoutError:
            return False
        return True

    def _finish(self, outcome: WaitOutcome) -> WaitOutcome:
        self.state = WaitState(outcome.value)
        logger.info("Wait finished: %s", outcome.value)
        return outcome

    async def _drive(
        self,
        services: Sequence[ServiceInfo],
        cancel: asyncio.Event,
        queue: asyncio.Queue[CycleSnapshot | None],
    ) -> WaitOutcome:
        self.state = WaitState.RUNNING
        if not services:
            logger.info("No services to wait for")
            return self._finish(WaitOutcome.COMPLETED)

        logger.info(
            "Waiting for %d service(s): interval=%s timeout=%s",
            len(services),
            format_duration(self.interval),
            format_duration(self.timeout),
        )
        loop = asyncio.get_running_loop()
        started = loop.time()

        # First-cycle fetch errors propagate to the caller.
        snapshot = await self._race_cancel(self._cycle(services, 0), cancel)
        if snapshot is None:
            return self._finish(WaitOutcome.CANCELLED)
        queue.put_nowait(snapshot)
        if snapshot.summary.is_complete():
            return self._finish(WaitOutcome.COMPLETED)

        emitted = 1
        tick = 1
        while True:
            offset = tick * self.interval
            timed_out = offset >= self.timeout - self._TICK_TOLERANCE
            wake_at = started + (self.timeout if timed_out else offset)
            if await self._sleep_until(wake_at, cancel):
                return self._finish(WaitOutcome.CANCELLED)

            try:
                snapshot = await self._race_cancel(self._cycle(services, emitted), cancel)
            except SwarmCommandError as exc:
                logger.warning("Skipping poll at tick %d: %s", tick, exc)
            else:
                if snapshot is None:
                    return self._finish(WaitOutcome.CANCELLED)
                queue.put_nowait(snapshot)
                emitted += 1
                if not timed_out and snapshot.summary.is_complete():
                    return self._finish(WaitOutcome.COMPLETED)

            if timed_out:
                return self._finish(WaitOutcome.TIMED_OUT)

            # Ticks missed while a cycle overran are dropped, not replayed.
            elapsed = loop.time() - started
            tick = max(tick + 1, math.floor(elapsed / self.interval) + 1)

    async def _produce(
        self,
        services: Sequence[ServiceInfo],
        cancel: asyncio.Event,
        queue: asyncio.Queue[CycleSnapshot | None],
    ) -> WaitOutcome:
        try:
            return await self._drive(services, cancel, queue)
        finally:
            queue.put_nowait(None)

    async def stream(
        self,
        services: Sequence[ServiceInfo],
        cancel: asyncio.Event | None = None,
    ) -> AsyncGenerator[CycleSnapshot | WaitOutcome, None]:
        """Yield each cycle's snapshot in order, then the terminal outcome.

        Raises:
            SnapshotFetchError: If the first cycle cannot fetch its snapshot.
        """
        cancel = cancel if cancel is not None else asyncio.Event()
        queue: asyncio.Queue[CycleSnapshot | None] = asyncio.Queue()
        producer = asyncio.create_task(self._produce(list(services), cancel, queue))
        try:
            while True:
                item = await queue.get()
                if item is None:
                    break
                if cancel.is_set():
                    continue
                yield item
            yield await producer
        finally:
            if not producer.done():
                producer.cancel()
                with suppress(asyncio.CancelledError):
                    await producer

    async def run(
        self,
        services: Sequence[ServiceInfo],
        sink: ProgressConsumer,
        cancel: asyncio.Event | None = None,
    ) -> WaitOutcome:
        """Stream snapshots into ``sink`` and report the outcome to it."""
        outcome = WaitOutcome.CANCELLED
        stream = self.stream(services, cancel)
        try:
            async for item in stream:
                if isinstance(item, WaitOutcome):
                    outcome = item
                else:
                    sink.render(services, item)
        finally:
            await stream.aclose()
        sink.finish(outcome)
        return outcome


__all__ = ["ProgressConsumer", "ServiceWaiter"]
