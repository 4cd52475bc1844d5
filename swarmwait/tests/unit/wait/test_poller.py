"""Tests for the poll loop."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

import pytest

from swarmwait.constants.enums import TaskState, WaitOutcome, WaitState
from swarmwait.errors import ConfigurationError, SnapshotFetchError
from swarmwait.models.core.progress_info import CycleSnapshot
from swarmwait.models.core.swarm_info import NodeInfo, ServiceInfo, TaskInfo
from swarmwait.wait.poller import ServiceWaiter

Snapshot = tuple[list[TaskInfo], list[NodeInfo]]


class FakeFetcher:
    """Returns scripted snapshots; the last entry repeats forever."""

    def __init__(self, results: Sequence[Snapshot | Exception]) -> None:
        self._results = list(results)
        self.calls = 0

    async def fetch(self, services: Sequence[ServiceInfo]) -> Snapshot:
        self.calls += 1
        item = self._results[min(self.calls, len(self._results)) - 1]
        if isinstance(item, Exception):
            raise item
        return item


class BlockingFetcher:
    """First call answers immediately, later calls hang until cancelled."""

    def __init__(self, first: Snapshot) -> None:
        self._first = first
        self.calls = 0
        self.cancelled = False

    async def fetch(self, services: Sequence[ServiceInfo]) -> Snapshot:
        self.calls += 1
        if self.calls == 1:
            return self._first
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        raise AssertionError("unreachable")


class RecordingSink:
    """Collects rendered snapshot indices and the final outcome."""

    def __init__(self) -> None:
        self.rendered: list[int] = []
        self.outcome: WaitOutcome | None = None

    def render(self, services: Sequence[ServiceInfo], snapshot: CycleSnapshot) -> None:
        self.rendered.append(snapshot.index)

    def finish(self, outcome: WaitOutcome) -> None:
        self.outcome = outcome


async def collect(
    waiter: ServiceWaiter,
    services: Sequence[ServiceInfo],
    cancel: asyncio.Event | None = None,
    on_snapshot=None,
) -> tuple[list[CycleSnapshot], WaitOutcome | None]:
    snapshots: list[CycleSnapshot] = []
    outcome: WaitOutcome | None = None
    async for item in waiter.stream(services, cancel):
        if isinstance(item, WaitOutcome):
            outcome = item
        else:
            snapshots.append(item)
            if on_snapshot is not None:
                on_snapshot(item)
    return snapshots, outcome


class TestServiceWaiter:
    """Tests for ServiceWaiter class."""

    @pytest.fixture
    def services(self, make_service) -> list[ServiceInfo]:
        return [make_service("web", replicas=1)]

    @pytest.fixture
    def pending(self, make_node, make_task) -> Snapshot:
        return [make_task("web", "n1", state=TaskState.PREPARING)], [make_node("n1")]

    @pytest.fixture
    def ready(self, make_node, make_task) -> Snapshot:
        return [make_task("web", "n1")], [make_node("n1")]

    @pytest.mark.parametrize(
        ("interval", "timeout"),
        [(0, 1), (1, 0), (-1, 1), (1, -5)],
    )
    def test_rejects_non_positive_durations(self, interval: float, timeout: float) -> None:
        """Durations are validated before any cycle runs."""
        with pytest.raises(ConfigurationError):
            ServiceWaiter(FakeFetcher([]), interval=interval, timeout=timeout)

    def test_initial_state_is_idle(self) -> None:
        waiter = ServiceWaiter(FakeFetcher([]), interval=1, timeout=2)
        assert waiter.state == WaitState.IDLE

    @pytest.mark.asyncio
    async def test_empty_services_complete_without_cycles(self) -> None:
        """Nothing to watch is vacuously complete."""
        fetcher = FakeFetcher([])
        waiter = ServiceWaiter(fetcher, interval=1, timeout=2)

        snapshots, outcome = await collect(waiter, [])

        assert snapshots == []
        assert outcome == WaitOutcome.COMPLETED
        assert fetcher.calls == 0
        assert waiter.state == WaitState.COMPLETED

    @pytest.mark.asyncio
    async def test_completes_on_first_cycle(self, services, ready) -> None:
        """Already converged services stop after cycle 0."""
        fetcher = FakeFetcher([ready])
        waiter = ServiceWaiter(fetcher, interval=10, timeout=60)

        snapshots, outcome = await collect(waiter, services)

        assert [s.index for s in snapshots] == [0]
        assert snapshots[0].progress["web"].replicas == "1/1"
        assert outcome == WaitOutcome.COMPLETED
        assert fetcher.calls == 1

    @pytest.mark.asyncio
    async def test_completes_on_first_tick(self, services, pending, ready) -> None:
        """A task that starts before the first tick ends the wait at that tick."""
        fetcher = FakeFetcher([pending, ready])
        waiter = ServiceWaiter(fetcher, interval=0.02, timeout=5)

        snapshots, outcome = await collect(waiter, services)

        assert [s.index for s in snapshots] == [0, 1]
        assert not snapshots[0].summary.is_complete()
        assert snapshots[1].summary.is_complete()
        assert outcome == WaitOutcome.COMPLETED

    @pytest.mark.asyncio
    async def test_timeout_emits_three_cycles(self, services, pending) -> None:
        """timeout == 2 * interval yields cycles at 0, interval and timeout."""
        fetcher = FakeFetcher([pending])
        waiter = ServiceWaiter(fetcher, interval=0.05, timeout=0.1)

        snapshots, outcome = await collect(waiter, services)

        assert [s.index for s in snapshots] == [0, 1, 2]
        assert outcome == WaitOutcome.TIMED_OUT
        assert waiter.state == WaitState.TIMED_OUT

    @pytest.mark.asyncio
    async def test_timeout_cycle_is_final_even_when_complete(
        self, services, pending, ready
    ) -> None:
        """The timeout cycle is delivered but the outcome stays timed out."""
        fetcher = FakeFetcher([pending, pending, ready])
        waiter = ServiceWaiter(fetcher, interval=0.05, timeout=0.1)

        snapshots, outcome = await collect(waiter, services)

        assert len(snapshots) == 3
        assert snapshots[-1].summary.is_complete()
        assert outcome == WaitOutcome.TIMED_OUT

    @pytest.mark.asyncio
    async def test_first_cycle_error_propagates(self, services) -> None:
        """An unreachable cluster at start aborts the wait."""
        fetcher = FakeFetcher([SnapshotFetchError("connection refused")])
        waiter = ServiceWaiter(fetcher, interval=0.01, timeout=1)

        with pytest.raises(SnapshotFetchError, match="connection refused"):
            await collect(waiter, services)

    @pytest.mark.asyncio
    async def test_later_cycle_error_is_skipped(self, services, pending, ready) -> None:
        """A transient error mid-wait drops that cycle only."""
        fetcher = FakeFetcher([pending, SnapshotFetchError("blip"), ready])
        waiter = ServiceWaiter(fetcher, interval=0.02, timeout=5)

        snapshots, outcome = await collect(waiter, services)

        assert fetcher.calls == 3
        assert [s.index for s in snapshots] == [0, 1]
        assert snapshots[1].summary.is_complete()
        assert outcome == WaitOutcome.COMPLETED

    @pytest.mark.asyncio
    async def test_cycles_delivered_in_order_once(self, services, pending, ready) -> None:
        """The consumer sees each cycle exactly once, in order."""
        fetcher = FakeFetcher([pending, pending, pending, ready])
        waiter = ServiceWaiter(fetcher, interval=0.01, timeout=5)

        snapshots, outcome = await collect(waiter, services)

        assert [s.index for s in snapshots] == [0, 1, 2, 3]
        assert outcome == WaitOutcome.COMPLETED

    @pytest.mark.asyncio
    async def test_cancel_before_start(self, services, pending) -> None:
        """A raised signal prevents every cycle."""
        fetcher = FakeFetcher([pending])
        waiter = ServiceWaiter(fetcher, interval=0.01, timeout=1)
        cancel = asyncio.Event()
        cancel.set()

        snapshots, outcome = await collect(waiter, services, cancel)

        assert snapshots == []
        assert outcome == WaitOutcome.CANCELLED
        assert fetcher.calls == 0

    @pytest.mark.asyncio
    async def test_cancel_while_sleeping(self, services, pending) -> None:
        """Cancelling between ticks stops emission immediately."""
        fetcher = FakeFetcher([pending])
        waiter = ServiceWaiter(fetcher, interval=10, timeout=60)
        cancel = asyncio.Event()

        snapshots, outcome = await asyncio.wait_for(
            collect(waiter, services, cancel, on_snapshot=lambda _: cancel.set()),
            timeout=2,
        )

        assert [s.index for s in snapshots] == [0]
        assert outcome == WaitOutcome.CANCELLED
        assert waiter.state == WaitState.CANCELLED
        assert fetcher.calls == 1

    @pytest.mark.asyncio
    async def test_cancel_abandons_in_flight_fetch(self, services, pending) -> None:
        """An in-flight fetch is cancelled rather than awaited."""
        fetcher = BlockingFetcher(pending)
        waiter = ServiceWaiter(fetcher, interval=0.01, timeout=60)
        cancel = asyncio.Event()
        asyncio.get_running_loop().call_later(0.1, cancel.set)

        snapshots, outcome = await asyncio.wait_for(
            collect(waiter, services, cancel),
            timeout=2,
        )

        assert [s.index for s in snapshots] == [0]
        assert outcome == WaitOutcome.CANCELLED
        assert fetcher.cancelled is True

    @pytest.mark.asyncio
    async def test_run_drives_sink(self, services, pending, ready) -> None:
        """run() renders every cycle and reports the outcome once."""
        fetcher = FakeFetcher([pending, ready])
        waiter = ServiceWaiter(fetcher, interval=0.01, timeout=5)
        sink = RecordingSink()

        outcome = await waiter.run(services, sink)

        assert outcome == WaitOutcome.COMPLETED
        assert sink.rendered == [0, 1]
        assert sink.outcome == WaitOutcome.COMPLETED

    @pytest.mark.asyncio
    async def test_run_reports_timeout(self, services, pending) -> None:
        """The timeout cycle is still rendered before the failure outcome."""
        fetcher = FakeFetcher([pending])
        waiter = ServiceWaiter(fetcher, interval=0.05, timeout=0.1)
        sink = RecordingSink()

        outcome = await waiter.run(services, sink)

        assert outcome == WaitOutcome.TIMED_OUT
        assert sink.rendered == [0, 1, 2]
        assert sink.outcome == WaitOutcome.TIMED_OUT

    @pytest.mark.asyncio
    async def test_closing_stream_stops_producer(self, services, pending) -> None:
        """Abandoning the stream cancels the background producer."""
        fetcher = FakeFetcher([pending])
        waiter = ServiceWaiter(fetcher, interval=0.01, timeout=60)

        stream = waiter.stream(services)
        first = await stream.__anext__()
        await stream.aclose()
        calls_after_close = fetcher.calls
        await asyncio.sleep(0.05)

        assert isinstance(first, CycleSnapshot)
        assert fetcher.calls == calls_after_close
