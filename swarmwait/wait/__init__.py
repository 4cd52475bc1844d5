"""Readiness wait engine: aggregation, snapshots, poll loop and sink."""

from swarmwait.wait.aggregator import aggregate, service_progress
from swarmwait.wait.poller import ProgressConsumer, ServiceWaiter
from swarmwait.wait.sink import ProgressSink
from swarmwait.wait.snapshot import SnapshotFetcher, SnapshotSource

__all__ = [
    "ProgressConsumer",
    "ProgressSink",
    "ServiceWaiter",
    "SnapshotFetcher",
    "SnapshotSource",
    "aggregate",
    "service_progress",
]
