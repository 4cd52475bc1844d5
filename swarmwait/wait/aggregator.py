"""Status aggregation - expected vs running task counts per service.

``aggregate`` is a pure function of one cycle's snapshots: nothing is carried
over between cycles and every call allocates fresh results.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from swarmwait.constants.enums import ServiceMode, TaskState
from swarmwait.models.core.progress_info import ProgressSummary, ServiceProgress
from swarmwait.models.core.swarm_info import NodeInfo, ServiceInfo, TaskInfo


def _active_node_ids(nodes: Iterable[NodeInfo]) -> set[str]:
    return {node.id for node in nodes if node.is_active}


def _count_tasks(
    tasks: Iterable[TaskInfo],
    active_nodes: set[str],
) -> tuple[Counter[str], Counter[str]]:
    """Return (not-shutdown, running) task counters keyed by service id.

    A task on a node that is missing or down never counts as running.
    """
    not_shutdown: Counter[str] = Counter()
    running: Counter[str] = Counter()
    for task in tasks:
        if task.desired_state != TaskState.SHUTDOWN:
            not_shutdown[task.service_id] += 1
        if task.node_id in active_nodes and task.state == TaskState.RUNNING:
            running[task.service_id] += 1
    return not_shutdown, running


def service_progress(
    service: ServiceInfo,
    not_shutdown: int,
    running: int,
) -> ServiceProgress:
    """Build the progress entry for one service.

    Unclassified services get a zero-valued entry so callers always see one
    row per watched service.
    """
    if service.mode == ServiceMode.REPLICATED and service.replicas is not None:
        desired = service.replicas
        replicas = f"{running}/{desired}"
        if service.max_replicas_per_node > 0:
            replicas += f" (max {service.max_replicas_per_node} per node)"
        return ServiceProgress(
            mode=ServiceMode.REPLICATED,
            replicas=replicas,
            expected=desired,
            running=running,
        )
    if service.mode == ServiceMode.GLOBAL:
        return ServiceProgress(
            mode=ServiceMode.GLOBAL,
            replicas=f"{running}/{not_shutdown}",
            expected=not_shutdown,
            running=running,
        )
    return ServiceProgress()


def aggregate(
    services: Sequence[ServiceInfo],
    nodes: Iterable[NodeInfo],
    tasks: Iterable[TaskInfo],
) -> tuple[dict[str, ServiceProgress], ProgressSummary]:
    """Compute per-service progress and the cluster-wide summary.

    Args:
        services: Watched services (fixed for the whole wait).
        nodes: Current node snapshot.
        tasks: Current task snapshot for the watched services.

    Returns:
        Tuple of (progress keyed by service id, summary over classified services).
    """
    not_shutdown, running = _count_tasks(tasks, _active_node_ids(nodes))

    progress: dict[str, ServiceProgress] = {}
    total_expected = 0
    total_running = 0
    for service in services:
        entry = service_progress(
            service,
            not_shutdown=not_shutdown[service.id],
            running=running[service.id],
        )
        progress[service.id] = entry
        if entry.mode != ServiceMode.UNKNOWN:
            total_expected += entry.expected
            total_running += entry.running

    return progress, ProgressSummary(
        total_expected=total_expected,
        total_running=total_running,
    )


__all__ = ["aggregate", "service_progress"]
