"""Shared factories for swarm model fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from swarmwait.constants.enums import NodeState, ServiceMode, TaskState
from swarmwait.models.core.swarm_info import NodeInfo, ServiceInfo, TaskInfo


@pytest.fixture
def make_service() -> Callable[..., ServiceInfo]:
    """Build a ServiceInfo with replicated defaults."""

    def _make(
        service_id: str = "svc1",
        name: str | None = None,
        mode: ServiceMode = ServiceMode.REPLICATED,
        replicas: int | None = 1,
        **kwargs: Any,
    ) -> ServiceInfo:
        return ServiceInfo(
            id=service_id,
            name=name or service_id,
            mode=mode,
            replicas=replicas if mode == ServiceMode.REPLICATED else None,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_node() -> Callable[..., NodeInfo]:
    """Build a NodeInfo, ready by default."""

    def _make(node_id: str = "node1", state: NodeState = NodeState.READY) -> NodeInfo:
        return NodeInfo(id=node_id, hostname=f"{node_id}.local", state=state)

    return _make


@pytest.fixture
def make_task() -> Callable[..., TaskInfo]:
    """Build a TaskInfo that is running and desired running by default."""
    counter = iter(range(1, 10_000))

    def _make(
        service_id: str = "svc1",
        node_id: str = "node1",
        state: TaskState = TaskState.RUNNING,
        desired_state: TaskState = TaskState.RUNNING,
    ) -> TaskInfo:
        return TaskInfo(
            id=f"task{next(counter)}",
            service_id=service_id,
            node_id=node_id,
            state=state,
            desired_state=desired_state,
        )

    return _make
