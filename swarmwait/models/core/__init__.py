"""Core swarm and progress models."""

from swarmwait.models.core.progress_info import (
    CycleSnapshot,
    ProgressSummary,
    ServiceProgress,
)
from swarmwait.models.core.swarm_info import (
    NodeInfo,
    PortConfigInfo,
    ServiceInfo,
    TaskInfo,
)

__all__ = [
    "CycleSnapshot",
    "NodeInfo",
    "PortConfigInfo",
    "ProgressSummary",
    "ServiceInfo",
    "ServiceProgress",
    "TaskInfo",
]
