"""Pydantic models for swarmwait."""

from swarmwait.models.core import (
    CycleSnapshot,
    NodeInfo,
    PortConfigInfo,
    ProgressSummary,
    ServiceInfo,
    ServiceProgress,
    TaskInfo,
)
from swarmwait.models.state import DockerCliConfig, WaitSettings

__all__ = [
    "CycleSnapshot",
    "DockerCliConfig",
    "NodeInfo",
    "PortConfigInfo",
    "ProgressSummary",
    "ServiceInfo",
    "ServiceProgress",
    "TaskInfo",
    "WaitSettings",
]
