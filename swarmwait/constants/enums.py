"""All enum definitions.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Swarm object states
# =============================================================================

class ServiceMode(Enum):
    """Desired-state mode of a swarm service."""

    REPLICATED = "replicated"
    GLOBAL = "global"
    UNKNOWN = ""


class NodeState(Enum):
    """Node liveness values reported by the swarm manager."""

    READY = "ready"
    DOWN = "down"
    DISCONNECTED = "disconnected"
    UNKNOWN = "unknown"


class TaskState(Enum):
    """Task lifecycle states reported by the swarm manager."""

    NEW = "new"
    ALLOCATED = "allocated"
    PENDING = "pending"
    ASSIGNED = "assigned"
    ACCEPTED = "accepted"
    PREPARING = "preparing"
    READY = "ready"
    STARTING = "starting"
    RUNNING = "running"
    COMPLETE = "complete"
    SHUTDOWN = "shutdown"
    FAILED = "failed"
    REJECTED = "rejected"
    REMOVE = "remove"
    ORPHANED = "orphaned"
    UNKNOWN = "unknown"


# =============================================================================
# Wait loop states
# =============================================================================

class WaitState(Enum):
    """Lifecycle of one wait operation."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"


class WaitOutcome(Enum):
    """Terminal result of a wait operation."""

    COMPLETED = "completed"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"


__all__ = [
    "NodeState",
    "ServiceMode",
    "TaskState",
    "WaitOutcome",
    "WaitState",
]
