"""Init file for swarm module."""

from swarmwait.controllers.swarm.controller import SwarmController
from swarmwait.controllers.swarm.fetchers import (
    NodeFetcher,
    ServiceFetcher,
    TaskFetcher,
)
from swarmwait.controllers.swarm.parsers import NodeParser, ServiceParser, TaskParser

__all__ = [
    "NodeFetcher",
    "NodeParser",
    "ServiceFetcher",
    "ServiceParser",
    "SwarmController",
    "TaskFetcher",
    "TaskParser",
]
