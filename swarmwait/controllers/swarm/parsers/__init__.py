"""Parsers for swarm controller."""

from swarmwait.controllers.swarm.parsers.node_parser import NodeParser
from swarmwait.controllers.swarm.parsers.service_parser import ServiceParser
from swarmwait.controllers.swarm.parsers.task_parser import TaskParser

__all__ = ["NodeParser", "ServiceParser", "TaskParser"]
