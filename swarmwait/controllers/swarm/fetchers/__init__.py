"""Fetchers for swarm controller."""

from swarmwait.controllers.swarm.fetchers.node_fetcher import NodeFetcher
from swarmwait.controllers.swarm.fetchers.service_fetcher import ServiceFetcher
from swarmwait.controllers.swarm.fetchers.task_fetcher import TaskFetcher

__all__ = ["NodeFetcher", "ServiceFetcher", "TaskFetcher"]
