"""Snapshot fetching for one poll cycle."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Protocol

from swarmwait.controllers.swarm.controller import SwarmController
from swarmwait.errors import SnapshotFetchError, SwarmCommandError
from swarmwait.models.core.swarm_info import NodeInfo, ServiceInfo, TaskInfo

logger = logging.getLogger(__name__)


class SnapshotFetcher:
    """Fetches fresh task and node snapshots for the watched services."""

    def __init__(self, controller: SwarmController) -> None:
        self._controller = controller

    async def fetch(
        self, services: Sequence[ServiceInfo]
    ) -> tuple[list[TaskInfo], list[NodeInfo]]:
        """Return (tasks of ``services``, all nodes).

        Raises:
            SnapshotFetchError: If either docker query fails.
        """
        if not services:
            return [], []

        service_ids = [service.id for service in services]
        try:
            tasks, nodes = await asyncio.gather(
                self._controller.list_tasks(service_ids),
                self._controller.list_nodes(),
            )
        except SwarmCommandError as exc:
            raise SnapshotFetchError(exc.message, exc.command_args) from exc
        logger.debug("Snapshot: %d task(s), %d node(s)", len(tasks), len(nodes))
        down = [node.hostname or node.id for node in nodes if not node.is_active]
        if down:
            logger.info("Not counting tasks on down node(s): %s", ", ".join(down))
        return tasks, nodes


class SnapshotSource(Protocol):
    """Anything that can produce one cycle's (tasks, nodes) snapshot."""

    async def fetch(
        self, services: Sequence[ServiceInfo]
    ) -> tuple[list[TaskInfo], list[NodeInfo]]: ...
