"""Task fetcher for swarm controller - fetches tasks of selected services."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from swarmwait.controllers.swarm.fetchers._base import InspectFetcher

logger = logging.getLogger(__name__)


class TaskFetcher(InspectFetcher):
    """Fetches every task (including history) owned by the given services."""

    @staticmethod
    def _build_list_args(service_ids: Iterable[str]) -> tuple[str, ...]:
        return ("service", "ps", "-q", "--no-trunc", *service_ids)

    async def fetch_tasks_raw(self, service_ids: Iterable[str]) -> list[dict[str, Any]]:
        """Return inspect objects for tasks of ``service_ids``.

        An empty ID list returns ``[]`` without calling docker, since
        ``docker service ps`` with no service would be a usage error.
        """
        ids = list(service_ids)
        if not ids:
            return []
        output = await self._run_docker(self._build_list_args(ids))
        task_ids = self._parse_ids(output)
        logger.debug("Found %d task(s) for %d service(s)", len(task_ids), len(ids))
        return await self._inspect(("inspect", "--type", "task"), task_ids)
