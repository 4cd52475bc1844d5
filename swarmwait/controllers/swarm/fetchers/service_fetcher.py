"""Service fetcher for swarm controller - fetches service specs from the manager."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from swarmwait.controllers.swarm.fetchers._base import InspectFetcher

logger = logging.getLogger(__name__)


class ServiceFetcher(InspectFetcher):
    """Fetches raw service objects matching docker ``--filter`` expressions."""

    def _build_list_args(self, filters: Iterable[str]) -> tuple[str, ...]:
        args: list[str] = ["service", "ls", "-q"]
        for item in filters:
            args.extend(["--filter", item])
        return tuple(args)

    async def fetch_services_raw(self, filters: Iterable[str] = ()) -> list[dict[str, Any]]:
        """List services matching filters and return their inspect objects."""
        output = await self._run_docker(self._build_list_args(filters))
        service_ids = self._parse_ids(output)
        logger.debug("Matched %d service(s)", len(service_ids))
        return await self._inspect(("service", "inspect"), service_ids)
