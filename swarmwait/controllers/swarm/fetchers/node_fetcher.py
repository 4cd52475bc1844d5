"""Node fetcher for swarm controller - fetches node data from the manager."""

from __future__ import annotations

from typing import Any

from swarmwait.controllers.swarm.fetchers._base import InspectFetcher


class NodeFetcher(InspectFetcher):
    """Fetches all swarm nodes."""

    async def fetch_nodes_raw(self) -> list[dict[str, Any]]:
        """Return inspect objects for every node in the swarm."""
        output = await self._run_docker(("node", "ls", "-q"))
        return await self._inspect(("node", "inspect"), self._parse_ids(output))
