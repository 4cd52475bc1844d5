"""Shared list-then-inspect plumbing for swarm fetchers."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any

from swarmwait.errors import SwarmCommandError

RunDockerFunc = Callable[[tuple[str, ...]], Awaitable[str]]


class InspectFetcher:
    """Base for fetchers that list object IDs and then inspect them in one call."""

    def __init__(self, run_docker_func: RunDockerFunc) -> None:
        """Initialize with docker runner function.

        Args:
            run_docker_func: Async function to run docker commands
        """
        self._run_docker = run_docker_func

    @staticmethod
    def _parse_ids(output: str) -> list[str]:
        """Parse ``-q`` output into unique IDs, preserving order."""
        ids: list[str] = []
        for line in output.splitlines():
            value = line.strip()
            if value and value not in ids:
                ids.append(value)
        return ids

    @staticmethod
    def _parse_inspect_output(output: str, args: tuple[str, ...]) -> list[dict[str, Any]]:
        """Decode inspect JSON, which is always an array of objects."""
        if not output.strip():
            return []
        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise SwarmCommandError(f"invalid JSON from docker: {exc}", args) from exc
        if not isinstance(data, list):
            raise SwarmCommandError("unexpected inspect output: not a JSON array", args)
        return [item for item in data if isinstance(item, dict)]

    async def _inspect(self, inspect_args: tuple[str, ...], ids: list[str]) -> list[dict[str, Any]]:
        if not ids:
            return []
        args = (*inspect_args, *ids)
        output = await self._run_docker(args)
        return self._parse_inspect_output(output, args)
