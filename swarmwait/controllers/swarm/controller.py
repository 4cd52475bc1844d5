"""Swarm controller for docker data operations.

This module owns the ``docker`` subprocess runner and delegates to
specialized fetchers and parsers for services, nodes, and tasks.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterable
from contextlib import suppress

from swarmwait.constants.timeouts import DOCKER_COMMAND_TIMEOUT, DOCKER_INFO_TIMEOUT
from swarmwait.constants.values import DOCKER_BINARY
from swarmwait.controllers.base import BaseController
from swarmwait.controllers.swarm.fetchers import (
    NodeFetcher,
    ServiceFetcher,
    TaskFetcher,
)
from swarmwait.controllers.swarm.parsers import (
    NodeParser,
    ServiceParser,
    TaskParser,
)
from swarmwait.errors import SwarmCommandError
from swarmwait.models.core.swarm_info import NodeInfo, ServiceInfo, TaskInfo

logger = logging.getLogger(__name__)


class SwarmController(BaseController):
    """Docker swarm data operations through the ``docker`` CLI.

    This class serves as an orchestrator that delegates to specialized fetchers:
    - ServiceFetcher: service listing and inspection
    - NodeFetcher: node listing and inspection
    - TaskFetcher: task listing and inspection for selected services
    """

    _ERROR_SUMMARY_MAX_LENGTH = 160

    def __init__(
        self,
        context: str | None = None,
        command_timeout: float = DOCKER_COMMAND_TIMEOUT,
    ) -> None:
        """Initialize the swarm controller.

        Args:
            context: Optional docker context name.
            command_timeout: Per-command process timeout in seconds.
        """
        super().__init__()
        self.context = context
        self.command_timeout = command_timeout

        # Initialize fetchers
        self._service_fetcher = ServiceFetcher(self._run_docker)
        self._node_fetcher = NodeFetcher(self._run_docker)
        self._task_fetcher = TaskFetcher(self._run_docker)

        # Initialize parsers
        self._service_parser = ServiceParser()
        self._node_parser = NodeParser()
        self._task_parser = TaskParser()

    @classmethod
    def _summarize_error(cls, stderr: str) -> str:
        """Extract a concise, user-facing error from docker stderr."""
        lines = [line.strip() for line in stderr.splitlines() if line.strip()]
        if not lines:
            return "docker command failed"

        selected_line = lines[-1]
        for line in reversed(lines):
            if line.lower().startswith("error"):
                selected_line = line
                break

        cleaned = selected_line
        for prefix in ("Error response from daemon:", "Error:", "error:"):
            cleaned = cleaned.removeprefix(prefix).strip()
        limit = cls._ERROR_SUMMARY_MAX_LENGTH
        if len(cleaned) > limit:
            return f"{cleaned[:limit - 3].rstrip()}..."
        return cleaned or "docker command failed"

    def _build_command(self, args: tuple[str, ...]) -> list[str]:
        cmd = [DOCKER_BINARY]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        return cmd

    @staticmethod
    async def _kill(proc: asyncio.subprocess.Process) -> None:
        """Kill the child (if still alive) and reap it."""
        if proc.returncode is None:
            with suppress(ProcessLookupError):
                proc.kill()
        await proc.wait()

    async def _run_docker(
        self,
        args: tuple[str, ...],
        timeout: float | None = None,
    ) -> str:
        """Run a docker command and return its stdout.

        The child is killed when the awaiting task is cancelled, so an aborted
        wait never leaves a docker process behind.
        """
        cmd = self._build_command(args)
        effective_timeout = timeout if timeout is not None else self.command_timeout
        logger.debug("Running %s", " ".join(cmd))
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise SwarmCommandError(
                f"{DOCKER_BINARY} executable not found in PATH", args
            ) from exc

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(), timeout=effective_timeout
            )
        except asyncio.TimeoutError as exc:
            await self._kill(proc)
            raise SwarmCommandError(
                f"{DOCKER_BINARY} {' '.join(args[:2])} timed out after {effective_timeout}s",
                args,
            ) from exc
        except asyncio.CancelledError:
            await self._kill(proc)
            raise

        if proc.returncode != 0:
            raise SwarmCommandError(
                self._summarize_error(stderr.decode("utf-8", errors="replace")), args
            )
        return stdout.decode("utf-8", errors="replace")

    async def list_services(self, filters: Iterable[str] = ()) -> list[ServiceInfo]:
        """List services matching docker ``--filter`` expressions."""
        raw = await self._service_fetcher.fetch_services_raw(filters)
        return self._service_parser.parse_services(raw)

    async def list_tasks(self, service_ids: Iterable[str]) -> list[TaskInfo]:
        """List all tasks owned by the given services."""
        raw = await self._task_fetcher.fetch_tasks_raw(service_ids)
        return self._task_parser.parse_tasks(raw)

    async def list_nodes(self) -> list[NodeInfo]:
        """List every node in the swarm."""
        raw = await self._node_fetcher.fetch_nodes_raw()
        return self._node_parser.parse_nodes(raw)

    async def check_connection(self) -> bool:
        """Check that the daemon answers and is an active swarm member."""
        try:
            output = await self._run_docker(
                ("info", "--format", "{{json .Swarm}}"),
                timeout=DOCKER_INFO_TIMEOUT,
            )
        except SwarmCommandError as exc:
            logger.warning("Docker connection check failed: %s", exc)
            return False
        try:
            swarm = json.loads(output or "{}")
        except json.JSONDecodeError:
            logger.warning("Docker connection check returned invalid JSON")
            return False
        return isinstance(swarm, dict) and swarm.get("LocalNodeState") == "active"
