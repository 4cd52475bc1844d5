"""Task parser for swarm controller - parses task data into structured formats."""

from __future__ import annotations

from typing import Any

from swarmwait.constants.enums import TaskState
from swarmwait.models.core.swarm_info import TaskInfo


class TaskParser:
    """Parses ``docker inspect --type task`` objects into TaskInfo."""

    @staticmethod
    def _parse_state(value: Any) -> TaskState:
        try:
            return TaskState(str(value).lower())
        except ValueError:
            return TaskState.UNKNOWN

    def parse_task(self, task: dict[str, Any]) -> TaskInfo:
        """Parse a single task into TaskInfo."""
        status = task.get("Status") or {}
        return TaskInfo(
            id=task.get("ID", ""),
            service_id=task.get("ServiceID", ""),
            node_id=task.get("NodeID") or "",
            desired_state=self._parse_state(task.get("DesiredState", "unknown")),
            state=self._parse_state(status.get("State", "unknown")),
        )

    def parse_tasks(self, tasks: list[dict[str, Any]]) -> list[TaskInfo]:
        """Parse a list of raw tasks, skipping entries without an ID."""
        return [
            self.parse_task(task)
            for task in tasks
            if isinstance(task, dict) and task.get("ID")
        ]
