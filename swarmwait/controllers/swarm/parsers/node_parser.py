"""Node parser for swarm controller - parses node data into structured formats."""

from __future__ import annotations

from typing import Any

from swarmwait.constants.enums import NodeState
from swarmwait.models.core.swarm_info import NodeInfo


class NodeParser:
    """Parses node data into structured formats."""

    def __init__(self) -> None:
        """Initialize node parser."""
        pass

    @staticmethod
    def _parse_state(value: Any) -> NodeState:
        """Map the reported node state; unrecognised values become UNKNOWN."""
        try:
            return NodeState(str(value).lower())
        except ValueError:
            return NodeState.UNKNOWN

    def parse_node_info(self, node: dict[str, Any]) -> NodeInfo:
        """Parse a single node into NodeInfo.

        Args:
            node: Raw node dictionary from ``docker node inspect``

        Returns:
            NodeInfo object.
        """
        status = node.get("Status") or {}
        description = node.get("Description") or {}

        return NodeInfo(
            id=node.get("ID", ""),
            hostname=description.get("Hostname", ""),
            state=self._parse_state(status.get("State", "unknown")),
        )

    def parse_nodes(self, nodes: list[dict[str, Any]]) -> list[NodeInfo]:
        """Parse a list of raw nodes, skipping entries without an ID."""
        return [
            self.parse_node_info(node)
            for node in nodes
            if isinstance(node, dict) and node.get("ID")
        ]
