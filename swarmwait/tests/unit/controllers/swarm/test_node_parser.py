"""Tests for node parser."""

from __future__ import annotations

import pytest

from swarmwait.constants.enums import NodeState
from swarmwait.controllers.swarm.parsers.node_parser import NodeParser


class TestNodeParser:
    """Tests for NodeParser class."""

    @pytest.fixture
    def parser(self) -> NodeParser:
        """Create NodeParser instance."""
        return NodeParser()

    def test_parser_init(self, parser: NodeParser) -> None:
        """Test NodeParser initialization."""
        assert isinstance(parser, NodeParser)

    def test_parse_node_info(self, parser: NodeParser) -> None:
        node = {
            "ID": "n0de1d",
            "Description": {"Hostname": "worker-1"},
            "Status": {"State": "ready", "Addr": "10.0.0.5"},
        }

        result = parser.parse_node_info(node)

        assert result.id == "n0de1d"
        assert result.hostname == "worker-1"
        assert result.state == NodeState.READY
        assert result.is_active is True

    def test_parse_down_node(self, parser: NodeParser) -> None:
        result = parser.parse_node_info({"ID": "n1", "Status": {"State": "down"}})

        assert result.state == NodeState.DOWN
        assert result.is_active is False

    def test_parse_unrecognised_state(self, parser: NodeParser) -> None:
        result = parser.parse_node_info({"ID": "n1", "Status": {"State": "rebooting"}})
        assert result.state == NodeState.UNKNOWN
        assert result.is_active is True

    def test_parse_nodes_skips_missing_id(self, parser: NodeParser) -> None:
        result = parser.parse_nodes([{"ID": "n1"}, {"Status": {}}])
        assert [n.id for n in result] == ["n1"]
