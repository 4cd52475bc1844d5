"""Tests for base controller."""

from __future__ import annotations

import pytest

from swarmwait.controllers.base import BaseController
from swarmwait.controllers.swarm.controller import SwarmController


class TestBaseController:
    """Tests for BaseController class."""

    def test_abstract_methods(self) -> None:
        """Only the connection check is required of a data source."""
        assert BaseController.__abstractmethods__ == frozenset({"check_connection"})

    def test_cannot_instantiate(self) -> None:
        with pytest.raises(TypeError):
            BaseController()  # type: ignore[abstract]

    def test_swarm_controller_surface(self) -> None:
        assert issubclass(SwarmController, BaseController)
        assert not hasattr(SwarmController, "fetch_all")
