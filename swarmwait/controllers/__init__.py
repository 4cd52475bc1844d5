"""Controllers module for swarmwait.

This module provides controllers for fetching swarm service, node, and task
data through the docker CLI.
"""

from __future__ import annotations

# Base classes
from swarmwait.controllers.base import BaseController

# Swarm domain
from swarmwait.controllers.swarm.controller import SwarmController

__all__ = [
    # Base
    "BaseController",
    # Domain Controllers
    "SwarmController",
]
