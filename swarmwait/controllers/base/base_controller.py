"""Base controller for swarm data sources.

Controllers own the process that talks to the cluster and hand parsed models
to the wait loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseController(ABC):
    """Base controller class for cluster data sources.

    Subclasses should implement the abstract methods to provide
    specific data fetching functionality.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...
