"""Base controller classes."""

from swarmwait.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
