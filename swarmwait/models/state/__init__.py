"""Settings models."""

from swarmwait.models.state.wait_settings import DockerCliConfig, WaitSettings

__all__ = ["DockerCliConfig", "WaitSettings"]
