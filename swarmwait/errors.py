"""Exception hierarchy for swarmwait."""

from __future__ import annotations


class SwarmWaitError(Exception):
    """Base exception for all swarmwait errors."""


class ConfigurationError(SwarmWaitError):
    """Raised when settings are invalid before a wait starts."""


class SwarmCommandError(SwarmWaitError):
    """Raised when a docker command fails or cannot be run."""

    def __init__(self, message: str, args: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.command_args = args


class SnapshotFetchError(SwarmCommandError):
    """Raised when a poll cycle cannot fetch its task or node snapshot."""


class WaitTimeoutError(SwarmWaitError):
    """Raised by the command line when the wait ends without convergence."""
