"""Timeout constants.

All timeout and interval values for docker commands and the wait loop.
"""

from typing import Final

# ============================================================================
# Process-level command timeouts (int, in seconds)
# ============================================================================

DOCKER_COMMAND_TIMEOUT: Final = 30
DOCKER_INFO_TIMEOUT: Final = 10

# ============================================================================
# Wait loop durations (float, in seconds)
# ============================================================================

WAIT_INTERVAL_DEFAULT: Final = 60.0
WAIT_TIMEOUT_DEFAULT: Final = 600.0

__all__ = [
    "DOCKER_COMMAND_TIMEOUT",
    "DOCKER_INFO_TIMEOUT",
    "WAIT_INTERVAL_DEFAULT",
    "WAIT_TIMEOUT_DEFAULT",
]
