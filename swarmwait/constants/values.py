"""Scalar constants.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_NAME: Final = "swarmwait"
DOCKER_BINARY: Final = "docker"

# ============================================================================
# User-facing messages
# ============================================================================

SUCCESS_MESSAGE: Final = "All services booted up"
TIMEOUT_MESSAGE: Final = "timeout reached while waiting for the services"

# ============================================================================
# Rendering
# ============================================================================

SHORT_ID_LENGTH: Final = 12
TABLE_FORMAT_KEY: Final = "table"
JSON_FORMAT_KEY: Final = "json"

# ============================================================================
# Exit codes
# ============================================================================

EXIT_SUCCESS: Final = 0
EXIT_FAILURE: Final = 1
EXIT_USAGE: Final = 2
EXIT_CANCELLED: Final = 130

__all__ = [
    "APP_NAME",
    "DOCKER_BINARY",
    "EXIT_CANCELLED",
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
    "EXIT_USAGE",
    "JSON_FORMAT_KEY",
    "SHORT_ID_LENGTH",
    "SUCCESS_MESSAGE",
    "TABLE_FORMAT_KEY",
    "TIMEOUT_MESSAGE",
]
