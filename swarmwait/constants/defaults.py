"""Default values for settings.

All default values used by WaitSettings and the command line.
"""

from typing import Final

# ============================================================================
# Output defaults
# ============================================================================

OUTPUT_FORMAT_DEFAULT: Final = "table"
LOG_LEVEL_DEFAULT: Final = "WARNING"

# ============================================================================
# Command-line duration defaults (Go duration syntax)
# ============================================================================

INTERVAL_FLAG_DEFAULT: Final = "1m"
TIMEOUT_FLAG_DEFAULT: Final = "10m"

# ============================================================================
# Docker CLI config lookup
# ============================================================================

DOCKER_CONFIG_ENV: Final = "DOCKER_CONFIG"
DOCKER_CONFIG_DIR_DEFAULT: Final = "~/.docker"
DOCKER_CONFIG_FILENAME: Final = "config.json"

__all__ = [
    "DOCKER_CONFIG_DIR_DEFAULT",
    "DOCKER_CONFIG_ENV",
    "DOCKER_CONFIG_FILENAME",
    "INTERVAL_FLAG_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "OUTPUT_FORMAT_DEFAULT",
    "TIMEOUT_FLAG_DEFAULT",
]
