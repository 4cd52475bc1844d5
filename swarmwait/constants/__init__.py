"""Constants module for swarmwait.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout values (seconds)
- defaults.py: Default values for settings
"""

from swarmwait.constants.defaults import (
    INTERVAL_FLAG_DEFAULT,
    LOG_LEVEL_DEFAULT,
    OUTPUT_FORMAT_DEFAULT,
    TIMEOUT_FLAG_DEFAULT,
)
from swarmwait.constants.enums import (
    NodeState,
    ServiceMode,
    TaskState,
    WaitOutcome,
    WaitState,
)
from swarmwait.constants.timeouts import (
    DOCKER_COMMAND_TIMEOUT,
    WAIT_INTERVAL_DEFAULT,
    WAIT_TIMEOUT_DEFAULT,
)
from swarmwait.constants.values import (
    APP_NAME,
    SUCCESS_MESSAGE,
    TIMEOUT_MESSAGE,
)

__all__ = [
    # Application
    "APP_NAME",
    # Timeouts
    "DOCKER_COMMAND_TIMEOUT",
    # Defaults
    "INTERVAL_FLAG_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "OUTPUT_FORMAT_DEFAULT",
    # Messages
    "SUCCESS_MESSAGE",
    "TIMEOUT_FLAG_DEFAULT",
    "TIMEOUT_MESSAGE",
    "WAIT_INTERVAL_DEFAULT",
    "WAIT_TIMEOUT_DEFAULT",
    # Enums
    "NodeState",
    "ServiceMode",
    "TaskState",
    "WaitOutcome",
    "WaitState",
]
