"""Wait operation settings models."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from swarmwait.constants.defaults import (
    DOCKER_CONFIG_DIR_DEFAULT,
    DOCKER_CONFIG_ENV,
    DOCKER_CONFIG_FILENAME,
    OUTPUT_FORMAT_DEFAULT,
)
from swarmwait.constants.timeouts import WAIT_INTERVAL_DEFAULT, WAIT_TIMEOUT_DEFAULT
from swarmwait.errors import ConfigurationError


class WaitSettings(BaseModel):
    """Validated settings for one wait operation."""

    model_config = ConfigDict(frozen=True)

    interval_seconds: float = WAIT_INTERVAL_DEFAULT
    timeout_seconds: float = WAIT_TIMEOUT_DEFAULT
    quiet: bool = False
    output_format: str = OUTPUT_FORMAT_DEFAULT
    filters: tuple[str, ...] = Field(default_factory=tuple)
    context: str | None = None

    @field_validator("interval_seconds", "timeout_seconds")
    @classmethod
    def _check_positive(cls, value: float) -> float:
        if value < 0:
            raise ValueError("duration cannot be negative")
        if value == 0:
            raise ValueError("duration must be positive")
        return value

    @field_validator("filters")
    @classmethod
    def _check_filters(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for item in value:
            key, sep, _ = item.partition("=")
            if not sep or not key.strip():
                raise ValueError(f"bad format of filter (expected name=value): {item!r}")
        return value

    @classmethod
    def build(cls, **values: object) -> WaitSettings:
        """Validate values, raising ConfigurationError instead of ValidationError."""
        try:
            return cls(**values)
        except ValidationError as exc:
            messages = "; ".join(
                f"{'.'.join(str(p) for p in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise ConfigurationError(messages) from exc


class DockerCliConfig(BaseModel):
    """Subset of the docker CLI ``config.json`` used for output defaults."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    services_format: str = Field(default="", alias="servicesFormat")

    @staticmethod
    def default_path() -> Path:
        """Resolve ``$DOCKER_CONFIG/config.json`` or ``~/.docker/config.json``."""
        base = os.environ.get(DOCKER_CONFIG_ENV) or DOCKER_CONFIG_DIR_DEFAULT
        return Path(base).expanduser() / DOCKER_CONFIG_FILENAME

    @classmethod
    def load(cls, path: Path | None = None) -> DockerCliConfig:
        """Load the config file; a missing file yields empty defaults."""
        config_path = path or cls.default_path()
        if not config_path.is_file():
            return cls()
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(
                f"unable to read docker config {config_path}: {exc}"
            ) from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"docker config {config_path} is not an object")
        return cls.model_validate(data)
