"""Duration parsing for command-line flags.

Accepts Go-style durations (``1m30s``, ``500ms``, ``2h``) as used by the
docker CLI, or a bare number of seconds.
"""

from __future__ import annotations

import re

from swarmwait.errors import ConfigurationError

_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_COMPONENT_PATTERN = re.compile(rf"({_NUMBER})(ns|us|µs|μs|ms|s|m|h)")
_DURATION_PATTERN = re.compile(rf"^[-+]?(?:{_NUMBER}(?:ns|us|µs|μs|ms|s|m|h))+$")
_BARE_SECONDS_PATTERN = re.compile(rf"^[-+]?{_NUMBER}$")


def parse_duration(value: str) -> float:
    """Parse a duration string into seconds.

    Args:
        value: Duration text, e.g. ``"1m"``, ``"1h30m"``, ``"90"``.

    Returns:
        The duration in seconds. May be negative; callers decide whether
        negative values are acceptable.

    Raises:
        ConfigurationError: If the text is not a valid duration.
    """
    text = value.strip()
    if not text:
        raise ConfigurationError("invalid duration: empty value")

    if _BARE_SECONDS_PATTERN.match(text):
        return float(text)

    if not _DURATION_PATTERN.match(text):
        raise ConfigurationError(f"invalid duration {value!r}")

    sign = -1.0 if text.startswith("-") else 1.0
    total = sum(
        float(number) * _UNIT_SECONDS[unit]
        for number, unit in _COMPONENT_PATTERN.findall(text)
    )
    return sign * total


def parse_positive_duration(value: str, *, name: str = "duration") -> float:
    """Parse a duration and reject values that are not strictly positive."""
    seconds = parse_duration(value)
    if seconds < 0:
        raise ConfigurationError(f"{name} cannot be negative")
    if seconds == 0:
        raise ConfigurationError(f"{name} must be positive")
    return seconds


def format_duration(seconds: float) -> str:
    """Render seconds as a compact Go-style duration for log messages."""
    if seconds <= 0:
        return "0s"
    whole = int(seconds)
    hours, remainder = divmod(whole, 3600)
    minutes, secs = divmod(remainder, 60)
    fraction = seconds - whole

    parts: list[str] = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs or fraction or not parts:
        if fraction:
            parts.append(f"{secs + fraction:g}s")
        else:
            parts.append(f"{secs}s")
    return "".join(parts)


__all__ = ["format_duration", "parse_duration", "parse_positive_duration"]
