"""Docker-style ``{{.Field}}`` output templates for service rows."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from swarmwait.errors import ConfigurationError

TEMPLATE_FIELDS = (
    "ID",
    "Name",
    "Mode",
    "Replicas",
    "Image",
    "Ports",
    "Expected",
    "Running",
)

_PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*\.(\w+)\s*\}\}")
_ESCAPES = {r"\t": "\t", r"\n": "\n"}


def unescape(template: str) -> str:
    """Expand literal ``\\t`` and ``\\n`` sequences typed on the command line."""
    for literal, actual in _ESCAPES.items():
        template = template.replace(literal, actual)
    return template


def template_fields(template: str) -> list[str]:
    """Return placeholder field names in order of appearance.

    Raises:
        ConfigurationError: If a placeholder names an unknown field.
    """
    fields = _PLACEHOLDER_PATTERN.findall(template)
    unknown = [field for field in fields if field not in TEMPLATE_FIELDS]
    if unknown:
        raise ConfigurationError(
            f"unknown template field(s): {', '.join(unknown)}; "
            f"available: {', '.join(TEMPLATE_FIELDS)}"
        )
    return fields


def render_template(template: str, row: Mapping[str, Any]) -> str:
    """Substitute every ``{{.Field}}`` placeholder with ``row[Field]``."""
    template_fields(template)
    return _PLACEHOLDER_PATTERN.sub(
        lambda match: str(row.get(match.group(1), "")),
        unescape(template),
    )


__all__ = ["TEMPLATE_FIELDS", "render_template", "template_fields", "unescape"]
