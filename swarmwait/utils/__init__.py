"""Utility functions for swarmwait."""

from swarmwait.utils.duration import (
    format_duration,
    parse_duration,
    parse_positive_duration,
)
from swarmwait.utils.natural_sort import natural_key, natural_sorted
from swarmwait.utils.templates import render_template, template_fields

__all__ = [
    # Durations
    "format_duration",
    # Ordering
    "natural_key",
    "natural_sorted",
    "parse_duration",
    "parse_positive_duration",
    # Templates
    "render_template",
    "template_fields",
]
