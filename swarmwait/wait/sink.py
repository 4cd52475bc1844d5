"""Progress sink - renders every cycle snapshot and the final notice."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.table import Table

from swarmwait.constants.defaults import OUTPUT_FORMAT_DEFAULT
from swarmwait.constants.enums import WaitOutcome
from swarmwait.constants.values import (
    JSON_FORMAT_KEY,
    SHORT_ID_LENGTH,
    SUCCESS_MESSAGE,
    TABLE_FORMAT_KEY,
)
from swarmwait.models.core.progress_info import CycleSnapshot, ServiceProgress
from swarmwait.models.core.swarm_info import PortConfigInfo, ServiceInfo
from swarmwait.utils.templates import render_template, template_fields

logger = logging.getLogger(__name__)

DEFAULT_TABLE_FIELDS = ("ID", "Name", "Mode", "Replicas", "Image", "Ports")


def format_ports(ports: Sequence[PortConfigInfo]) -> str:
    """Render ingress-published ports as ``*:published->target/protocol``."""
    return ", ".join(
        f"*:{port.published_port}->{port.target_port}/{port.protocol}"
        for port in ports
        if port.publish_mode == "ingress" and port.published_port
    )


def build_row(service: ServiceInfo, progress: ServiceProgress | None) -> dict[str, Any]:
    """Flatten one service and its progress into template fields."""
    entry = progress or ServiceProgress()
    return {
        "ID": service.id[:SHORT_ID_LENGTH],
        "Name": service.name,
        "Mode": entry.mode.value,
        "Replicas": entry.replicas,
        "Image": service.image,
        "Ports": format_ports(service.ports),
        "Expected": entry.expected,
        "Running": entry.running,
    }


class ProgressSink:
    """Renders snapshots with rich, one rendering per cycle.

    Supported formats: ``table`` (default columns), ``table <template>``,
    ``json`` (one object per service per line) and a bare ``{{.Field}}``
    template. ``quiet`` prints service IDs only.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        output_format: str = OUTPUT_FORMAT_DEFAULT,
        quiet: bool = False,
    ) -> None:
        self.console = console or Console()
        self.quiet = quiet
        self.output_format = (output_format or OUTPUT_FORMAT_DEFAULT).strip()
        self._table_fields: tuple[str, ...] | None = None
        self._template: str | None = None
        self._parse_format()

    def _parse_format(self) -> None:
        """Split the format into table columns or a line template.

        Raises:
            ConfigurationError: If the template names an unknown field.
        """
        fmt = self.output_format
        if fmt == TABLE_FORMAT_KEY:
            self._table_fields = DEFAULT_TABLE_FIELDS
        elif fmt.startswith(f"{TABLE_FORMAT_KEY} "):
            body = fmt[len(TABLE_FORMAT_KEY) + 1:]
            self._table_fields = tuple(template_fields(body)) or DEFAULT_TABLE_FIELDS
        elif fmt != JSON_FORMAT_KEY:
            template_fields(fmt)
            self._template = fmt

    def _print_line(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def _render_table(self, rows: list[dict[str, Any]], fields: Sequence[str]) -> None:
        table = Table(box=None, pad_edge=False, header_style="bold", show_edge=False)
        for field in fields:
            table.add_column(field.upper(), no_wrap=True)
        for row in rows:
            table.add_row(*(str(row[field]) for field in fields))
        self.console.print(table)

    def render(self, services: Sequence[ServiceInfo], snapshot: CycleSnapshot) -> None:
        """Render one cycle's snapshot for all watched services."""
        logger.debug(
            "Rendering cycle %d observed at %s",
            snapshot.index,
            snapshot.observed_at.isoformat(timespec="seconds"),
        )
        rows = [build_row(service, snapshot.progress.get(service.id)) for service in services]

        if self.quiet:
            for row in rows:
                self._print_line(row["ID"])
        elif self._table_fields is not None:
            self._render_table(rows, self._table_fields)
        elif self._template is not None:
            for row in rows:
                self._print_line(render_template(self._template, row))
        else:
            for row in rows:
                self._print_line(json.dumps(row, separators=(",", ":")))

    def finish(self, outcome: WaitOutcome) -> None:
        """Print the trailing notice for the terminal outcome."""
        if outcome == WaitOutcome.COMPLETED:
            self.console.print()
            self._print_line(SUCCESS_MESSAGE)
        elif outcome == WaitOutcome.TIMED_OUT:
            self.console.print()


__all__ = ["DEFAULT_TABLE_FIELDS", "ProgressSink", "build_row", "format_ports"]
