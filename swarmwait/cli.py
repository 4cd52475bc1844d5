"""Command-line entry point: ``swarmwait``.

Usage:
    swarmwait --filter label=stack=web --interval 5s --timeout 2m
    swarmwait -q --timeout 30s
    swarmwait --format "{{.Name}}: {{.Replicas}}"
"""

from __future__ import annotations

import asyncio
import logging
import signal
from contextlib import suppress
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from swarmwait.constants.defaults import (
    INTERVAL_FLAG_DEFAULT,
    LOG_LEVEL_DEFAULT,
    OUTPUT_FORMAT_DEFAULT,
    TIMEOUT_FLAG_DEFAULT,
)
from swarmwait.constants.enums import WaitOutcome
from swarmwait.constants.values import (
    APP_NAME,
    EXIT_CANCELLED,
    EXIT_FAILURE,
    EXIT_USAGE,
    TIMEOUT_MESSAGE,
)
from swarmwait.controllers.swarm.controller import SwarmController
from swarmwait.errors import (
    ConfigurationError,
    SwarmCommandError,
    SwarmWaitError,
    WaitTimeoutError,
)
from swarmwait.models.state.wait_settings import DockerCliConfig, WaitSettings
from swarmwait.utils.duration import parse_positive_duration
from swarmwait.utils.natural_sort import natural_sorted
from swarmwait.wait.poller import ProgressConsumer, ServiceWaiter
from swarmwait.wait.sink import ProgressSink
from swarmwait.wait.snapshot import SnapshotFetcher

logger = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    help="Wait for swarm services to reach their desired running-task count.",
    add_completion=False,
)
console = Console(stderr=True)
stdout_console = Console()


def configure_logging(level: str) -> None:
    """Route all log records through a RichHandler on stderr."""
    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)


def resolve_output_format(
    output_format: str | None,
    quiet: bool,
    config_path: Path | None = None,
) -> str:
    """Pick the explicit format, else the docker CLI ``servicesFormat``, else ``table``."""
    if output_format:
        return output_format
    if not quiet:
        services_format = DockerCliConfig.load(config_path).services_format
        if services_format:
            return services_format
    return OUTPUT_FORMAT_DEFAULT


async def wait_for_services(
    settings: WaitSettings,
    controller: SwarmController,
    sink: ProgressConsumer,
) -> WaitOutcome:
    """List the matching services once, then wait for them to converge.

    SIGINT and SIGTERM set the cancellation event instead of killing the loop.
    """
    try:
        services = await controller.list_services(settings.filters)
    except SwarmCommandError:
        if not await controller.check_connection():
            logger.error("Docker daemon is unreachable or not part of an active swarm")
        raise
    services = natural_sorted(services, key=lambda service: service.name)

    waiter = ServiceWaiter(
        SnapshotFetcher(controller),
        interval=settings.interval_seconds,
        timeout=settings.timeout_seconds,
    )
    cancel = asyncio.Event()
    loop = asyncio.get_running_loop()
    installed: list[signal.Signals] = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        with suppress(NotImplementedError, RuntimeError, ValueError):
            loop.add_signal_handler(sig, cancel.set)
            installed.append(sig)
    try:
        return await waiter.run(services, sink, cancel)
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)


def check_outcome(outcome: WaitOutcome) -> None:
    """Raise WaitTimeoutError for the timeout outcome."""
    if outcome == WaitOutcome.TIMED_OUT:
        raise WaitTimeoutError(TIMEOUT_MESSAGE)


@app.command()
def wait(
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only display IDs")
    ] = False,
    output_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            help="Output format: 'table', 'json', or a {{.Field}} template",
        ),
    ] = None,
    filters: Annotated[
        list[str] | None,
        typer.Option("--filter", "-f", help="Filter services (name=value), repeatable"),
    ] = None,
    interval: Annotated[
        str, typer.Option(help="Interval in which we check the status")
    ] = INTERVAL_FLAG_DEFAULT,
    timeout: Annotated[
        str, typer.Option(help="Max duration to wait")
    ] = TIMEOUT_FLAG_DEFAULT,
    context: Annotated[
        str | None, typer.Option(help="Docker context to use")
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(help="Docker CLI config file (default: ~/.docker/config.json)"),
    ] = None,
    log_level: Annotated[
        str, typer.Option(help="Logging level")
    ] = LOG_LEVEL_DEFAULT,
) -> None:
    """Wait for service replication."""
    configure_logging(log_level)

    try:
        settings = WaitSettings.build(
            interval_seconds=parse_positive_duration(interval, name="interval"),
            timeout_seconds=parse_positive_duration(timeout, name="timeout"),
            quiet=quiet,
            output_format=resolve_output_format(output_format, quiet, config),
            filters=tuple(filters or ()),
            context=context,
        )
        sink = ProgressSink(
            stdout_console,
            output_format=settings.output_format,
            quiet=settings.quiet,
        )
    except ConfigurationError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(EXIT_USAGE) from exc

    controller = SwarmController(context=settings.context)
    try:
        outcome = asyncio.run(wait_for_services(settings, controller, sink))
        check_outcome(outcome)
    except SwarmWaitError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(EXIT_FAILURE) from exc

    if outcome == WaitOutcome.CANCELLED:
        raise typer.Exit(EXIT_CANCELLED)


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "check_outcome", "main", "resolve_output_format", "wait_for_services"]
