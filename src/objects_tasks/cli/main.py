"""objects-tasks CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from objects_tasks import __version__
from objects_tasks.config import ObjectsTasksConfig


@click.group()
@click.version_option(version=__version__, prog_name="objects-tasks")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Objects tasks - rectangles, JSON helpers and CSS selector building."""
    config = ObjectsTasksConfig.from_env()
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from objects_tasks.cli.area import area  # noqa: E402
from objects_tasks.cli.selector import build, normalize  # noqa: E402

cli.add_command(build)
cli.add_command(normalize)
cli.add_command(area)
