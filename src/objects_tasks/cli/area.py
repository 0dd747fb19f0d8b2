"""CLI command: objects-tasks area -- rectangle area or JSON form."""

from __future__ import annotations

import click

from objects_tasks.config import ObjectsTasksConfig
from objects_tasks.rectangle import Rectangle
from objects_tasks.serialization import get_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def area(config: ObjectsTasksConfig | None, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    config = config or ObjectsTasksConfig()
    rect = Rectangle(width, height)
    if as_json:
        click.echo(
            get_json(rect, indent=config.json_indent, sort_keys=config.json_sort_keys)
        )
    else:
        click.echo(f"{rect.get_area():g}")
