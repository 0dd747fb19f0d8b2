"""CLI commands: objects-tasks build / normalize -- produce selector strings."""

from __future__ import annotations

import sys

import click

from objects_tasks.errors import ParseError, SelectorError
from objects_tasks.selector import Selector, parse_selector


@click.command()
@click.option("--element", help="Element (tag) name")
@click.option("--id", "id_", help="Id, without the leading #")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attributes", multiple=True, help="Attribute body (repeatable)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", help="Pseudo-element name")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attributes: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a simple selector from its parts and print it.

    Parts are applied in canonical order, so option order does not matter.
    """
    selector = Selector()
    if element:
        selector = selector.element(element)
    if id_:
        selector = selector.id(id_)
    for name in classes:
        selector = selector.class_(name)
    for attr in attributes:
        selector = selector.attr(attr)
    for name in pseudo_classes:
        selector = selector.pseudo_class(name)
    if pseudo_element:
        selector = selector.pseudo_element(pseudo_element)

    if len(attributes) > 1:
        click.echo("Warning: only the first attribute is rendered", err=True)
    click.echo(selector.stringify())


@click.command()
@click.argument("selector")
def normalize(selector: str) -> None:
    """Parse SELECTOR and print it in builder form.

    Exits with code 1 if the selector is malformed or its parts are
    duplicated or out of order.
    """
    try:
        parsed = parse_selector(selector)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Invalid selector: {exc}", err=True)
        sys.exit(1)

    click.echo(parsed.stringify())
