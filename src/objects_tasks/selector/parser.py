"""Lark-based parser that rebuilds selector strings through the builder.

Syntax example:
    a#main.nav[href$=".png"]:hover::after
    ul.menu > li + li
    div   p              (descendant)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Callable, Union

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from objects_tasks.errors import ParseError
from objects_tasks.selector.builder import css_selector_builder
from objects_tasks.selector.model import CombinedSelector, Selector, SelectorPart

__all__ = ["parse_selector"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

AnySelector = Union[Selector, CombinedSelector]

# How each parsed part is applied to a Selector.
_APPLY: dict[SelectorPart, Callable[[Selector, str], Selector]] = {
    SelectorPart.ELEMENT: Selector.element,
    SelectorPart.ID: Selector.id,
    SelectorPart.CLASS: Selector.class_,
    SelectorPart.ATTRIBUTE: Selector.attr,
    SelectorPart.PSEUDO_CLASS: Selector.pseudo_class,
    SelectorPart.PSEUDO_ELEMENT: Selector.pseudo_element,
}


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Selector / CombinedSelector values."""

    # ---- simple parts ----

    def type_sel(self, items: list[Token]) -> tuple[SelectorPart, str]:
        return (SelectorPart.ELEMENT, str(items[0]))

    def id_sel(self, items: list[Token]) -> tuple[SelectorPart, str]:
        return (SelectorPart.ID, str(items[0])[1:])

    def class_sel(self, items: list[Token]) -> tuple[SelectorPart, str]:
        return (SelectorPart.CLASS, str(items[0])[1:])

    def attribute_sel(self, items: list[Token]) -> tuple[SelectorPart, str]:
        return (SelectorPart.ATTRIBUTE, str(items[0])[1:-1])

    def pseudo_class_sel(self, items: list[Token]) -> tuple[SelectorPart, str]:
        return (SelectorPart.PSEUDO_CLASS, str(items[0])[1:])

    def pseudo_element_sel(self, items: list[Token]) -> tuple[SelectorPart, str]:
        return (SelectorPart.PSEUDO_ELEMENT, str(items[0])[2:])

    # ---- structural ----

    def compound(self, items: list[tuple[SelectorPart, str]]) -> Selector:
        selector = Selector()
        for part, value in items:
            selector = _APPLY[part](selector, value)
        return selector

    def combinator(self, items: list[Token]) -> str:
        return str(items[0])

    def descendant(self, items: list[Token]) -> str:
        return " "

    def combination(self, items: list[object]) -> CombinedSelector:
        left, combinator, right = items
        return css_selector_builder.combine(left, combinator, right)  # type: ignore[arg-type]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_selector(source: str) -> AnySelector:
    """Parse a CSS selector string into a Selector or CombinedSelector.

    Raises ParseError on syntax errors, and DuplicateError / OrderError when
    the parts are well-formed but repeated or out of order.
    """
    try:
        tree = _parser().parse(source.strip())
    except UnexpectedInput as e:
        logger.debug("Selector syntax error in %r: %s", source, e)
        raise ParseError(str(e), line=e.line, column=e.column) from e
    try:
        return SelectorTransformer().transform(tree)
    except VisitError as e:
        # Surface builder errors (DuplicateError, OrderError) unwrapped.
        raise e.orig_exc from e
