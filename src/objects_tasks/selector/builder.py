"""Stateless CSS selector builder."""

from __future__ import annotations

import logging

from objects_tasks.selector.model import CombinedSelector, Selector, Stringifiable

__all__ = ["CssSelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


class CssSelectorBuilder:
    """Entry point for building selectors.

    Holds no state: each method starts a fresh Selector, so the same
    instance can be shared freely.

    Example::

        css_selector_builder.id("main").class_("container").stringify()
        # '#main.container'
    """

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> CombinedSelector:
        """Join two selectors with *combinator* (not validated)."""
        combined = CombinedSelector.join(left, combinator, right)
        logger.debug("Combined selector: %r", combined.combined)
        return combined


css_selector_builder = CssSelectorBuilder()
