"""Selector model: immutable simple and combined CSS selector values."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Protocol

from objects_tasks.errors import DuplicateError, OrderError

logger = logging.getLogger(__name__)


class SelectorPart(Enum):
    """Parts of a simple selector, declared in their required order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this part in the element -> pseudo-element ordering."""
        return _PART_ORDER.index(self)

    @property
    def repeatable(self) -> bool:
        """False for parts that may occur at most once per selector."""
        return self not in (
            SelectorPart.ELEMENT,
            SelectorPart.ID,
            SelectorPart.PSEUDO_ELEMENT,
        )


_PART_ORDER = list(SelectorPart)


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


@dataclass(frozen=True)
class Selector:
    """A simple selector: element, id, classes, attributes and pseudo parts.

    Every builder method returns a new Selector; the receiver is never
    modified. Parts must be added in the order given by SelectorPart.
    """

    element_value: str | None = None
    id_value: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element_value: str | None = None

    # --- inspection -----------------------------------------------------------

    def has(self, part: SelectorPart) -> bool:
        """Return True if *part* has been set on this selector."""
        return bool(
            {
                SelectorPart.ELEMENT: self.element_value,
                SelectorPart.ID: self.id_value,
                SelectorPart.CLASS: self.classes,
                SelectorPart.ATTRIBUTE: self.attributes,
                SelectorPart.PSEUDO_CLASS: self.pseudo_classes,
                SelectorPart.PSEUDO_ELEMENT: self.pseudo_element_value,
            }[part]
        )

    def populated_parts(self) -> list[SelectorPart]:
        """Return the parts that are set, in canonical order."""
        return [part for part in SelectorPart if self.has(part)]

    def _check(self, part: SelectorPart) -> None:
        """Reject *part* if it is a duplicate or arrives after a later part."""
        if not part.repeatable and self.has(part):
            logger.debug("Rejected duplicate %s on %r", part.value, self.stringify())
            raise DuplicateError(part)
        later = [p for p in self.populated_parts() if p.rank > part.rank]
        if later:
            logger.debug(
                "Rejected %s after %s on %r", part.value, later[0].value, self.stringify()
            )
            raise OrderError(part)

    # --- builder methods ------------------------------------------------------

    def element(self, value: str) -> Selector:
        self._check(SelectorPart.ELEMENT)
        return replace(self, element_value=value)

    def id(self, value: str) -> Selector:
        self._check(SelectorPart.ID)
        return replace(self, id_value=value)

    def class_(self, value: str) -> Selector:
        self._check(SelectorPart.CLASS)
        return replace(self, classes=self.classes + (value,))

    def attr(self, value: str) -> Selector:
        self._check(SelectorPart.ATTRIBUTE)
        return replace(self, attributes=self.attributes + (value,))

    def pseudo_class(self, value: str) -> Selector:
        self._check(SelectorPart.PSEUDO_CLASS)
        return replace(self, pseudo_classes=self.pseudo_classes + (value,))

    def pseudo_element(self, value: str) -> Selector:
        self._check(SelectorPart.PSEUDO_ELEMENT)
        return replace(self, pseudo_element_value=value)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector as CSS text.

        Only the first attribute is rendered even when several were added;
        later attributes are kept on the value but never emitted.
        """
        out = []
        if self.element_value:
            out.append(self.element_value)
        if self.id_value:
            out.append(f"#{self.id_value}")
        out.extend(f".{name}" for name in self.classes)
        if self.attributes:
            out.append(f"[{self.attributes[0]}]")
        out.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element_value:
            out.append(f"::{self.pseudo_element_value}")
        return "".join(out)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator, rendered once at creation."""

    left: Stringifiable
    combinator: str
    right: Stringifiable
    combined: str

    @classmethod
    def join(
        cls, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> CombinedSelector:
        """Render *left* and *right* around ``" <combinator> "``."""
        combined = f"{left.stringify()} {combinator} {right.stringify()}"
        return cls(left=left, combinator=combinator, right=right, combined=combined)

    def stringify(self) -> str:
        return self.combined

    def __str__(self) -> str:
        return self.combined
