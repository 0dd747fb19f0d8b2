"""Error hierarchy for objects_tasks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objects_tasks.selector.model import SelectorPart


class ObjectsTasksError(Exception):
    """Base error for all objects_tasks errors."""


class ParseError(ObjectsTasksError, ValueError):
    """Raised when JSON or selector source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


# ---------------------------------------------------------------------------
# Selector construction errors
# ---------------------------------------------------------------------------


class SelectorError(ObjectsTasksError):
    """A selector part could not be added."""

    def __init__(self, message: str, *, part: SelectorPart | None = None) -> None:
        super().__init__(message)
        self.part = part


class DuplicateError(SelectorError):
    """Element, id or pseudo-element was set a second time."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )

    def __init__(self, part: SelectorPart | None = None) -> None:
        super().__init__(self.MESSAGE, part=part)


class OrderError(SelectorError):
    """A part was added after a part that must come later."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, part: SelectorPart | None = None) -> None:
        super().__init__(self.MESSAGE, part=part)
