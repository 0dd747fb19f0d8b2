"""Objects tasks -- rectangle value, JSON round-trip and CSS selector builder."""

from objects_tasks.errors import (
    DuplicateError,
    ObjectsTasksError,
    OrderError,
    ParseError,
    SelectorError,
)
from objects_tasks.rectangle import Rectangle
from objects_tasks.selector import (
    CombinedSelector,
    CssSelectorBuilder,
    Selector,
    css_selector_builder,
    parse_selector,
)
from objects_tasks.serialization import from_json, get_json

__version__ = "0.1.0"

__all__ = [
    # rectangle
    "Rectangle",
    # serialization
    "get_json",
    "from_json",
    # selector
    "CssSelectorBuilder",
    "css_selector_builder",
    "Selector",
    "CombinedSelector",
    "parse_selector",
    # errors
    "ObjectsTasksError",
    "ParseError",
    "SelectorError",
    "DuplicateError",
    "OrderError",
]
