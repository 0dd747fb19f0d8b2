from objects_tasks.selector.builder import CssSelectorBuilder, css_selector_builder
from objects_tasks.selector.model import CombinedSelector, Selector, SelectorPart
from objects_tasks.selector.parser import parse_selector

__all__ = [
    "CssSelectorBuilder",
    "css_selector_builder",
    "Selector",
    "CombinedSelector",
    "SelectorPart",
    "parse_selector",
]
