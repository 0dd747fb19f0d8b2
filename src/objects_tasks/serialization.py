"""JSON round-trip helpers: dump any value, load a mapping onto a class."""

from __future__ import annotations

import dataclasses
import json
import math
from typing import Any, TypeVar

from objects_tasks.errors import ParseError

__all__ = ["get_json", "from_json"]

T = TypeVar("T")


def _finite(value: Any) -> Any:
    """Replace NaN and infinite floats with None, recursing into containers."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _to_mapping(obj: Any) -> Any:
    """Fallback encoder for dataclass instances and plain objects."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _finite({f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)})
    if hasattr(obj, "__dict__"):
        return _finite(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Serialise *obj* to JSON.

    Output is compact (no spaces after separators) unless *indent* is given,
    so ``get_json([1, 2, 3]) == "[1,2,3]"``. Keys keep insertion order.
    NaN and infinite floats are written as ``null``.
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        _finite(obj),
        indent=indent,
        sort_keys=sort_keys,
        separators=separators,
        default=_to_mapping,
    )


def from_json(proto: type[T] | Any, json_text: str) -> T:
    """Parse *json_text* and copy its keys onto a fresh instance of *proto*.

    The instance is created without calling ``__init__``, so every method of
    *proto* is available while the attribute values come from the document.
    Passing an instance uses its type.
    """
    cls = proto if isinstance(proto, type) else type(proto)
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise ParseError(str(exc), line=exc.lineno, column=exc.colno) from exc
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

    obj = cls.__new__(cls)
    for key, value in data.items():
        # object.__setattr__ also works on frozen dataclasses
        object.__setattr__(obj, key, value)
    return obj
