"""Component introspection: rebuild the Python call that constructs a component.

Demo cards show the code that produced their preview. Rather than keep that
code in sync by hand, ``constructor_source`` reads the component's fields
and prints a constructor call listing only the props that differ from their
defaults:

    >>> print(constructor_source(DemoHeader(title="Docs", subtitle="All of it")))
    DemoHeader(
        title='Docs',
        subtitle='All of it',
    )

Props declared with ``Field(repr=False)`` (injected collaborators such as a
highlighter) are left out.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markupsafe import Markup
from pydantic import BaseModel
from pydantic.fields import FieldInfo

_INDENT = "    "


def constructor_source(obj: Any) -> str:
    """Python source for a constructor call that rebuilds ``obj``.

    Raises:
        TypeError: If obj is not a model instance (components and records are).
    """
    if not isinstance(obj, BaseModel):
        raise TypeError(f"constructor_source() expects a component instance, got {type(obj).__name__}")
    return _format_object(obj, 1, frozenset())


def _is_default(info: FieldInfo, value: Any) -> bool:
    if info.is_required():
        return False
    return bool(value == info.get_default(call_default_factory=True))


def _format_object(obj: Any, depth: int, seen: frozenset[int]) -> str:
    name = type(obj).__name__
    if id(obj) in seen:
        return "..."
    seen = seen | {id(obj)}

    indent = _INDENT * depth
    args: list[str] = []
    for prop, info in type(obj).model_fields.items():
        if not info.repr:
            continue
        value = getattr(obj, prop)
        if _is_default(info, value):
            continue
        args.append(f"{indent}{prop}={_format_value(value, depth, seen)},")

    if not args:
        return f"{name}()"
    return f"{name}(\n" + "\n".join(args) + f"\n{_INDENT * (depth - 1)})"


def _format_value(value: Any, depth: int, seen: frozenset[int]) -> str:
    if isinstance(value, Markup):
        return f"Markup({str(value)!r})"
    if isinstance(value, str):
        return repr(value)
    if value is None or isinstance(value, (bool, int, float)):
        return repr(value)
    if isinstance(value, BaseModel):
        return _format_object(value, depth + 1, seen)

    inner = _INDENT * (depth + 1)
    outer = _INDENT * depth
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        items = [f"{inner}{k!r}: {_format_value(v, depth + 1, seen)}," for k, v in value.items()]
        return "{\n" + "\n".join(items) + f"\n{outer}}}"
    if isinstance(value, (tuple, list)):
        if not value:
            return "[]"
        items = [f"{inner}{_format_value(v, depth + 1, seen)}," for v in value]
        return "[\n" + "\n".join(items) + f"\n{outer}]"
    return repr(value)
