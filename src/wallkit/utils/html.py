"""HTML helpers shared by every WallKit component.

Escaping and the trusted-HTML type come from MarkupSafe. ``Markup`` marks a
string as already-safe HTML; anything else is treated as untrusted text and
escaped on output. Objects exposing ``__html__`` (including every WallKit
component) are accepted wherever ``Markup`` is.

Thread-Safety:
All functions are pure and safe for concurrent use.

"""

from __future__ import annotations

import re
import warnings
from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from markupsafe import Markup
from markupsafe import escape as _escape

from wallkit.utils.constants import EVENT_HANDLER_ATTRS

__all__ = [
    "HasHTML",
    "Markup",
    "attr",
    "class_list",
    "escape",
    "is_html",
    "join_html",
    "merge_attributes",
    "to_markup",
]

# Attribute names per the HTML syntax: no whitespace, quotes, `>`, `/`, `=`,
# or control characters.
_ATTR_NAME_RE = re.compile(r"^[^\s\"'<>/=\x00-\x1f\x7f]+$")


@runtime_checkable
class HasHTML(Protocol):
    """Anything that can render itself as trusted HTML."""

    def __html__(self) -> str: ...


def escape(text: Any) -> Markup:
    """Escape text for element content or a quoted attribute value.

    Encodes ``&``, ``<``, ``>``, ``"`` and ``'``. The value is converted
    to a plain ``str`` first, so even a ``Markup`` instance is escaped:
    text positions never trust their input.

    Example:
        >>> escape('<a href="x">')
        Markup('&lt;a href=&#34;x&#34;&gt;')
    """
    return _escape(str(text))


def class_list(classes: Iterable[str | None]) -> str:
    """Join CSS class tokens with single spaces.

    Empty and falsy entries are skipped; order is preserved.

    Example:
        >>> class_list(["a", "", None, "b"])
        'a b'
    """
    return " ".join(c for c in classes if c)


def attr(attributes: Mapping[str, Any]) -> Markup:
    """Serialize a mapping into an HTML attribute string.

    - ``True`` emits a bare boolean attribute (``disabled``)
    - ``False`` and ``None`` omit the attribute
    - any other value is stringified and escaped

    Raises:
        ComponentValueError: If an attribute name is not valid HTML.

    Example:
        >>> attr({"class": "btn", "disabled": True, "title": None})
        Markup('class="btn" disabled')
    """
    from wallkit.exceptions import ComponentValueError

    parts: list[str] = []
    for name, value in attributes.items():
        if not isinstance(name, str) or not _ATTR_NAME_RE.match(name):
            raise ComponentValueError(f"Invalid HTML attribute name: {name!r}")
        if name.lower() in EVENT_HANDLER_ATTRS:
            warnings.warn(
                f"Attribute {name!r} is an event handler; its value will run as JavaScript.",
                UserWarning,
                stacklevel=2,
            )
        if value is None or value is False:
            continue
        if value is True:
            parts.append(name)
        else:
            parts.append(f'{name}="{escape(value)}"')
    return Markup(" ".join(parts))


def merge_attributes(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """Merge attribute mappings left to right, dropping ``None`` values.

    A later layer overrides an earlier one but keeps the key's first
    position, so component defaults stay in a stable order.

    Example:
        >>> merge_attributes({"id": None, "class": "a"}, {"class": "b", "title": "t"})
        {'class': 'b', 'title': 't'}
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return {name: value for name, value in merged.items() if value is not None}


def is_html(value: object) -> bool:
    """True for ``Markup`` and other ``__html__`` objects.

    False for plain ``str`` and for classes: a component class has an
    ``__html__`` attribute but cannot render without an instance.
    """
    return isinstance(value, HasHTML) and not isinstance(value, type)


def to_markup(value: HasHTML) -> Markup:
    """Convert a trusted-HTML object to ``Markup``.

    Raises:
        TypeError: If value has no ``__html__`` (plain strings included).
    """
    if isinstance(value, Markup):
        return value
    if not is_html(value):
        raise TypeError(f"expected Markup or an object with __html__, got {type(value).__name__}")
    return Markup(value.__html__())


def join_html(fragments: Iterable[HasHTML], separator: str = "") -> Markup:
    """Concatenate trusted HTML fragments into one ``Markup``."""
    return Markup(separator).join(to_markup(f) for f in fragments)
