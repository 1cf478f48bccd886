"""Component model: immutable, validated view objects that render HTML.

Components are frozen pydantic models. Subclass ``Component`` (or
``Record`` for nested data that does not render), declare props as
annotated fields, and implement ``render()``:

1. **Validate**: pydantic checks every prop in strict mode, so ``"3"`` is
   not an ``int`` and ``True`` is not a ``1``
2. **Prepare**: ``model_post_init`` normalizes values and runs extra checks
   (e.g. Code resolves its highlighter)
3. **Render**: ``str(c)`` and ``c.__html__()`` both go through ``c.render()``

Any ``ValidationError`` is translated here, once, into the WallKit error
tree: shape problems become ``ComponentTypeError`` with a dotted field path
(``actions[0].text``), value problems become ``ComponentValueError``.

Example:
    >>> class Badge(Component):
    ...     text: str
    ...     def render(self) -> Markup:
    ...         return Markup('<span class="badge">{}</span>').format(self.text)
    >>> str(Badge(text="<new>"))
    '<span class="badge">&lt;new&gt;</span>'

Trusted HTML:
    Raw-HTML props are typed ``TrustedHTML``. They accept ``Markup`` or
    anything with ``__html__`` (including other components) and reject
    plain ``str``. Only values that are already trusted skip escaping.

Thread-Safety:
    Components are frozen after ``__init__``. Rendering allocates only
    local buffers, so one instance may be rendered from many threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Annotated, Any, Protocol, TypeVar, runtime_checkable

from markupsafe import Markup
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, ValidationError
from pydantic_core import PydanticCustomError

from wallkit.exceptions import ComponentTypeError, ComponentValueError, WallKitError
from wallkit.utils.html import is_html, to_markup

__all__ = [
    "AttributeMap",
    "Component",
    "Fragments",
    "HTMLSources",
    "NonBlankStr",
    "ReadOnlyMap",
    "Record",
    "RecordList",
    "Renderable",
    "TextList",
    "TrustedHTML",
    "empty_map",
    "is_component",
    "render",
    "translate_validation_error",
]

_K = TypeVar("_K")
_V = TypeVar("_V")
_R = TypeVar("_R")

# pydantic error type -> expected type named in ComponentTypeError
_EXPECTED = {
    "string_type": "str",
    "int_type": "int",
    "bool_type": "bool",
    "float_type": "float",
    "tuple_type": "sequence",
    "dict_type": "mapping",
    "trusted_html": "Markup or __html__ object",
}

# pydantic error types that describe a bad value rather than a bad shape
_VALUE_ERRORS = frozenset(
    {
        "literal_error",
        "greater_than",
        "greater_than_equal",
        "less_than",
        "less_than_equal",
        "string_too_short",
        "string_too_long",
        "value_error",
        "blank",
    }
)


@runtime_checkable
class Renderable(Protocol):
    """Anything WallKit can render: a ``render()`` method plus ``__html__``."""

    def render(self) -> Markup: ...

    def __html__(self) -> str: ...


# =============================================================================
# Prop types
# =============================================================================


def _trusted_html(value: Any) -> Any:
    if not is_html(value):
        raise PydanticCustomError("trusted_html", "Input should be Markup or an object with __html__")
    return to_markup(value)


def _html_source(value: Any) -> Any:
    if not is_html(value):
        raise PydanticCustomError("trusted_html", "Input should be Markup or an object with __html__")
    return value


def _sequence(value: Any) -> Any:
    # strings and mappings are left for the tuple schema to reject
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        return value
    return tuple(value)


def _fragments(value: Any) -> Any:
    if is_html(value):
        return (value,)
    return _sequence(value)


def _record_items(value: Any) -> Any:
    value = _sequence(value)
    if not isinstance(value, tuple):
        return value
    return tuple(dict(item) if isinstance(item, Mapping) else item for item in value)


def _not_blank(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError("blank", "Input should not be blank")
    return value


def _as_dict(value: Any) -> Any:
    return dict(value) if isinstance(value, Mapping) else value


def _freeze_map(value: dict[Any, Any]) -> Mapping[Any, Any]:
    return MappingProxyType(value)


def empty_map() -> Mapping[Any, Any]:
    """Default factory for ``ReadOnlyMap`` props."""
    return MappingProxyType({})


TrustedHTML = Annotated[Markup, BeforeValidator(_trusted_html)]
"""Trusted HTML: ``Markup`` or any ``__html__`` object, stored as ``Markup``."""

Fragments = Annotated[tuple[TrustedHTML, ...], BeforeValidator(_fragments)]
"""One or more trusted fragments, stored as a tuple of ``Markup``."""

HTMLSources = Annotated[
    tuple[Annotated[Any, AfterValidator(_html_source)], ...],
    BeforeValidator(_fragments),
]
"""One or more trusted-HTML objects, kept as given so nested components
stay available for introspection."""

TextList = Annotated[tuple[str, ...], BeforeValidator(_sequence)]
"""A sequence of strings, stored as a tuple."""

RecordList = Annotated[tuple[_R, ...], BeforeValidator(_record_items)]
"""Nested records; items may be instances or mappings of their fields."""

ReadOnlyMap = Annotated[Mapping[_K, _V], BeforeValidator(_as_dict), AfterValidator(_freeze_map)]
"""A mapping copied into a read-only, insertion-ordered view."""

AttributeMap = ReadOnlyMap[str, str | int | bool | None]
"""Extra HTML attributes, serialized with ``attr()``."""

NonBlankStr = Annotated[str, AfterValidator(_not_blank)]
"""A string with at least one non-whitespace character."""


# =============================================================================
# Error translation
# =============================================================================


def _field_path(loc: tuple[int | str, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = part
    return path


def translate_validation_error(owner: str, exc: ValidationError) -> WallKitError:
    """Convert the first error pydantic reports into a WallKit error.

    Errors raised by our own checks (``model_post_init``, field validators)
    come back unchanged.
    """
    errors = exc.errors(include_url=False)
    for error in errors:
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, WallKitError):
            return cause

    error = errors[0]
    kind = error["type"]
    path = _field_path(error["loc"])
    ctx = error.get("ctx", {})
    if kind == "missing":
        return ComponentTypeError(owner, path, "a value", None, reason="is required")
    if kind == "extra_forbidden":
        return ComponentTypeError(owner, path, "", error["input"], reason="is not a known prop")
    if kind in _VALUE_ERRORS:
        return ComponentValueError(f"{owner}.{path}: {error['msg']}, got {error['input']!r}")
    expected = _EXPECTED.get(kind) or ctx.get("class_name") or ctx.get("class") or error["msg"]
    return ComponentTypeError(owner, path, expected, error["input"])


# =============================================================================
# Base models
# =============================================================================


class Record(BaseModel):
    """Frozen, strictly validated value object for nested component data.

    Records validate like components but do not render. Unknown props are
    rejected and nothing is coerced.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise translate_validation_error(type(self).__name__, exc) from exc


class Component(Record):
    """Base class for renderable components.

    Args (class keywords):
        tag: Register the component in the default registry under this tag

    A component without ``render()`` renders the empty string.

    Example:
        >>> class Note(Component, tag="note"):
        ...     text: str
    """

    def __init_subclass__(cls, *, tag: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if tag is not None:
            from wallkit.registry import default_registry

            default_registry.register(tag, cls)

    def render(self) -> Markup:
        return Markup("")

    def __str__(self) -> str:
        return str(self.render())

    def __html__(self) -> Markup:
        return self.render()


def is_component(obj: object) -> bool:
    """True for component instances and other Renderables."""
    return isinstance(obj, Renderable) and not isinstance(obj, type)


def render(obj: Renderable) -> Markup:
    """Render any component to ``Markup``.

    Raises:
        TypeError: If obj does not implement the Renderable protocol.
    """
    if not is_component(obj):
        raise TypeError(f"{type(obj).__name__} is not a renderable component")
    return obj.render()
