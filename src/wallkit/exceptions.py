"""Exceptions for WallKit components.

Exception Hierarchy:
WallKitError (base)
├── ComponentTypeError          # Prop has the wrong type or shape
├── ComponentValueError         # Prop has the right type but a bad value
│   └── UnsupportedLanguageError  # Highlighter cannot handle the language
└── UnknownComponentError       # Registry lookup for an unregistered tag

Every error is raised while a component is being built, never while it
renders. A failed construction yields no component and no partial HTML.

Example:
    ```
    ComponentTypeError: DemoHeader.title expects str, got int (42)
    ```

"""

from __future__ import annotations

from enum import Enum
from typing import Any

_WALLKIT_DOCS_BASE = "https://wallkit.dev/docs/errors"


class ErrorCode(Enum):
    """Searchable error codes for WallKit errors.

    Format: WK-{CATEGORY}-{NUMBER}
    Categories: CMP (component construction), REG (component registry)

    Each code maps to a documentation anchor:
        https://wallkit.dev/docs/errors/#wk-cmp-001
    """

    # Component construction errors (WK-CMP-xxx)
    INVALID_TYPE = "WK-CMP-001"
    INVALID_VALUE = "WK-CMP-002"
    UNSUPPORTED_LANGUAGE = "WK-CMP-003"

    # Registry errors (WK-REG-xxx)
    UNKNOWN_COMPONENT = "WK-REG-001"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error code."""
        anchor = self.value.lower()
        return f"{_WALLKIT_DOCS_BASE}/#{anchor}"

    @property
    def category(self) -> str:
        """Error category (``component`` or ``registry``)."""
        prefix = self.value.split("-")[1]
        return {
            "CMP": "component",
            "REG": "registry",
        }.get(prefix, "unknown")


class WallKitError(Exception):
    """Base exception for all WallKit errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def format_compact(self) -> str:
        """Format the error as a short diagnostic with its docs link.

        Format::

            WK-CMP-001: DemoHeader.title expects str, got int (42)
              Docs: https://wallkit.dev/docs/errors/#wk-cmp-001
        """
        header = str(self)
        parts: list[str] = []
        if self.code:
            code_str = self.code.value
            if code_str not in header:
                header = f"{code_str}: {header}"
        parts.append(header)
        if self.code:
            parts.append(f"  Docs: {self.code.docs_url}")
        return "\n".join(parts)


class ComponentTypeError(WallKitError, TypeError):
    """A component prop does not match its declared type or shape.

    Translated from pydantic's strict-mode validation errors. Values are
    never coerced: ``DemoStats(total_components="3", ...)`` fails instead of
    becoming ``3``.

    Attributes:
        component: Component class name
        field: Prop name (dotted for nested records, e.g. ``actions[0].text``)
        expected: Human-readable expected type
        value: The offending value
        reason: Replaces the "expects ..., got ..." wording, e.g. "is required"
    """

    code: ErrorCode | None = ErrorCode.INVALID_TYPE

    def __init__(
        self,
        component: str,
        field: str,
        expected: str,
        value: Any,
        *,
        reason: str | None = None,
    ) -> None:
        self.component = component
        self.field = field
        self.expected = expected
        self.value = value
        self.reason = reason
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.reason:
            return f"{self.component}.{self.field} {self.reason}"
        actual = type(self.value).__name__
        shown = repr(self.value)
        if len(shown) > 60:
            shown = shown[:57] + "..."
        return f"{self.component}.{self.field} expects {self.expected}, got {actual} ({shown})"


class ComponentValueError(WallKitError, ValueError):
    """A component prop has an acceptable type but an unusable value."""

    code: ErrorCode | None = ErrorCode.INVALID_VALUE


class UnsupportedLanguageError(ComponentValueError):
    """The syntax highlighter has no lexer for the requested language.

    Example:
        >>> Code(content="x", language="klingon", highlight=True)
        UnsupportedLanguageError: Language 'klingon' is not supported by PygmentsHighlighter
    """

    code: ErrorCode | None = ErrorCode.UNSUPPORTED_LANGUAGE

    def __init__(self, language: str, highlighter: str) -> None:
        self.language = language
        self.highlighter = highlighter
        super().__init__(f"Language {language!r} is not supported by {highlighter}")


class UnknownComponentError(WallKitError, KeyError):
    """No component is registered under the requested tag."""

    code: ErrorCode | None = ErrorCode.UNKNOWN_COMPONENT

    def __init__(self, tag: str, available: frozenset[str] = frozenset()) -> None:
        self.tag = tag
        self.available = available
        super().__init__(tag)

    def __str__(self) -> str:
        msg = f"Unknown component {self.tag!r}"
        if self.available:
            from difflib import get_close_matches

            suggestions = get_close_matches(self.tag, sorted(self.available), n=1, cutoff=0.6)
            if suggestions:
                msg += f". Did you mean {suggestions[0]!r}?"
        return msg
