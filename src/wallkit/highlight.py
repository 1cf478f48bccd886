"""Syntax highlighting collaborator for the Code component.

The Code component never tokenizes source itself. It asks a ``Highlighter``
whether a language is supported (at construction) and for highlighted,
already-escaped HTML (at render). ``PygmentsHighlighter`` is the default;
any object satisfying the protocol can be injected instead.

Example:
    >>> from wallkit.highlight import PygmentsHighlighter
    >>> hl = PygmentsHighlighter()
    >>> hl.supports("python")
    True
    >>> hl.highlight("x = 1", "python")
    Markup('<span class="n">x</span> ...')

"""

from __future__ import annotations

from functools import lru_cache
from typing import Protocol, runtime_checkable

from markupsafe import Markup
from pygments import highlight as _pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from wallkit.utils.constants import HIGHLIGHT_CLASS


@runtime_checkable
class Highlighter(Protocol):
    """Turns raw source text into HTML-safe highlighted markup."""

    def supports(self, language: str) -> bool: ...

    def highlight(self, source: str, language: str) -> Markup: ...


@lru_cache(maxsize=128)
def _lexer_for(language: str) -> Lexer:
    # ensurenl=False keeps the output line count equal to the input's
    return get_lexer_by_name(language, ensurenl=False, stripnl=False)


class PygmentsHighlighter:
    """Highlighter backed by Pygments.

    Emits bare ``<span>`` tokens (``nowrap=True``) so the Code template
    controls the surrounding ``<pre><code>`` markup. The template puts
    ``HIGHLIGHT_CLASS`` on ``<code>``, which is the selector
    ``style_defs()`` scopes its rules to.

    Args:
        class_prefix: Prefix for token CSS classes (``"tok-"`` gives
            ``tok-k``, ``tok-s``, ...). Empty by default.
    """

    __slots__ = ("_formatter", "class_prefix")

    def __init__(self, class_prefix: str = "") -> None:
        self.class_prefix = class_prefix
        self._formatter = HtmlFormatter(nowrap=True, classprefix=class_prefix, cssclass=HIGHLIGHT_CLASS)

    def supports(self, language: str) -> bool:
        try:
            _lexer_for(language)
        except ClassNotFound:
            return False
        return True

    def highlight(self, source: str, language: str) -> Markup:
        """Highlight source; raises ``ClassNotFound`` for unknown languages."""
        return Markup(_pygments_highlight(source, _lexer_for(language), self._formatter))

    def style_defs(self, style: str = "default") -> str:
        """CSS for the token classes this highlighter emits, scoped to ``.highlight``."""
        formatter = HtmlFormatter(style=style, classprefix=self.class_prefix, cssclass=HIGHLIGHT_CLASS)
        return formatter.get_style_defs(f".{HIGHLIGHT_CLASS}")

    def __repr__(self) -> str:
        return f"PygmentsHighlighter(class_prefix={self.class_prefix!r})"
