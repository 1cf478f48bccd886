"""Code block component.

Displays a source snippet with optional syntax highlighting, line numbers,
a language label, and a copy-to-clipboard button. The copy behaviour lives
in a browser script keyed on ``data-action="copy-code"``; this module only
emits the hooks.

Example:
    >>> print(Code(content="print('hi')", language="python", line_numbers=True))
    <div class="wallkit-code" data-language="python">
    ...

Highlighting:
    With ``highlight=True`` the language is checked against the highlighter
    at construction, so an unsupported language fails before any markup is
    produced. ``plaintext`` and ``text`` are never checked. If the
    highlighter still fails at render time, the block falls back to escaped
    plain text and logs a warning.

"""

from __future__ import annotations

import logging
from typing import Any

from markupsafe import Markup
from pydantic import Field, InstanceOf, field_validator

from wallkit.component import Component
from wallkit.config import get_config
from wallkit.exceptions import UnsupportedLanguageError
from wallkit.highlight import Highlighter
from wallkit.utils.constants import HIGHLIGHT_CLASS, PLAIN_LANGUAGES
from wallkit.utils.html import attr, class_list, escape

logger = logging.getLogger(__name__)


class Code(Component, tag="code"):
    """A block of source code.

    Attributes:
        content: Source text, stripped of leading/trailing whitespace
        language: Language tag, used for the label and the highlighter
        highlight: Run the content through the highlighter
        line_numbers: Render a numbered gutter, one marker per line
        copy_button: Render the copy-to-clipboard button
        show_language: Render the language label in the header
        highlighter: Highlighter to use; defaults to the configured one
    """

    content: str
    language: str = "plaintext"
    highlight: bool = False
    line_numbers: bool = False
    copy_button: bool = False
    show_language: bool = False
    highlighter: InstanceOf[Highlighter] | None = Field(default=None, repr=False)

    @field_validator("content")
    @classmethod
    def _strip(cls, content: str) -> str:
        return content.strip()

    def model_post_init(self, context: Any, /) -> None:
        if not self.highlight or self.language in PLAIN_LANGUAGES:
            return
        if self.highlighter is None:
            object.__setattr__(self, "highlighter", get_config().resolve_highlighter())
        if not self.highlighter.supports(self.language):
            raise UnsupportedLanguageError(self.language, type(self.highlighter).__name__)

    def lines(self) -> list[str]:
        """Content split into lines (an empty block still has one line)."""
        return self.content.split("\n")

    def highlighted_content(self) -> Markup:
        """Content as safe HTML: highlighted when enabled, escaped otherwise."""
        if not self.highlight or self.language in PLAIN_LANGUAGES or self.highlighter is None:
            return escape(self.content)
        try:
            return self.highlighter.highlight(self.content, self.language)
        except Exception as exc:
            logger.warning(
                "Highlighting %r with %s failed, rendering plain text: %s",
                self.language,
                type(self.highlighter).__name__,
                exc,
            )
            return escape(self.content)

    def code_classes(self) -> str:
        if not self.highlight:
            return ""
        return class_list([HIGHLIGHT_CLASS, f"language-{self.language}"])

    def render(self) -> Markup:
        labels = get_config().labels
        language = escape(self.language)
        buf: list[str] = []
        _append = buf.append

        _append(f'<div class="wallkit-code" data-language="{language}">\n')

        if self.show_language or self.copy_button:
            _append('<div class="wallkit-code__header">\n')
            if self.show_language:
                _append(f'<span class="wallkit-code__language">{language}</span>\n')
            if self.copy_button:
                _append(
                    '<button class="wallkit-code__copy-button" type="button" '
                    f'data-action="copy-code" data-copied-text="{escape(labels.copied)}">'
                    f"{escape(labels.copy)}</button>\n"
                )
            _append("</div>\n")

        _append('<div class="wallkit-code__content">\n')
        if self.line_numbers:
            _append('<div class="wallkit-code__lines">')
            for number in range(1, len(self.lines()) + 1):
                _append(f'<span class="wallkit-code__line-number">{number}</span>')
            _append("</div>\n")

        code_attrs = attr({"class": self.code_classes() or None})
        open_code = f"<code {code_attrs}>" if code_attrs else "<code>"
        _append(f"<pre>{open_code}{self.highlighted_content()}</code></pre>\n")
        _append("</div>\n")
        _append("</div>")

        return Markup("".join(buf))
