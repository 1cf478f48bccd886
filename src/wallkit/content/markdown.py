"""Markdown component.

Converts Markdown to HTML with Python-Markdown, the way Code delegates to
Pygments. Fenced code blocks do not go through Python-Markdown's own
``fenced_code`` extension: each block is rendered by the Code component,
so it gets the same header, copy button and highlighting as a standalone
block.

Example:
    >>> print(Markdown(content="# Title\\n\\nSome **bold** text."))
    <div class="wallkit-markdown">
    <h1>Title</h1>
    <p>Some <strong>bold</strong> text.</p>
    </div>

Safe mode:
    On by default. Raw HTML in the source is not passed through: tags are
    escaped and show up as text. Turn it off only for trusted content.

"""

from __future__ import annotations

import re
from typing import Any

import markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markupsafe import Markup
from pydantic import field_validator

from wallkit.component import Component, TextList
from wallkit.config import get_config
from wallkit.content.code import Code
from wallkit.exceptions import ComponentValueError
from wallkit.utils.constants import LONG_CODE_BLOCK, MARKDOWN_EXTENSIONS, PLAIN_LANGUAGES

_FENCE_RE = re.compile(
    r"^(?P<fence>`{3,}|~{3,})[ ]*(?P<lang>[\w#+.-]*)[ ]*\n"
    r"(?P<code>.*?)(?<=\n)(?P=fence)[ ]*$",
    re.MULTILINE | re.DOTALL,
)


def code_block(source: str, language: str = "") -> Code:
    """The Code component for one fenced block.

    Highlighting is only requested for languages the configured highlighter
    supports, so an unknown fence label renders as plain text instead of
    failing.
    """
    language = language or "text"
    highlight = language not in PLAIN_LANGUAGES and get_config().resolve_highlighter().supports(language)
    return Code(
        content=source,
        language=language,
        highlight=highlight,
        line_numbers=len(source) > LONG_CODE_BLOCK,
        copy_button=True,
        show_language=language != "text",
    )


class CodeBlockPreprocessor(Preprocessor):
    """Replace fenced code blocks with stashed Code component HTML."""

    def run(self, lines: list[str]) -> list[str]:
        text = "\n".join(lines)
        while match := _FENCE_RE.search(text):
            block = code_block(match.group("code"), match.group("lang"))
            placeholder = self.md.htmlStash.store(str(block))
            text = f"{text[: match.start()]}\n{placeholder}\n{text[match.end() :]}"
        return text.split("\n")


class CodeBlockExtension(Extension):
    """Render fenced code blocks with the Code component."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # after whitespace normalization (30), before raw HTML blocks (20)
        md.preprocessors.register(CodeBlockPreprocessor(md), "wallkit_code_block", 25)


class EscapeRawHtmlExtension(Extension):
    """Drop Python-Markdown's raw HTML handling so tags are escaped as text."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        md.preprocessors.deregister("html_block", strict=False)
        md.inlinePatterns.deregister("html", strict=False)


class Markdown(Component, tag="markdown"):
    """Rendered Markdown.

    Attributes:
        content: Markdown source
        safe_mode: Escape raw HTML found in the source
        breaks: Turn single newlines into ``<br />``
        extensions: Extra Python-Markdown extensions by name (``tables``,
            ``footnotes``, ...); see ``MARKDOWN_EXTENSIONS``
    """

    content: str
    safe_mode: bool = True
    breaks: bool = False
    extensions: TextList = ()

    @field_validator("extensions")
    @classmethod
    def _known_extensions(cls, extensions: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [name for name in extensions if name not in MARKDOWN_EXTENSIONS]
        if unknown:
            raise ComponentValueError(f"Unknown Markdown extensions: {', '.join(unknown)}")
        return extensions

    def _extensions(self) -> list[Any]:
        extensions: list[Any] = [*self.extensions, CodeBlockExtension()]
        if self.breaks:
            extensions.append("nl2br")
        if self.safe_mode:
            # last, so it also removes handlers other extensions re-register
            extensions.append(EscapeRawHtmlExtension())
        return extensions

    def to_html(self) -> Markup:
        """The converted document, without the component wrapper."""
        return Markup(markdown.markdown(self.content, extensions=self._extensions()))

    def to_inline_html(self) -> Markup:
        """Like ``to_html()``, minus the ``<p>`` around a single paragraph."""
        html = self.to_html()
        if html.startswith("<p>") and html.endswith("</p>") and html.count("<p>") == 1:
            return Markup(html[3:-4])
        return html

    def render(self) -> Markup:
        return Markup(f'<div class="wallkit-markdown">\n{self.to_html()}\n</div>')
