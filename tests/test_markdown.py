"""Tests for the Markdown component."""

from __future__ import annotations

import pytest

from wallkit import Markdown, configure
from wallkit.content.markdown import code_block
from wallkit.exceptions import ComponentTypeError, ComponentValueError

from .conftest import assert_contains, assert_html_equal, assert_in_order


class TestConversion:
    def test_render_wraps_document(self) -> None:
        assert_html_equal(
            str(Markdown(content="# Title\n\nSome **bold** text.")),
            """
            <div class="wallkit-markdown">
            <h1>Title</h1>
            <p>Some <strong>bold</strong> text.</p>
            </div>
            """,
        )

    def test_empty_content(self) -> None:
        assert Markdown(content="").to_html() == ""

    def test_content_must_be_str(self) -> None:
        with pytest.raises(ComponentTypeError, match=r"Markdown\.content expects str"):
            Markdown(content=1)  # type: ignore[arg-type]

    def test_to_inline_html_drops_single_paragraph(self) -> None:
        assert Markdown(content="Some *em*").to_inline_html() == "Some <em>em</em>"

    def test_to_inline_html_keeps_several_paragraphs(self) -> None:
        inline = Markdown(content="one\n\ntwo").to_inline_html()
        assert inline == "<p>one</p>\n<p>two</p>"

    def test_breaks(self) -> None:
        assert "<br />" not in Markdown(content="a\nb").to_html()
        assert "<br />" in Markdown(content="a\nb", breaks=True).to_html()


class TestSafeMode:
    def test_raw_block_html_escaped(self) -> None:
        html = Markdown(content="<script>alert(1)</script>").to_html()
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_raw_inline_html_escaped(self) -> None:
        html = Markdown(content="Hi <b onclick=\"x()\">there</b>").to_html()
        assert "<b" not in html
        assert "&lt;b" in html

    def test_unsafe_mode_passes_html_through(self) -> None:
        html = Markdown(content="<div class=\"box\">raw</div>", safe_mode=False).to_html()
        assert '<div class="box">raw</div>' in html

    def test_safe_mode_with_extensions(self) -> None:
        html = Markdown(content="<div markdown=\"1\">*x*</div>", extensions=["md_in_html"]).to_html()
        assert "<div" not in html


class TestExtensions:
    def test_tables(self) -> None:
        source = "| a | b |\n|---|---|\n| 1 | 2 |"
        assert "<table>" not in Markdown(content=source).to_html()
        assert_contains(Markdown(content=source, extensions=["tables"]).to_html(), "<table>", "<td>1</td>")

    def test_unknown_extension_rejected(self) -> None:
        with pytest.raises(ComponentValueError, match="Unknown Markdown extensions: nope"):
            Markdown(content="x", extensions=["tables", "nope"])

    def test_extensions_must_be_a_sequence(self) -> None:
        with pytest.raises(ComponentTypeError, match=r"Markdown\.extensions"):
            Markdown(content="x", extensions="tables")


class TestFencedCode:
    def test_fence_renders_code_component(self) -> None:
        html = Markdown(content="Intro\n\n```python\nx = 1\n```\n\nAfter").to_html()
        assert_contains(
            html,
            '<div class="wallkit-code" data-language="python">',
            '<span class="wallkit-code__language">python</span>',
            'data-action="copy-code"',
            '<code class="highlight language-python">',
        )
        assert "<p><div" not in html
        assert_in_order(html, "<p>Intro</p>", "wallkit-code", "<p>After</p>")

    def test_fence_without_language_is_plain_text(self) -> None:
        html = Markdown(content="```\n<b>\n```").to_html()
        assert_contains(html, 'data-language="text"', "&lt;b&gt;")
        assert "wallkit-code__language" not in html

    def test_tilde_fence(self) -> None:
        assert 'data-language="ruby"' in Markdown(content="~~~ruby\nputs 1\n~~~").to_html()

    def test_unknown_language_is_not_an_error(self) -> None:
        html = Markdown(content="```klingon-lang\nqapla\n```").to_html()
        assert_contains(html, 'data-language="klingon-lang"', "<pre><code>qapla</code></pre>")

    def test_fence_content_is_not_markdown(self) -> None:
        html = Markdown(content="```\n**not bold**\n```").to_html()
        assert "<strong>" not in html
        assert "**not bold**" in html

    def test_configured_highlighter(self, uppercase_highlighter) -> None:
        with configure(highlighter=uppercase_highlighter):
            html = Markdown(content="```python\nabc\n```").to_html()
        assert '<span class="hl">ABC</span>' in html


class TestCodeBlock:
    def test_defaults(self) -> None:
        code = code_block("x = 1", "python")
        assert (code.language, code.highlight, code.copy_button, code.show_language) == ("python", True, True, True)
        assert not code.line_numbers

    def test_long_blocks_get_line_numbers(self) -> None:
        assert code_block("x = 1\n" * 60, "python").line_numbers

    def test_missing_language(self) -> None:
        code = code_block("x")
        assert (code.language, code.highlight, code.show_language) == ("text", False, False)
