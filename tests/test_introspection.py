"""Tests for constructor_source()."""

from __future__ import annotations

import pytest
from markupsafe import Markup

from wallkit import Code, DemoComponentGrid, DemoFormExample, DemoHeader, DemoLayout
from wallkit.introspection import constructor_source


class TestConstructorSource:
    def test_only_non_default_props(self) -> None:
        assert constructor_source(DemoHeader(title="Docs", subtitle="All")) == (
            "DemoHeader(\n    title='Docs',\n    subtitle='All',\n)"
        )

    def test_all_defaults(self) -> None:
        assert constructor_source(DemoComponentGrid()) == "DemoComponentGrid()"

    def test_booleans_and_strings(self) -> None:
        source = constructor_source(Code(content="x", language="php", line_numbers=True))
        assert source == "Code(\n    content='x',\n    language='php',\n    line_numbers=True,\n)"

    def test_injected_collaborators_omitted(self, uppercase_highlighter) -> None:
        code = Code(content="x", language="php", highlight=True, highlighter=uppercase_highlighter)
        assert "highlighter=" not in constructor_source(code)

    def test_markup_props(self) -> None:
        layout = DemoLayout(sidebar=Markup("<nav>"), content=Markup("<main>"))
        assert constructor_source(layout) == (
            "DemoLayout(\n    sidebar=Markup('<nav>'),\n    content=Markup('<main>'),\n)"
        )

    def test_nested_records_and_mappings(self) -> None:
        form = DemoFormExample(
            title="t",
            description="d",
            form_html=Markup("<form></form>"),
            actions=[{"text": "Go"}],
            notes={"tip": "Hi"},
        )
        assert constructor_source(form) == (
            "DemoFormExample(\n"
            "    title='t',\n"
            "    description='d',\n"
            "    form_html=Markup('<form></form>'),\n"
            "    actions=[\n"
            "        FormAction(\n"
            "            text='Go',\n"
            "        ),\n"
            "    ],\n"
            "    notes={\n"
            "        'tip': 'Hi',\n"
            "    },\n"
            ")"
        )

    def test_output_is_valid_python(self) -> None:
        compile(constructor_source(DemoHeader(title="a'b", subtitle='c"d')), "<card>", "eval")

    @pytest.mark.parametrize("value", ["text", 1, DemoHeader])
    def test_rejects_non_instances(self, value: object) -> None:
        with pytest.raises(TypeError, match="expects a component instance"):
            constructor_source(value)
