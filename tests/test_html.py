"""Tests for the shared HTML helpers (escape, class_list, attr)."""

from __future__ import annotations

import warnings

import pytest
from markupsafe import Markup

from wallkit import DemoHeader
from wallkit.exceptions import ComponentValueError
from wallkit.utils.html import attr, class_list, escape, is_html, join_html, merge_attributes, to_markup


class TestEscape:
    """escape() encodes every HTML-significant character."""

    def test_escapes_all_special_characters(self) -> None:
        assert escape("<b>\"Tom\" & 'Jerry'</b>") == (
            "&lt;b&gt;&#34;Tom&#34; &amp; &#39;Jerry&#39;&lt;/b&gt;"
        )

    def test_returns_markup(self) -> None:
        assert isinstance(escape("x"), Markup)

    def test_plain_text_unchanged(self) -> None:
        assert escape("Привет, мир") == "Привет, мир"

    def test_markup_input_is_escaped_again(self) -> None:
        """Text positions never trust their input, even when it is Markup."""
        assert escape(Markup("<b>x</b>")) == "&lt;b&gt;x&lt;/b&gt;"

    def test_non_string_values_are_stringified(self) -> None:
        assert escape(42) == "42"
        assert escape(None) == "None"


class TestClassList:
    def test_joins_with_single_spaces(self) -> None:
        assert class_list(["a", "b", "c"]) == "a b c"

    def test_skips_empty_and_none(self) -> None:
        assert class_list(["a", "", None, "b"]) == "a b"

    def test_preserves_order(self) -> None:
        assert class_list(["z", "a", "m"]) == "z a m"

    def test_empty(self) -> None:
        assert class_list([]) == ""


class TestAttr:
    """attr() serializes mappings into attribute strings."""

    def test_single_value(self) -> None:
        assert attr({"class": "btn"}) == 'class="btn"'

    def test_order_preserved(self) -> None:
        assert attr({"id": "x", "class": "y", "title": "z"}) == 'id="x" class="y" title="z"'

    def test_true_is_bare_attribute(self) -> None:
        assert attr({"disabled": True}) == "disabled"

    def test_false_and_none_are_omitted(self) -> None:
        assert attr({"a": "1", "hidden": False, "title": None, "b": "2"}) == 'a="1" b="2"'

    def test_values_are_escaped(self) -> None:
        result = attr({"title": '"><script>'})
        assert result == 'title="&#34;&gt;&lt;script&gt;"'
        assert "<script>" not in result

    def test_numbers_stringified(self) -> None:
        assert attr({"data-count": 3}) == 'data-count="3"'

    def test_empty_mapping(self) -> None:
        assert attr({}) == ""

    def test_returns_markup(self) -> None:
        assert isinstance(attr({"a": "b"}), Markup)

    @pytest.mark.parametrize("name", ["", "on click", 'a"b', "a>b", "a=b", "a/b", "a\x00"])
    def test_invalid_name_rejected(self, name: str) -> None:
        with pytest.raises(ComponentValueError, match="Invalid HTML attribute name"):
            attr({name: "x"})

    def test_event_handler_warns(self) -> None:
        with pytest.warns(UserWarning, match="event handler"):
            result = attr({"onclick": "go()"})
        assert result == 'onclick="go()"'

    def test_event_handler_check_is_case_insensitive(self) -> None:
        with pytest.warns(UserWarning):
            attr({"OnClick": "go()"})

    def test_regular_attributes_do_not_warn(self) -> None:
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            attr({"href": "#", "data-onclick": "x", "class": "a"})


class TestTrustedHtml:
    def test_is_html(self) -> None:
        assert is_html(Markup("<b>"))
        assert not is_html("<b>")
        assert not is_html(None)

    def test_classes_are_not_html(self) -> None:
        assert is_html(DemoHeader(title="t", subtitle="s"))
        assert not is_html(DemoHeader)
        with pytest.raises(TypeError, match="expected Markup"):
            to_markup(DemoHeader)  # type: ignore[arg-type]

    def test_to_markup_from_html_object(self) -> None:
        class Widget:
            def __html__(self) -> str:
                return "<i>w</i>"

        assert to_markup(Widget()) == Markup("<i>w</i>")

    def test_to_markup_rejects_plain_str(self) -> None:
        with pytest.raises(TypeError, match="expected Markup"):
            to_markup("<b>")  # type: ignore[arg-type]

    def test_join_html(self) -> None:
        joined = join_html([Markup("<a>"), Markup("<b>")], separator="\n")
        assert joined == "<a>\n<b>"
        assert isinstance(joined, Markup)


class TestMergeAttributes:
    def test_later_layers_override_in_place(self) -> None:
        merged = merge_attributes({"id": "a", "class": "x"}, {"class": "y", "title": "t"})
        assert list(merged.items()) == [("id", "a"), ("class", "y"), ("title", "t")]

    def test_none_values_dropped(self) -> None:
        assert merge_attributes({"id": None, "name": "n"}, {"required": None}) == {"name": "n"}

    def test_false_kept_for_attr(self) -> None:
        merged = merge_attributes({"hidden": False})
        assert merged == {"hidden": False}
        assert attr(merged) == ""
