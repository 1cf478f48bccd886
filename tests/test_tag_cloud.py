"""Tests for the TagCloud component."""

from __future__ import annotations

import pytest

from wallkit import TagCloud
from wallkit.content.tag_cloud import tag_size
from wallkit.exceptions import ComponentTypeError

from .conftest import assert_contains, assert_in_order


@pytest.mark.parametrize(
    ("count", "size"),
    [(0, "sm"), (1, "sm"), (2, "sm"), (3, "md"), (5, "md"), (6, "lg"), (10, "lg"), (11, "xl"), (100, "xl")],
)
def test_tag_size_thresholds(count: int, size: str) -> None:
    assert tag_size(count) == size


class TestAllTag:
    def test_all_tag_prepended_with_sum(self) -> None:
        cloud = TagCloud(tags={"php": 3, "css": 4})
        assert list(cloud.tags.items()) == [("Все", 7), ("php", 3), ("css", 4)]

    def test_all_tag_active_by_default(self) -> None:
        cloud = TagCloud(tags={"php": 3})
        assert cloud.active_tag == "Все"
        assert cloud.is_tag_active("Все")

    def test_explicit_active_tag_kept(self) -> None:
        assert TagCloud(tags={"php": 3}, active_tag="php").active_tag == "php"

    def test_all_tag_disabled(self) -> None:
        cloud = TagCloud(tags={"php": 3}, include_all_tag=False)
        assert list(cloud.tags) == ["php"]
        assert cloud.active_tag is None

    def test_no_all_tag_for_empty_cloud(self) -> None:
        cloud = TagCloud()
        assert not cloud.has_tags()
        assert cloud.tags_count() == 0

    def test_tags_count_excludes_all_tag(self) -> None:
        assert TagCloud(tags={"a": 1, "b": 2}).tags_count() == 2

    def test_tags_count_when_input_already_has_all_tag(self) -> None:
        cloud = TagCloud(tags={"Все": 3, "py": 2})
        assert list(cloud.tags.items()) == [("Все", 3), ("py", 2)]
        assert cloud.tags_count() == 2

    def test_tags_count_without_all_tag(self) -> None:
        assert TagCloud(tags={"a": 1, "b": 2}, include_all_tag=False).tags_count() == 2

    def test_custom_all_text(self, english_labels) -> None:
        assert "All" in TagCloud(tags={"a": 1}).tags
        assert "Everything" in TagCloud(tags={"a": 1}, all_tag_text="Everything").tags


class TestClasses:
    def test_tag_classes(self) -> None:
        cloud = TagCloud(tags={"php": 3})
        assert cloud.tag_classes("Все", 3) == [
            "wallkit-tag-cloud__tag",
            "wallkit-tag-cloud__tag--md",
            "wallkit-tag-cloud__tag--active",
            "wallkit-tag-cloud__tag--all",
            "wallkit-tag-cloud__tag--clickable",
            "wallkit-tag-cloud__tag--cloud",
            "wallkit-tag-cloud__tag--size-md",
        ]

    def test_container_classes(self) -> None:
        cloud = TagCloud(size="lg", variant="list", clickable=False)
        assert cloud.container_classes() == ["wallkit-tag-cloud", "wallkit-tag-cloud--list", "wallkit-tag-cloud--size-lg"]


class TestRender:
    def test_clickable_tags_are_links(self) -> None:
        html = str(TagCloud(tags={"php": 3}))
        assert_contains(html, '<a href="#"', 'data-tag="php"', 'data-count="3"', 'aria-current="true"')
        assert_in_order(html, "Облако тегов", "Все", "php")

    def test_static_tags_are_spans(self) -> None:
        html = str(TagCloud(tags={"php": 3}, clickable=False))
        assert "<a " not in html
        assert '<span class="wallkit-tag-cloud__tag' in html

    def test_counts_hidden(self) -> None:
        assert "wallkit-tag-cloud__count" not in str(TagCloud(tags={"php": 3}, show_count=False))

    def test_empty_message(self) -> None:
        html = str(TagCloud(empty_message="No tags yet"))
        assert '<p class="wallkit-tag-cloud__empty">No tags yet</p>' in html

    def test_title_hidden_when_empty(self) -> None:
        assert "wallkit-tag-cloud__title" not in str(TagCloud(tags={"a": 1}, title=""))

    def test_tag_names_escaped(self) -> None:
        html = str(TagCloud(tags={"<x>": 1}))
        assert "<x>" not in html
        assert 'data-tag="&lt;x&gt;"' in html

    def test_counts_must_be_int(self) -> None:
        with pytest.raises(ComponentTypeError, match=r"TagCloud\.tags"):
            TagCloud(tags={"a": "1"})
