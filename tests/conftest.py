"""Pytest configuration and fixtures for WallKit tests."""

from __future__ import annotations

import pytest
from markupsafe import Markup

from wallkit import Labels, configure
from wallkit.highlight import PygmentsHighlighter


class FailingHighlighter:
    """Highlighter that claims every language and then fails."""

    def supports(self, language: str) -> bool:
        return True

    def highlight(self, source: str, language: str) -> Markup:
        raise RuntimeError("highlighter exploded")


class UppercaseHighlighter:
    """Deterministic highlighter for asserting what reaches the output."""

    languages = frozenset({"python", "php"})

    def supports(self, language: str) -> bool:
        return language in self.languages

    def highlight(self, source: str, language: str) -> Markup:
        return Markup('<span class="hl">{}</span>').format(source.upper())


@pytest.fixture
def pygments_highlighter():
    """A plain Pygments highlighter."""
    return PygmentsHighlighter()


@pytest.fixture
def failing_highlighter():
    return FailingHighlighter()


@pytest.fixture
def uppercase_highlighter():
    return UppercaseHighlighter()


@pytest.fixture
def english_labels():
    """Activate English labels for the duration of a test."""
    labels = Labels(
        copy="Copy",
        copied="Copied!",
        stats_title="Project stats",
        stats_ready="ready",
        stats_components="Components",
        stats_total="total",
        stats_stable="Stable",
        stats_planned="Planned",
        stats_demos="Demo pages",
        tag_cloud_all="All",
        tag_cloud_title="Tags",
        sidebar_title="Navigation",
        password_toggle="Show/hide password",
    )
    with configure(labels=labels):
        yield labels


def normalize(html: str) -> str:
    """Collapse whitespace runs so markup compares independent of layout."""
    return " ".join(str(html).split())


def assert_html_equal(rendered: str, expected: str) -> None:
    """Assert rendered HTML equals expected, normalizing whitespace.

    Args:
        rendered: The actual rendering result.
        expected: The expected output.
    """
    actual_normalized = normalize(rendered)
    expected_normalized = normalize(expected)
    assert actual_normalized == expected_normalized, (
        f"Rendered output mismatch:\n"
        f"  Actual: {actual_normalized!r}\n"
        f"  Expected: {expected_normalized!r}"
    )


def assert_contains(rendered: str, *expected_parts: str) -> None:
    """Assert rendered HTML contains all expected parts.

    Args:
        rendered: The actual rendering result.
        expected_parts: Strings that should all be present in the result.
    """
    for part in expected_parts:
        assert part in rendered, (
            f"Rendered output missing expected content:\n"
            f"  Missing: {part!r}\n"
            f"  Actual: {rendered!r}"
        )


def assert_in_order(rendered: str, *parts: str) -> None:
    """Assert every part occurs in rendered, each after the previous one."""
    position = 0
    for part in parts:
        found = rendered.find(part, position)
        assert found != -1, f"{part!r} not found after offset {position} in {rendered!r}"
        position = found + len(part)
