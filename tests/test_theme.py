"""Tests for the shipped CSS custom properties."""

from __future__ import annotations

import re

import pytest

from wallkit.theme import css_variables, read_stylesheet, stylesheet_path

_COLOR_VALUE = re.compile(r"^(#[0-9a-fA-F]{3,8}|var\(--wk-[a-z0-9-]+\))$")


class TestStylesheet:
    def test_file_ships_with_package(self) -> None:
        assert stylesheet_path().is_file()
        assert ":root" in read_stylesheet()

    def test_variable_count(self) -> None:
        assert len(css_variables()) > 50

    @pytest.mark.parametrize(
        "name",
        [
            "--wk-color-gray-50",
            "--wk-color-gray-500",
            "--wk-color-gray-900",
            "--wk-color-primary",
            "--wk-color-secondary",
            "--wk-color-success",
            "--wk-color-danger",
            "--wk-color-warning",
            "--wk-color-info",
            "--wk-color-blue-500",
            "--wk-color-red-600",
            "--wk-color-green-500",
            "--wk-color-yellow-500",
            "--wk-color-purple-500",
            "--wk-font-family",
            "--wk-font-size-xs",
            "--wk-font-size-base",
            "--wk-font-size-xl",
            "--wk-font-size-5xl",
            "--wk-font-weight-normal",
            "--wk-font-weight-bold",
            "--wk-line-height-base",
            "--wk-spacing-1",
            "--wk-spacing-4",
            "--wk-spacing-8",
            "--wk-spacing-20",
            "--wk-border-width",
            "--wk-border-radius",
            "--wk-border-radius-lg",
            "--wk-shadow-sm",
            "--wk-shadow",
            "--wk-shadow-lg",
            "--wk-shadow-outline",
            "--wk-transition-fast",
            "--wk-transition",
            "--wk-transition-slow",
            "--wk-accent",
        ],
    )
    def test_required_variable(self, name: str) -> None:
        assert name in css_variables()

    def test_key_values(self) -> None:
        variables = css_variables()
        assert variables["--wk-color-primary"] == "#4a6fa5"
        assert variables["--wk-color-blue-500"] == "var(--wk-color-primary)"
        assert "system-ui" in variables["--wk-font-family"]
        assert variables["--wk-font-size-base"] == "1rem"
        assert variables["--wk-color-danger"] == "#ef4444"
        assert variables["--wk-border-radius"] == "0.25rem"

    def test_color_values(self) -> None:
        colors = {k: v for k, v in css_variables().items() if k.startswith("--wk-color-")}
        assert len(colors) > 30
        for name, value in colors.items():
            assert _COLOR_VALUE.match(value), f"{name}: {value}"

    def test_var_references_resolve(self) -> None:
        variables = css_variables()
        for value in variables.values():
            for ref in re.findall(r"var\((--wk-[a-z0-9-]+)\)", value):
                assert ref in variables
