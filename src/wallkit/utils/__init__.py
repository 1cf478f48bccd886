"""Utility helpers for WallKit (HTML escaping, shared constants)."""

from wallkit.utils.html import Markup, attr, class_list, escape, is_html, join_html, to_markup

__all__ = ["Markup", "attr", "class_list", "escape", "is_html", "join_html", "to_markup"]
