"""Shared constants for WallKit.

Kept apart from the component modules so templates and helpers can share
them without import cycles.
"""

from __future__ import annotations

# Note-type prefixes for DemoFormExample. Keys outside this map render
# without an icon.
NOTE_ICONS: dict[str, str] = {
    "tip": "💡",
    "warning": "⚠️",
    "info": "ℹ️",
}

# Languages rendered as plain escaped text; never checked against a highlighter.
PLAIN_LANGUAGES: frozenset[str] = frozenset({"plaintext", "text"})

# Container class for highlighted code; Pygments style sheets are scoped to it
HIGHLIGHT_CLASS = "highlight"

# Fenced code in Markdown longer than this many characters gets line numbers
LONG_CODE_BLOCK = 250

# Python-Markdown extensions a Markdown component may enable by name
MARKDOWN_EXTENSIONS: frozenset[str] = frozenset(
    {
        "abbr",
        "admonition",
        "attr_list",
        "def_list",
        "footnotes",
        "md_in_html",
        "sane_lists",
        "smarty",
        "tables",
        "toc",
    }
)

# Form methods that carry a CSRF token field
CSRF_METHODS: frozenset[str] = frozenset({"POST", "PUT", "PATCH", "DELETE"})

# Input types rendered inside their label by FormField
CHECKABLE_TYPES: frozenset[str] = frozenset({"checkbox", "radio"})

# (minimum count exclusive, size suffix), checked in order
TAG_SIZE_STEPS: tuple[tuple[int, str], ...] = (
    (10, "xl"),
    (5, "lg"),
    (2, "md"),
)
TAG_SIZE_FALLBACK = "sm"

DEFAULT_GROUP_ICON = "📦"
DEFAULT_GROUP_COLOR = "var(--wk-accent)"

# Event handler attributes that can execute JavaScript.
# attr() warns when asked to serialize one of these.
# Source: WHATWG HTML Living Standard
EVENT_HANDLER_ATTRS: frozenset[str] = frozenset(
    {
        # Mouse
        "onclick",
        "ondblclick",
        "onmousedown",
        "onmouseup",
        "onmouseover",
        "onmousemove",
        "onmouseout",
        "onmouseenter",
        "onmouseleave",
        "onwheel",
        "oncontextmenu",
        # Keyboard
        "onkeydown",
        "onkeypress",
        "onkeyup",
        # Focus
        "onfocus",
        "onblur",
        "onfocusin",
        "onfocusout",
        # Form
        "onchange",
        "oninput",
        "oninvalid",
        "onreset",
        "onsubmit",
        "onselect",
        # Clipboard
        "oncopy",
        "oncut",
        "onpaste",
        # Drag
        "ondrag",
        "ondragstart",
        "ondragend",
        "ondrop",
        # Media / resources
        "onerror",
        "onload",
        "onabort",
        # Window
        "onunload",
        "onbeforeunload",
        "onresize",
        "onscroll",
        "onhashchange",
        "onmessage",
        # Pointer / touch
        "onpointerdown",
        "onpointerup",
        "onpointermove",
        "ontouchstart",
        "ontouchend",
        "ontouchmove",
        # Animation / transition
        "onanimationstart",
        "onanimationend",
        "ontransitionend",
        # Other
        "ontoggle",
        "onbeforeinput",
    }
)
