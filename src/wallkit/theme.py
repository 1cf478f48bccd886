"""Theme stylesheet: the ``--wk-*`` CSS custom properties shipped with WallKit.

Components only reference the variables (``var(--wk-accent)`` and so on).
The stylesheet defining them is package data, located through
``importlib.resources`` so it resolves inside wheels and zip imports alike:

    >>> from wallkit.theme import css_variables
    >>> css_variables()["--wk-color-primary"]
    '#4a6fa5'

"""

from __future__ import annotations

import importlib.resources
import re
from functools import cache

_PACKAGE = "wallkit"
_STYLESHEET = "static/variables.css"

# --wk-name: value;  (values never contain ';' in this file)
_VARIABLE_RE = re.compile(r"(--wk-[a-z0-9-]+)\s*:\s*([^;]+);")
_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


def stylesheet_path() -> importlib.resources.abc.Traversable:
    """Location of ``variables.css`` inside the installed package."""
    root = importlib.resources.files(_PACKAGE)
    for part in _STYLESHEET.split("/"):
        root = root.joinpath(part)
    return root


@cache
def read_stylesheet() -> str:
    """Text of ``variables.css``."""
    return stylesheet_path().read_text("utf-8")


def css_variables() -> dict[str, str]:
    """Custom property name -> declared value, in file order.

    A property declared twice keeps its last value, as in the cascade.
    """
    source = _COMMENT_RE.sub("", read_stylesheet())
    return {name: value.strip() for name, value in _VARIABLE_RE.findall(source)}
