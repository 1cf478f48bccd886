"""Checkbox component: a checkbox input with an optional label beside it."""

from __future__ import annotations

import re
from typing import Any

from markupsafe import Markup
from pydantic import Field

from wallkit.component import AttributeMap, Component, NonBlankStr, TextList, empty_map
from wallkit.utils.html import attr, class_list, escape, merge_attributes

_ID_UNSAFE_RE = re.compile(r"[^a-z0-9]", re.IGNORECASE)


class Checkbox(Component, tag="checkbox"):
    """Checkbox with a label.

    Checkboxes sharing a ``name`` form a group; give each its own ``value``.

    Example:
        >>> Checkbox(name="hobbies", value="music", label="Music").label_for()
        'checkbox-hobbies-music'
    """

    name: NonBlankStr
    value: str | None = "on"
    label: str | None = None
    checked: bool = False
    required: bool = False
    disabled: bool = False
    id: str | None = None
    classes: TextList = ()
    attributes: AttributeMap = Field(default_factory=empty_map)

    def container_classes(self) -> list[str]:
        classes = ["wallkit-checkbox"]
        if self.disabled:
            classes.append("wallkit-checkbox--disabled")
        return [*classes, *self.classes]

    def input_classes(self) -> list[str]:
        return ["wallkit-checkbox__input"]

    def label_for(self) -> str:
        """The input's id: the ``id`` prop, or one derived from name and value."""
        if self.id:
            return self.id
        base = "checkbox-" + _ID_UNSAFE_RE.sub("-", self.name)
        if self.value and self.value != "on":
            base += f"-{self.value}"
        return base

    def input_attributes(self) -> dict[str, Any]:
        base = {
            # a label needs an id to point at
            "id": self.label_for() if self.label else self.id,
            "name": self.name,
            "value": self.value,
            "type": "checkbox",
            "class": class_list(self.input_classes()),
        }
        flags = {
            "checked": self.checked or None,
            "required": self.required or None,
            "disabled": self.disabled or None,
        }
        return merge_attributes(base, self.attributes, flags)

    def render(self) -> Markup:
        buf: list[str] = []
        _append = buf.append

        _append(f'<div class="{escape(class_list(self.container_classes()))}">\n')
        _append(f"<input {attr(self.input_attributes())}>\n")
        if self.label:
            _append(
                f'<label for="{escape(self.label_for())}" class="wallkit-checkbox__label">'
                f"{escape(self.label)}</label>\n"
            )
        _append("</div>")

        return Markup("".join(buf))
