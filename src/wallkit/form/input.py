"""Input component: a bare ``<input>`` element, no label or wrapper.

Use it on its own, or wrap it in ``FormField`` for a label, help text and
error message.

Example:
    >>> str(Input(name="email", type="email", required=True))
    '<input name="email" type="email" class="wallkit-input__field" required>'

"""

from __future__ import annotations

from typing import Any, Literal

from markupsafe import Markup
from pydantic import Field

from wallkit.component import AttributeMap, Component, NonBlankStr, TextList, empty_map
from wallkit.utils.html import attr, class_list, merge_attributes

InputType = Literal[
    "color",
    "date",
    "datetime-local",
    "email",
    "file",
    "hidden",
    "month",
    "number",
    "password",
    "range",
    "search",
    "tel",
    "text",
    "time",
    "url",
    "week",
    "radio",
    "checkbox",
]


def spellcheck_value(spellcheck: bool | None) -> str | None:
    """``spellcheck`` is enumerated, not boolean: it needs an explicit value."""
    if spellcheck is None:
        return None
    return "true" if spellcheck else "false"


class Input(Component, tag="input"):
    """Single ``<input>`` element.

    ``min``, ``max`` and ``step`` are strings so dates and numbers share
    one prop.
    """

    name: NonBlankStr
    placeholder: str | None = None
    value: str | None = None
    type: InputType = "text"
    required: bool = False
    disabled: bool = False
    readonly: bool = False
    checked: bool = False
    id: str | None = None
    classes: TextList = ()
    attributes: AttributeMap = Field(default_factory=empty_map)
    auto_focus: bool = False
    pattern: str | None = None
    min: str | None = None
    max: str | None = None
    max_length: int | None = None
    min_length: int | None = None
    step: str | None = None
    autocomplete: str | None = None
    spellcheck: bool | None = None

    def input_classes(self) -> list[str]:
        return ["wallkit-input__field", *self.classes]

    def input_attributes(self) -> dict[str, Any]:
        base = {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "class": class_list(self.input_classes()),
            "placeholder": self.placeholder,
            "value": self.value,
            "autocomplete": self.autocomplete,
        }
        flags = {
            "required": self.required or None,
            "disabled": self.disabled or None,
            "readonly": self.readonly or None,
            "autofocus": self.auto_focus or None,
            "checked": self.checked or None,
            "pattern": self.pattern or None,
            "min": self.min,
            "max": self.max,
            "maxlength": self.max_length,
            "minlength": self.min_length,
            "step": self.step,
            "spellcheck": spellcheck_value(self.spellcheck),
        }
        return merge_attributes(base, self.attributes, flags)

    def render(self) -> Markup:
        return Markup(f"<input {attr(self.input_attributes())}>")
