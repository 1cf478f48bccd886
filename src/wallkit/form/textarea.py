"""Textarea component: a multi-line text field."""

from __future__ import annotations

from typing import Any

from markupsafe import Markup
from pydantic import Field, PositiveInt

from wallkit.component import AttributeMap, Component, NonBlankStr, TextList, empty_map
from wallkit.form.input import spellcheck_value
from wallkit.utils.html import attr, class_list, escape, merge_attributes


class Textarea(Component, tag="textarea"):
    """``<textarea>`` with its current value as escaped content."""

    name: NonBlankStr
    placeholder: str | None = None
    value: str | None = None
    rows: PositiveInt = 4
    max_length: int | None = None
    required: bool = False
    disabled: bool = False
    readonly: bool = False
    id: str | None = None
    classes: TextList = ()
    attributes: AttributeMap = Field(default_factory=empty_map)
    auto_focus: bool = False
    autocomplete: str | None = None
    spellcheck: bool | None = None

    def textarea_classes(self) -> list[str]:
        return ["wallkit-textarea__field", *self.classes]

    def textarea_attributes(self) -> dict[str, Any]:
        base = {
            "id": self.id,
            "name": self.name,
            "class": class_list(self.textarea_classes()),
            "placeholder": self.placeholder,
            "rows": self.rows,
            "autocomplete": self.autocomplete,
        }
        flags = {
            "required": self.required or None,
            "disabled": self.disabled or None,
            "readonly": self.readonly or None,
            "autofocus": self.auto_focus or None,
            "maxlength": self.max_length or None,
            "spellcheck": spellcheck_value(self.spellcheck),
        }
        return merge_attributes(base, self.attributes, flags)

    def render(self) -> Markup:
        return Markup(f"<textarea {attr(self.textarea_attributes())}>{escape(self.value or '')}</textarea>")
