"""Form component: a ``<form>`` around already-rendered fields.

Fields are any trusted HTML, typically ``FormField``, ``Checkbox``,
``FileUpload`` and ``Button`` instances. A CSRF token, when given, is
emitted as a hidden ``_token`` input for state-changing methods only.

Example:
    >>> form = Form(
    ...     fields=[FormField(input=Input(name="email", type="email"), label="Email"),
    ...             Button(text="Send", type="submit")],
    ...     action="/subscribe",
    ...     csrf_token=token,
    ... )

"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup
from pydantic import Field

from wallkit.component import AttributeMap, Component, HTMLSources, TextList, empty_map
from wallkit.utils.constants import CSRF_METHODS
from wallkit.utils.html import attr, class_list, escape, merge_attributes, to_markup


class Form(Component, tag="form"):
    """HTML form.

    Attributes:
        fields: Form contents, rendered in order
        method: HTTP method, upper-cased on output
        csrf_token: Value of the hidden ``_token`` input
        auto_complete: False adds ``autocomplete="off"``
    """

    fields: HTMLSources = ()
    action: str = ""
    method: str = "POST"
    csrf_token: str | None = None
    id: str | None = None
    name: str | None = None
    novalidate: bool = False
    auto_complete: bool = True
    enctype: str | None = None
    target: str | None = None
    classes: TextList = ()
    attributes: AttributeMap = Field(default_factory=empty_map)

    def form_classes(self) -> list[str]:
        return ["wallkit-form", *self.classes]

    def form_attributes(self) -> dict[str, Any]:
        base = {
            "id": self.id,
            "name": self.name,
            "action": self.action,
            "method": self.method.upper(),
            "class": class_list(self.form_classes()),
            "target": self.target,
            "enctype": self.enctype,
        }
        flags = {
            "novalidate": self.novalidate or None,
            "autocomplete": None if self.auto_complete else "off",
        }
        return merge_attributes(base, self.attributes, flags)

    def has_csrf_field(self) -> bool:
        return bool(self.csrf_token) and self.method.upper() in CSRF_METHODS

    def render(self) -> Markup:
        buf: list[str] = []
        _append = buf.append

        _append(f"<form {attr(self.form_attributes())}>\n")
        if self.has_csrf_field():
            _append(f'<input type="hidden" name="_token" value="{escape(self.csrf_token)}">\n')
        for field in self.fields:
            _append(f"{to_markup(field)}\n")
        # filled in by the form script
        _append('<div class="wallkit-form__messages"></div>\n')
        _append("</form>")

        return Markup("".join(buf))
