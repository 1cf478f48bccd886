"""Form field wrapper: label, control, help text and error message.

Wraps an ``Input``, ``Textarea`` or ``Select``. Checkboxes and radios are
rendered inside their label; other controls sit in a wrapper under the
label text, next to an optional password visibility toggle.
"""

from __future__ import annotations

from markupsafe import Markup

from wallkit.component import Component, TextList
from wallkit.config import get_config
from wallkit.form.input import Input
from wallkit.form.select import Select
from wallkit.form.textarea import Textarea
from wallkit.utils.constants import CHECKABLE_TYPES
from wallkit.utils.html import class_list, escape

_REQUIRED_MARK = '<span class="wallkit-field__required">*</span>'


class FormField(Component, tag="form-field"):
    """Labelled form control.

    Attributes:
        input: The control being wrapped
        label: Label text; without it the control renders bare in its wrapper
        help_text: Hint under the control, hidden while ``error`` is set
        error: Validation message, rendered as an alert
        with_password_toggle: Add the show/hide button to password inputs
        wrapper_classes: Extra classes for the outer element
    """

    input: Input | Textarea | Select
    label: str | None = None
    help_text: str | None = None
    error: str | None = None
    with_password_toggle: bool = True
    wrapper_classes: TextList = ()

    def field_type(self) -> str:
        """The input type, or ``textarea``/``select`` for those controls."""
        if isinstance(self.input, Input):
            return self.input.type
        return "textarea" if isinstance(self.input, Textarea) else "select"

    def is_checkable(self) -> bool:
        return self.field_type() in CHECKABLE_TYPES

    def should_show_password_toggle(self) -> bool:
        return self.field_type() == "password" and self.with_password_toggle

    def label_id(self) -> str | None:
        return self.input.id

    def container_classes(self) -> list[str]:
        classes = ["wallkit-field"]
        if self.error:
            classes.append("wallkit-field--error")
        if self.input.disabled:
            classes.append("wallkit-field--disabled")
        return [*classes, *self.wrapper_classes]

    def _password_toggle(self) -> str:
        if not self.should_show_password_toggle():
            return ""
        label = escape(get_config().labels.password_toggle)
        return (
            f'\n<button type="button" class="wallkit-field__toggle-password" aria-label="{label}">'
            "👁️</button>"
        )

    def render(self) -> Markup:
        field_type = escape(self.field_type())
        required = _REQUIRED_MARK if self.input.required else ""
        buf: list[str] = []
        _append = buf.append

        _append(f'<div class="{escape(class_list(self.container_classes()))}">\n')

        if self.label and self.is_checkable():
            _append(f'<label class="wallkit-field__label wallkit-field--{field_type}">\n')
            _append(f"{self.input}\n")
            _append(f'<span class="wallkit-field__{field_type}-visual"></span>\n')
            _append(f'<span class="wallkit-field__label-text">{escape(self.label)}{required}</span>\n')
            _append("</label>\n")
        elif self.label:
            _append('<label class="wallkit-field__label">\n')
            _append(f'<span class="wallkit-field__label-text">{escape(self.label)}{required}</span>\n')
            _append(f'<span class="wallkit-field__wrapper">\n{self.input}{self._password_toggle()}\n</span>\n')
            _append("</label>\n")
        else:
            _append(f'<div class="wallkit-field__wrapper">\n{self.input}{self._password_toggle()}\n</div>\n')

        if self.error:
            _append(
                '<div class="wallkit-field__error" role="alert">'
                f"<span>⚠️</span><span>{escape(self.error)}</span></div>\n"
            )
        elif self.help_text:
            _append(f'<div class="wallkit-field__help">{escape(self.help_text)}</div>\n')

        _append("</div>")
        return Markup("".join(buf))
