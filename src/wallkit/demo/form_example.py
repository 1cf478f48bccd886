"""Form showcase: a rendered form with action buttons and typed notes."""

from __future__ import annotations

from markupsafe import Markup
from pydantic import Field

from wallkit.component import Component, ReadOnlyMap, Record, RecordList, TrustedHTML, empty_map
from wallkit.utils.constants import NOTE_ICONS
from wallkit.utils.html import attr, class_list, escape


class FormAction(Record):
    """A button under the form. ``variant`` becomes a CSS modifier as-is."""

    text: str
    variant: str = "primary"
    icon: str | None = None


class DemoFormExample(Component, tag="demo-form-example"):
    """Form example card.

    Attributes:
        title: Card heading
        description: Text under the heading
        form_html: The rendered form (trusted HTML)
        actions: Buttons rendered under the form, in order
        notes: Note type -> text. ``tip``, ``warning`` and ``info`` get an
            icon prefix; any other type renders the text alone.
    """

    title: str
    description: str
    form_html: TrustedHTML
    actions: RecordList[FormAction] = ()
    notes: ReadOnlyMap[str, str] = Field(default_factory=empty_map)

    def action_attributes(self, variant: str) -> dict[str, str]:
        classes = ["wallkit-demo-form-example__action", f"wallkit-demo-form-example__action--{variant}"]
        return {"class": class_list(classes)}

    def note_icon(self, note_type: str) -> str | None:
        return NOTE_ICONS.get(note_type)

    def render(self) -> Markup:
        buf: list[str] = []
        _append = buf.append

        _append('<div class="wallkit-demo-form-example">\n')
        _append('<div class="wallkit-demo-form-example__header">\n')
        _append(f'<h3 class="wallkit-demo-form-example__title">{escape(self.title)}</h3>\n')
        _append(f'<p class="wallkit-demo-form-example__description">{escape(self.description)}</p>\n')
        _append("</div>\n")

        _append(f'<div class="wallkit-demo-form-example__form">\n{self.form_html}\n</div>\n')

        if self.actions:
            _append('<div class="wallkit-demo-form-example__actions">\n')
            for action in self.actions:
                _append(f'<button type="button" {attr(self.action_attributes(action.variant))}>')
                if action.icon:
                    _append(
                        f'<span class="wallkit-demo-form-example__action-icon">{escape(action.icon)}</span> '
                    )
                _append(f"{escape(action.text)}</button>\n")
            _append("</div>\n")

        if self.notes:
            _append('<div class="wallkit-demo-form-example__notes">\n')
            for note_type, note in self.notes.items():
                modifier = escape(f"wallkit-demo-form-example__note--{note_type}")
                _append(f'<div class="wallkit-demo-form-example__note {modifier}">')
                icon = self.note_icon(note_type)
                if icon:
                    _append(f"{icon} ")
                _append(f"{escape(note)}</div>\n")
            _append("</div>\n")

        _append("</div>")
        return Markup("".join(buf))
