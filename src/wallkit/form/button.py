"""Button component: a ``<button>``, or an ``<a>`` styled as one."""

from __future__ import annotations

from typing import Any, Literal

from markupsafe import Markup
from pydantic import Field

from wallkit.component import AttributeMap, Component, TextList, empty_map
from wallkit.utils.html import attr, class_list, escape, merge_attributes

ButtonVariant = Literal[
    "primary", "secondary", "success", "danger", "warning", "info", "light", "dark", "link"
]


class Button(Component, tag="button"):
    """Action button.

    With ``href`` set the button renders as a link; ``type`` and
    ``disabled`` then have no effect on the markup.

    Attributes:
        text: Button label
        type: ``button``, ``submit`` or ``reset``
        variant: Color scheme, one of ``ButtonVariant``
        size: ``sm``, ``md`` or ``lg``
        icon: Text or emoji before the label
        icon_after: Text or emoji after the label
        on_click: Inline ``onclick`` handler. Serializing it warns, since
            the value runs as JavaScript.
    """

    text: str
    type: Literal["button", "submit", "reset"] = "button"
    variant: ButtonVariant = "primary"
    size: Literal["sm", "md", "lg"] = "md"
    disabled: bool = False
    icon: str | None = None
    icon_after: str | None = None
    href: str | None = None
    target: str | None = None
    id: str | None = None
    classes: TextList = ()
    attributes: AttributeMap = Field(default_factory=empty_map)
    on_click: str | None = None
    full_width: bool = False
    outline: bool = False
    rounded: bool = False

    def is_link(self) -> bool:
        return self.href is not None

    def button_classes(self) -> list[str]:
        variant = f"outline-{self.variant}" if self.outline else self.variant
        classes = ["wallkit-button", f"wallkit-button--{variant}", f"wallkit-button--{self.size}"]
        if self.disabled:
            classes.append("wallkit-button--disabled")
        if self.full_width:
            classes.append("wallkit-button--full-width")
        if self.rounded:
            classes.append("wallkit-button--rounded")
        return [*classes, *self.classes]

    def button_attributes(self) -> dict[str, Any]:
        base = {"id": self.id, "class": class_list(self.button_classes())}
        if self.is_link():
            own: dict[str, Any] = {"href": self.href, "target": self.target}
        else:
            own = {"type": self.type, "disabled": self.disabled or None}
        return merge_attributes(base, self.attributes, own, {"onclick": self.on_click})

    def render(self) -> Markup:
        element = "a" if self.is_link() else "button"
        buf: list[str] = []
        _append = buf.append

        _append(f"<{element} {attr(self.button_attributes())}>")
        if self.icon:
            _append(f'<span class="wallkit-button__icon">{escape(self.icon)}</span>')
        _append(f'<span class="wallkit-button__text">{escape(self.text)}</span>')
        if self.icon_after:
            _append(
                '<span class="wallkit-button__icon wallkit-button__icon--after">'
                f"{escape(self.icon_after)}</span>"
            )
        _append(f"</{element}>")

        return Markup("".join(buf))
