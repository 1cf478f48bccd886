"""Select component: a dropdown with optional option groups.

``options`` maps option values to labels. A mapping in place of a label
makes an ``<optgroup>`` whose label is the key:

    >>> Select(name="city", options={"Europe": {"ber": "Berlin"}, "nyc": "New York"})

"""

from __future__ import annotations

from typing import Any, NamedTuple

from markupsafe import Markup
from pydantic import Field, PositiveInt

from wallkit.component import AttributeMap, Component, NonBlankStr, ReadOnlyMap, TextList, empty_map
from wallkit.exceptions import ComponentValueError
from wallkit.utils.html import attr, class_list, escape, merge_attributes


class SelectOption(NamedTuple):
    value: str
    label: str
    group: str | None


class Select(Component, tag="select"):
    """``<select>`` element.

    Attributes:
        options: Value -> label, or group label -> {value -> label}
        selected: Selected value; a sequence of values when ``multiple``
        multiple: Allow several selections. The name must end in ``[]`` so
            the server receives every value.
        placeholder: Disabled first option, selected while nothing else is
    """

    name: NonBlankStr
    options: ReadOnlyMap[str, str | ReadOnlyMap[str, str]] = Field(default_factory=empty_map)
    selected: str | TextList | None = None
    multiple: bool = False
    required: bool = False
    disabled: bool = False
    id: str | None = None
    classes: TextList = ()
    attributes: AttributeMap = Field(default_factory=empty_map)
    placeholder: str | None = None
    size: PositiveInt | None = None
    auto_focus: bool = False

    def model_post_init(self, context: Any, /) -> None:
        if self.multiple and not self.name.endswith("[]"):
            raise ComponentValueError(
                f'Select.name: a multiple select name must end with "[]", got {self.name!r}'
            )

    def select_classes(self) -> list[str]:
        classes = ["wallkit-select__field"]
        if self.multiple:
            classes.append("wallkit-select__field--multiple")
        return [*classes, *self.classes]

    def select_attributes(self) -> dict[str, Any]:
        base = {
            "id": self.id,
            "name": self.name,
            "class": class_list(self.select_classes()),
        }
        flags = {
            "multiple": self.multiple or None,
            "required": self.required or None,
            "disabled": self.disabled or None,
            "autofocus": self.auto_focus or None,
            "size": self.size,
        }
        return merge_attributes(base, self.attributes, flags)

    def is_option_selected(self, value: str) -> bool:
        if self.selected is None:
            return False
        if isinstance(self.selected, tuple):
            # a list of values only counts for a multiple select
            return self.multiple and value in self.selected
        return self.selected == value

    def normalized_options(self) -> list[SelectOption]:
        """Options flattened in order, each tagged with its group label."""
        normalized: list[SelectOption] = []
        for key, entry in self.options.items():
            if isinstance(entry, str):
                normalized.append(SelectOption(key, entry, None))
            else:
                normalized.extend(SelectOption(value, label, key) for value, label in entry.items())
        return normalized

    def render(self) -> Markup:
        buf: list[str] = []
        _append = buf.append

        _append(f"<select {attr(self.select_attributes())}>\n")
        if self.placeholder:
            selected = " selected" if self.selected is None else ""
            _append(f'<option value="" disabled{selected}>{escape(self.placeholder)}</option>\n')

        current_group: str | None = None
        for option in self.normalized_options():
            if option.group != current_group:
                if current_group is not None:
                    _append("</optgroup>\n")
                if option.group is not None:
                    _append(f'<optgroup label="{escape(option.group)}">\n')
                current_group = option.group
            selected = " selected" if self.is_option_selected(option.value) else ""
            _append(f'<option value="{escape(option.value)}"{selected}>{escape(option.label)}</option>\n')
        if current_group is not None:
            _append("</optgroup>\n")

        _append("</select>")
        return Markup("".join(buf))
