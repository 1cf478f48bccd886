"""File upload component: labelled file input with client-side limits.

The size, count and dimension limits are emitted as ``data-max-*``
attributes for the upload script to enforce; the server must check them
again.
"""

from __future__ import annotations

import re
from typing import Any

from markupsafe import Markup
from pydantic import Field, PositiveInt

from wallkit.component import AttributeMap, Component, NonBlankStr, TextList, empty_map
from wallkit.utils.html import attr, class_list, escape, merge_attributes

_ID_UNSAFE_RE = re.compile(r"[^a-z0-9_-]", re.IGNORECASE)


class FileUpload(Component, tag="file-upload"):
    """File input with a label, placeholder, help text and error message.

    Attributes:
        name: Field name; ``[]`` is appended when ``multiple``
        label: Visible label, required
        accept: Accepted types, e.g. ``"image/*,.pdf"``
        max_size: Maximum size per file in bytes
        max_files: Maximum number of files
        max_width: Maximum image width in pixels
        max_height: Maximum image height in pixels
    """

    name: NonBlankStr
    label: NonBlankStr
    placeholder: str | None = None
    required: bool = False
    disabled: bool = False
    multiple: bool = False
    accept: str | None = None
    max_size: PositiveInt | None = None
    max_files: PositiveInt | None = None
    max_width: PositiveInt | None = None
    max_height: PositiveInt | None = None
    id: str | None = None
    classes: TextList = ()
    attributes: AttributeMap = Field(default_factory=empty_map)
    help_text: str | None = None
    error: str | None = None

    def input_id(self) -> str:
        """The ``id`` prop, or ``fileupload-<name>``; stable across renders."""
        return self.id or "fileupload-" + _ID_UNSAFE_RE.sub("-", self.name)

    def input_attributes(self) -> dict[str, Any]:
        base = {
            "id": self.input_id(),
            "name": f"{self.name}[]" if self.multiple else self.name,
            "type": "file",
            "class": class_list(["wallkit-fileupload__field", *self.classes]),
            "accept": self.accept,
        }
        flags = {
            "required": self.required or None,
            "disabled": self.disabled or None,
            "multiple": self.multiple or None,
            "data-max-size": self.max_size,
            "data-max-files": self.max_files,
            "data-max-width": self.max_width,
            "data-max-height": self.max_height,
        }
        return merge_attributes(base, self.attributes, flags)

    def render(self) -> Markup:
        buf: list[str] = []
        _append = buf.append

        _append('<div class="wallkit-fileupload">\n')
        _append(f'<label for="{escape(self.input_id())}" class="wallkit-fileupload__label">{escape(self.label)}')
        if self.required:
            _append('<span class="wallkit-fileupload__required" aria-hidden="true">*</span>')
        _append("</label>\n")

        _append('<div class="wallkit-fileupload__wrapper">\n')
        _append(f"<input {attr(self.input_attributes())}>\n")
        if self.placeholder:
            _append(f'<div class="wallkit-fileupload__placeholder">{escape(self.placeholder)}</div>\n')
        _append("</div>\n")

        if self.help_text:
            _append(f'<div class="wallkit-fileupload__help">{escape(self.help_text)}</div>\n')
        if self.error:
            _append(f'<div class="wallkit-fileupload__error">{escape(self.error)}</div>\n')

        _append("</div>")
        return Markup("".join(buf))
