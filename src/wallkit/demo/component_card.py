"""Demo card: a live component preview, its description, and the code behind it.

The preview accepts trusted HTML or component instances. When no explicit
``code`` is given, the card prints the constructor call for each previewed
component (see ``wallkit.introspection``) in a line-numbered Code block.
"""

from __future__ import annotations

from markupsafe import Markup

from wallkit.component import Component, HTMLSources, Record
from wallkit.content.code import Code
from wallkit.introspection import constructor_source
from wallkit.utils.html import class_list, escape, join_html


class DemoComponentCard(Component, tag="demo-component-card"):
    """Showcase card for one component (or a small group of them).

    Attributes:
        title: Card heading
        component: Component(s) or trusted HTML to preview
        description: Text under the preview
        badge_text: Badge label (e.g. "stable", "new")
        badge_type: Badge modifier; free-form, becomes ``--{badge_type}``
        note: Optional tip rendered under the description
        code: Source shown under the card; derived from ``component`` if None
    """

    title: str
    component: HTMLSources
    description: str
    badge_text: str
    badge_type: str = "default"
    note: str | None = None
    code: str | None = None

    def badge_classes(self) -> list[str]:
        return [
            "wallkit-demo-component-card__badge",
            f"wallkit-demo-component-card__badge--{self.badge_type}",
        ]

    def component_html(self) -> Markup:
        return join_html(self.component)

    def source_code(self) -> str:
        if self.code is not None:
            return self.code
        sources = [
            constructor_source(item)
            for item in self.component
            if isinstance(item, Record)
        ]
        return "\n\n".join(sources)

    def render(self) -> Markup:
        buf: list[str] = []
        _append = buf.append

        _append('<div class="wallkit-demo-component-card">\n')
        _append('<div class="wallkit-demo-component-card__header">\n')
        _append(f'<h3 class="wallkit-demo-component-card__title">{escape(self.title)}</h3>\n')
        if self.badge_text:
            _append(
                f'<span class="{escape(class_list(self.badge_classes()))}">'
                f"{escape(self.badge_text)}</span>\n"
            )
        _append("</div>\n")

        _append(f'<div class="wallkit-demo-component-card__preview">\n{self.component_html()}\n</div>\n')

        if self.description:
            _append(f'<p class="wallkit-demo-component-card__description">{escape(self.description)}</p>\n')
        if self.note:
            _append(f'<div class="wallkit-demo-component-card__note">💡 {escape(self.note)}</div>\n')

        source = self.source_code()
        if source.strip():
            _append(f"{Code(content=source, language='python', line_numbers=True)}\n")

        _append("</div>")
        return Markup("".join(buf))
