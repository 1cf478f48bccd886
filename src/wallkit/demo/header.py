"""Demo page header: title, subtitle and an optional icon."""

from __future__ import annotations

from markupsafe import Markup

from wallkit.component import Component
from wallkit.utils.html import escape


class DemoHeader(Component, tag="demo-header"):
    title: str
    subtitle: str
    icon: str | None = None

    def render(self) -> Markup:
        buf: list[str] = ['<header class="wallkit-demo-header">\n<h1 class="wallkit-demo-header__title">']
        _append = buf.append
        if self.icon:
            _append(f'<span class="wallkit-demo-header__icon">{escape(self.icon)}</span> ')
        _append(f"{escape(self.title)}</h1>\n")
        _append(f'<p class="wallkit-demo-header__subtitle">{escape(self.subtitle)}</p>\n')
        _append("</header>")
        return Markup("".join(buf))
