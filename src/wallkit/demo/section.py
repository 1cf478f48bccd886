"""Demo page section: a titled block holding a grid of component cards."""

from __future__ import annotations

from markupsafe import Markup

from wallkit.component import Component, Fragments, TrustedHTML
from wallkit.utils.html import escape


class DemoSection(Component, tag="demo-section"):
    """A page section.

    Attributes:
        id: Anchor id, used by the sidebar navigation
        title: Section heading
        description: Text under the heading
        icon: Emoji or short text shown beside the heading
        component_cards: Pre-rendered cards (usually DemoComponentCard)
        extra_content: Trusted HTML appended after the card grid
    """

    id: str
    title: str
    description: str
    icon: str
    component_cards: Fragments = ()
    extra_content: TrustedHTML | None = None

    def render(self) -> Markup:
        buf: list[str] = []
        _append = buf.append

        _append(f'<section id="{escape(self.id)}" class="wallkit-demo-section">\n')
        _append('<div class="wallkit-demo-section__header">\n')
        _append(f'<div class="wallkit-demo-section__icon">{escape(self.icon)}</div>\n')
        _append("<div>\n")
        _append(f'<h2 class="wallkit-demo-section__title">{escape(self.title)}</h2>\n')
        _append(f'<p class="wallkit-demo-section__description">{escape(self.description)}</p>\n')
        _append("</div>\n</div>\n")

        if self.component_cards:
            _append('<div class="wallkit-demo-section__grid">\n')
            for card in self.component_cards:
                _append(f"{card}\n")
            _append("</div>\n")

        if self.extra_content:
            _append(f'<div class="wallkit-demo-section__extra">\n{self.extra_content}\n</div>\n')

        _append("</section>")
        return Markup("".join(buf))
