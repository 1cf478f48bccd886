"""Demo sidebar: section navigation plus informational cards.

Navigation links carry ``data-section`` (the href without ``#``) so a
browser script can highlight the section currently in view.
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup
from pydantic import Field, field_validator

from wallkit.component import Component, Record, RecordList
from wallkit.config import get_config
from wallkit.utils.html import attr, class_list, escape


class NavItem(Record):
    title: str
    href: str
    icon: str = ""
    active: bool = False


class InfoCard(Record):
    icon: str
    title: str
    content: str


class DemoSidebar(Component, tag="demo-sidebar"):
    """Sticky sidebar.

    Attributes:
        nav_items: Navigation links, in order
        info_cards: Cards rendered under the navigation
        title: Heading; None uses the configured label, "" hides it
    """

    nav_items: RecordList[NavItem] = ()
    info_cards: RecordList[InfoCard] = ()
    title: str | None = Field(default=None, validate_default=True)

    @field_validator("title")
    @classmethod
    def _default_title(cls, title: str | None) -> str:
        return get_config().labels.sidebar_title if title is None else title

    def nav_item_attributes(self, index: int) -> dict[str, Any]:
        """Classes and link attributes for the nav item at ``index``."""
        item = self.nav_items[index]
        classes = ["wallkit-demo-sidebar__nav-item"]
        if item.active:
            classes.append("wallkit-demo-sidebar__nav-item--active")
        return {
            "classes": classes,
            "attrs": {"href": item.href, "data-section": item.href.replace("#", "")},
        }

    def render(self) -> Markup:
        buf: list[str] = []
        _append = buf.append

        _append('<aside class="wallkit-demo-sidebar">\n<div class="wallkit-demo-sidebar__sticky">\n')
        if self.title:
            _append(f'<h3 class="wallkit-demo-sidebar__title">{escape(self.title)}</h3>\n')

        if self.nav_items:
            _append('<nav class="wallkit-demo-sidebar__nav">\n<ul class="wallkit-demo-sidebar__nav-list">\n')
            for index, item in enumerate(self.nav_items):
                attributes = self.nav_item_attributes(index)
                _append('<li class="wallkit-demo-sidebar__nav-list-item">')
                _append(
                    f'<a class="{escape(class_list(attributes["classes"]))}" {attr(attributes["attrs"])}>'
                )
                _append(f'<span class="wallkit-demo-sidebar__nav-icon">{escape(item.icon)}</span>')
                _append(f'<span class="wallkit-demo-sidebar__nav-text">{escape(item.title)}</span>')
                _append("</a></li>\n")
            _append("</ul>\n</nav>\n")

        for card in self.info_cards:
            _append('<div class="wallkit-demo-sidebar__info-card">\n')
            _append('<div class="wallkit-demo-sidebar__info-card-header">')
            _append(f'<span class="wallkit-demo-sidebar__info-card-icon">{escape(card.icon)}</span>')
            _append(f'<h4 class="wallkit-demo-sidebar__info-card-title">{escape(card.title)}</h4>')
            _append("</div>\n")
            _append(f'<p class="wallkit-demo-sidebar__info-card-content">{escape(card.content)}</p>\n')
            _append("</div>\n")

        _append("</div>\n</aside>")
        return Markup("".join(buf))
