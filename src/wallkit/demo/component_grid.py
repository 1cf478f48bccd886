"""Component catalogue grid, grouped by category, with a tag cloud.

Each entry links to its demo page. Groups carry presentation metadata
(icon, accent color, description); entries whose group has no metadata
fall back to a default icon and the theme accent color.
"""

from __future__ import annotations

from collections import Counter

from markupsafe import Markup

from wallkit.component import Component, Record, RecordList, TextList
from wallkit.config import get_config
from wallkit.content.tag_cloud import tag_size
from wallkit.utils.constants import DEFAULT_GROUP_COLOR, DEFAULT_GROUP_ICON
from wallkit.utils.html import attr, class_list, escape


class GridItem(Record):
    """One catalogue entry. ``status`` and ``badge`` are free-form modifiers."""

    name: str
    description: str
    icon: str
    group: str
    status: str = "stable"
    badge: str = "new"
    demo_file: str = ""
    tags: TextList = ()
    since: str | None = None


class ComponentGroup(Record):
    name: str
    icon: str = DEFAULT_GROUP_ICON
    color: str = DEFAULT_GROUP_COLOR
    description: str | None = None
    title: str | None = None


class DemoComponentGrid(Component, tag="demo-component-grid"):
    """Catalogue of components.

    Attributes:
        components: Entries, in display order
        groups: Presentation metadata for groups, matched by name
        show_groups: Group entries under group headings; flat list otherwise
        show_status: Show the status label on grouped entries
        show_tag_cloud: Render the tag cloud under the grid
        examples_url: URL prefix for entry links
    """

    components: RecordList[GridItem] = ()
    groups: RecordList[ComponentGroup] = ()
    show_groups: bool = True
    show_status: bool = True
    show_tag_cloud: bool = True
    examples_url: str = "/examples/"

    def components_by_group(self) -> dict[str, list[GridItem]]:
        """Entries keyed by group, groups in first-appearance order."""
        grouped: dict[str, list[GridItem]] = {}
        for item in self.components:
            grouped.setdefault(item.group, []).append(item)
        return grouped

    def _group(self, name: str) -> ComponentGroup | None:
        for group in self.groups:
            if group.name == name:
                return group
        return None

    def group_icon(self, name: str) -> str:
        group = self._group(name)
        return group.icon if group else DEFAULT_GROUP_ICON

    def group_color(self, name: str) -> str:
        group = self._group(name)
        return group.color if group else DEFAULT_GROUP_COLOR

    def group_description(self, name: str) -> str | None:
        group = self._group(name)
        return group.description if group else None

    def group_title(self, name: str) -> str:
        group = self._group(name)
        return group.title if group and group.title else name

    def status_classes(self, status: str) -> list[str]:
        return [
            "wallkit-demo-component-grid__item-status",
            f"wallkit-demo-component-grid__item-status--{status}",
        ]

    def badge_classes(self, badge: str) -> list[str]:
        return [
            "wallkit-demo-component-grid__item-badge",
            f"wallkit-demo-component-grid__item-badge--{badge}",
        ]

    def all_tags(self) -> dict[str, int]:
        """Tag -> number of entries carrying it, most frequent first."""
        counts = Counter(tag for item in self.components for tag in item.tags)
        return dict(counts.most_common())

    def tag_size_class(self, count: int) -> str:
        return f"wallkit-demo-component-grid__tag--{tag_size(count)}"

    def item_href(self, item: GridItem) -> str:
        return f"{self.examples_url}{item.demo_file}"

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _render_grouped(self, buf: list[str]) -> None:
        _append = buf.append
        for group_name, items in self.components_by_group().items():
            color = escape(self.group_color(group_name))
            _append(
                f'<div class="wallkit-demo-component-grid__group" '
                f'data-group="{escape(group_name.lower())}" style="border-left-color: {color};">\n'
            )
            _append('<h3 class="wallkit-demo-component-grid__group-title">')
            _append(
                f'<span class="wallkit-demo-component-grid__group-icon" style="background: {color}20;">'
                f"{escape(self.group_icon(group_name))}</span> "
            )
            _append(escape(self.group_title(group_name)))
            _append(f' <span class="wallkit-demo-component-grid__group-count">{len(items)}</span>')
            _append("</h3>\n")

            description = self.group_description(group_name)
            if description:
                _append(f'<p class="wallkit-demo-component-grid__group-description">{escape(description)}</p>\n')

            _append('<div class="wallkit-demo-component-grid__items">\n')
            for item in items:
                self._render_grouped_item(buf, item, color)
            _append("</div>\n</div>\n")

    def _render_grouped_item(self, buf: list[str], item: GridItem, color: Markup) -> None:
        _append = buf.append
        link_attrs = attr(
            {
                "href": self.item_href(item),
                "class": "wallkit-demo-component-grid__item",
                "data-status": item.status,
                "data-badge": item.badge,
                "data-tags": ", ".join(item.tags),
                "aria-disabled": "true" if item.status == "planned" else None,
            }
        )
        _append(f"<a {link_attrs}>\n")
        _append('<div class="wallkit-demo-component-grid__item-header">\n')
        _append(
            f'<div class="wallkit-demo-component-grid__item-icon" style="background: {color}10;">'
            f"{escape(item.icon)}</div>\n"
        )
        _append('<div class="wallkit-demo-component-grid__item-info">\n')
        _append(f'<h4 class="wallkit-demo-component-grid__item-name">{escape(item.name)}</h4>\n')
        if self.show_status:
            _append(f'<span class="{escape(class_list(self.status_classes(item.status)))}">{escape(item.status)}</span>\n')
        _append("</div>\n</div>\n")
        _append(f'<p class="wallkit-demo-component-grid__item-description">{escape(item.description)}</p>\n')

        _append('<div class="wallkit-demo-component-grid__item-footer">\n')
        if item.tags:
            _append('<div class="wallkit-demo-component-grid__item-tags">')
            for tag in item.tags:
                _append(f'<span class="wallkit-demo-component-grid__item-tag">{escape(tag)}</span>')
            _append("</div>\n")
        if item.since:
            _append(f'<span class="wallkit-demo-component-grid__item-version">v{escape(item.since)}</span>\n')
        _append("</div>\n</a>\n")

    def _render_flat(self, buf: list[str]) -> None:
        _append = buf.append
        _append('<div class="wallkit-demo-component-grid__items">\n')
        for item in self.components:
            _append(f'<a href="{escape(self.item_href(item))}" class="wallkit-demo-component-grid__item">\n')
            _append('<div class="wallkit-demo-component-grid__item-header">\n')
            _append(f'<div class="wallkit-demo-component-grid__item-icon">{escape(item.icon)}</div>\n')
            _append('<div class="wallkit-demo-component-grid__item-info">')
            _append(f'<h4 class="wallkit-demo-component-grid__item-name">{escape(item.name)}</h4>')
            _append("</div>\n</div>\n")
            _append(f'<p class="wallkit-demo-component-grid__item-description">{escape(item.description)}</p>\n')
            _append('<div class="wallkit-demo-component-grid__item-footer">')
            _append(f'<span class="wallkit-demo-component-grid__item-group">{escape(item.group)}</span>')
            _append("</div>\n</a>\n")
        _append("</div>\n")

    def _render_tag_cloud(self, buf: list[str]) -> None:
        tags = self.all_tags()
        if not tags:
            return
        _append = buf.append
        _append('<div class="wallkit-demo-component-grid__tags-cloud">\n')
        _append(
            f'<h4 class="wallkit-demo-component-grid__tags-title">'
            f"{escape(get_config().labels.tag_cloud_title)}</h4>\n"
        )
        _append('<div class="wallkit-demo-component-grid__tags-list">\n')
        for tag, count in tags.items():
            classes = class_list(["wallkit-demo-component-grid__tag", self.tag_size_class(count)])
            _append(f'<a {attr({"href": "#", "class": classes, "data-count": count, "data-tag": tag})}>')
            _append(escape(tag))
            if count > 1:
                _append(f' <span class="wallkit-demo-component-grid__tag-count">{count}</span>')
            _append("</a>\n")
        _append("</div>\n</div>\n")

    def render(self) -> Markup:
        buf: list[str] = ['<div class="wallkit-demo-component-grid">\n']
        if self.show_groups:
            self._render_grouped(buf)
        else:
            self._render_flat(buf)
        if self.show_tag_cloud:
            self._render_tag_cloud(buf)
        buf.append("</div>")
        return Markup("".join(buf))
