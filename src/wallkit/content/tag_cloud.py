"""Tag cloud component.

Renders a weighted list of tags, sized by how often each occurs. An "all"
pseudo-tag whose count is the sum of every other tag can be prepended, and
it becomes the active tag when no other tag is selected.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from markupsafe import Markup
from pydantic import Field, PrivateAttr

from wallkit.component import Component, ReadOnlyMap, empty_map
from wallkit.config import get_config
from wallkit.utils.constants import TAG_SIZE_FALLBACK, TAG_SIZE_STEPS
from wallkit.utils.html import attr, class_list, escape


def tag_size(count: int) -> str:
    """Size suffix for a tag occurring ``count`` times (sm, md, lg, xl)."""
    for threshold, size in TAG_SIZE_STEPS:
        if count > threshold:
            return size
    return TAG_SIZE_FALLBACK


class TagCloud(Component, tag="tag-cloud"):
    """Weighted tag list.

    Attributes:
        tags: Tag -> occurrence count, rendered in insertion order
        active_tag: Currently selected tag
        show_count: Render the count next to each tag
        include_all_tag: Prepend the "all" pseudo-tag when tags exist
        all_tag_text: Label of the "all" tag (configured label by default)
        title: Heading; None uses the configured label, "" hides it
        empty_message: Text shown when there are no tags
        clickable: Render tags as links instead of plain spans
        size: Component size modifier (sm, md, lg)
        variant: Display variant modifier (cloud, list, ...)
    """

    tags: ReadOnlyMap[str, int] = Field(default_factory=empty_map)
    active_tag: str | None = None
    show_count: bool = True
    include_all_tag: bool = True
    all_tag_text: str | None = None
    title: str | None = None
    empty_message: str | None = None
    clickable: bool = True
    size: str = "md"
    variant: str = "cloud"

    _all_prepended: bool = PrivateAttr(default=False)

    def model_post_init(self, context: Any, /) -> None:
        labels = get_config().labels
        if self.all_tag_text is None:
            object.__setattr__(self, "all_tag_text", labels.tag_cloud_all)
        if self.title is None:
            object.__setattr__(self, "title", labels.tag_cloud_title)

        if not self.include_all_tag or not self.tags:
            return
        if self.all_tag_text not in self.tags:
            merged = {self.all_tag_text: sum(self.tags.values()), **self.tags}
            object.__setattr__(self, "tags", MappingProxyType(merged))
            self._all_prepended = True
        if self.active_tag is None:
            object.__setattr__(self, "active_tag", self.all_tag_text)

    def tag_size_class(self, count: int) -> str:
        return f"wallkit-tag-cloud__tag--{tag_size(count)}"

    def is_tag_active(self, tag: str) -> bool:
        return self.active_tag == tag

    def tag_classes(self, tag: str, count: int) -> list[str]:
        classes = ["wallkit-tag-cloud__tag", self.tag_size_class(count)]
        if self.is_tag_active(tag):
            classes.append("wallkit-tag-cloud__tag--active")
        if tag == self.all_tag_text:
            classes.append("wallkit-tag-cloud__tag--all")
        if self.clickable:
            classes.append("wallkit-tag-cloud__tag--clickable")
        classes.append(f"wallkit-tag-cloud__tag--{self.variant}")
        classes.append(f"wallkit-tag-cloud__tag--size-{self.size}")
        return classes

    def container_classes(self) -> list[str]:
        classes = [
            "wallkit-tag-cloud",
            f"wallkit-tag-cloud--{self.variant}",
            f"wallkit-tag-cloud--size-{self.size}",
        ]
        if self.clickable:
            classes.append("wallkit-tag-cloud--clickable")
        return classes

    def has_tags(self) -> bool:
        return bool(self.tags)

    def tags_count(self) -> int:
        """Number of real tags, not counting the "all" pseudo-tag."""
        if self._all_prepended:
            return len(self.tags) - 1
        return len(self.tags)

    def render(self) -> Markup:
        buf: list[str] = []
        _append = buf.append

        _append(f'<div class="{escape(class_list(self.container_classes()))}">\n')
        if self.title:
            _append(f'<h4 class="wallkit-tag-cloud__title">{escape(self.title)}</h4>\n')

        if self.has_tags():
            _append('<div class="wallkit-tag-cloud__list">\n')
            element = "a" if self.clickable else "span"
            for tag, count in self.tags.items():
                attrs = attr(
                    {
                        "href": "#" if self.clickable else None,
                        "class": class_list(self.tag_classes(tag, count)),
                        "data-tag": tag,
                        "data-count": count,
                        "aria-current": "true" if self.is_tag_active(tag) else None,
                    }
                )
                _append(f"<{element} {attrs}>{escape(tag)}")
                if self.show_count:
                    _append(f'<span class="wallkit-tag-cloud__count">{count}</span>')
                _append(f"</{element}>\n")
            _append("</div>\n")
        elif self.empty_message:
            _append(f'<p class="wallkit-tag-cloud__empty">{escape(self.empty_message)}</p>\n')

        _append("</div>")
        return Markup("".join(buf))
