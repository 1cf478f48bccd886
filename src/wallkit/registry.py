"""Component registry: tag-based dispatch to component classes.

Components declared with a class keyword, ``class DemoHeader(Component,
tag="demo-header")``, are registered in ``default_registry``. Callers
holding plain data (a page description loaded from JSON, for instance) can
build components by tag:

    >>> from wallkit.registry import render_tag
    >>> render_tag("demo-header", title="WallKit", subtitle="Components")
    Markup('<header class="wallkit-demo-header">...')

Importing ``wallkit`` registers every built-in component.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from markupsafe import Markup

from wallkit.exceptions import ComponentValueError, UnknownComponentError

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """Dict-like mapping of tag -> component class.

    Supports:
        - registry.register("tag", Cls)
        - registry["tag"]
        - "tag" in registry

    Mutations use copy-on-write, so concurrent readers never observe a
    dict being resized.
    """

    __slots__ = ("_components",)

    def __init__(self) -> None:
        self._components: dict[str, type] = {}

    def register(self, tag: str, cls: type) -> None:
        """Register a component class under a tag.

        Raises:
            ComponentValueError: If the tag is empty or already taken by
                a different class.
        """
        if not tag:
            raise ComponentValueError("Component tag must be a non-empty string")
        existing = self._components.get(tag)
        if existing is not None and existing is not cls:
            raise ComponentValueError(
                f"Tag {tag!r} is already registered to {existing.__qualname__}"
            )
        new = self._components.copy()
        new[tag] = cls
        self._components = new
        logger.debug("Registered component %s as %r", cls.__qualname__, tag)

    def get(self, tag: str) -> type:
        """Look up a component class.

        Raises:
            UnknownComponentError: If nothing is registered under tag.
        """
        try:
            return self._components[tag]
        except KeyError:
            raise UnknownComponentError(tag, frozenset(self._components)) from None

    def build(self, tag: str, /, **props: Any) -> Any:
        """Construct the component registered under tag."""
        return self.get(tag)(**props)

    def render(self, tag: str, /, **props: Any) -> Markup:
        """Construct and render the component registered under tag."""
        return self.build(tag, **props).render()

    def __getitem__(self, tag: str) -> type:
        return self.get(tag)

    def __contains__(self, tag: object) -> bool:
        return tag in self._components

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def tags(self) -> list[str]:
        """Registered tags in registration order."""
        return list(self._components)


default_registry = ComponentRegistry()


def build(tag: str, /, **props: Any) -> Any:
    """Construct a component from the default registry."""
    return default_registry.build(tag, **props)


def render_tag(tag: str, /, **props: Any) -> Markup:
    """Construct and render a component from the default registry."""
    return default_registry.render(tag, **props)
