"""WallKit configuration: UI labels and the default highlighter.

Configuration is held in a ContextVar so overrides are scoped to the current
thread or asyncio task, never global mutable state:

    from wallkit.config import Labels, configure

    with configure(labels=Labels(copy="Copy", copied="Copied!")):
        html = str(Code(content="print(1)", copy_button=True))

Components read the active configuration when they render (labels) or when
they are built (highlighter lookup for language validation).

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, replace
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wallkit.highlight import Highlighter


@dataclass(frozen=True, slots=True)
class Labels:
    """Fixed user-visible strings emitted by component templates.

    Defaults are the library's Russian UI strings.
    """

    # Code
    copy: str = "Копировать"
    copied: str = "Скопировано!"

    # DemoStats
    stats_title: str = "📊 Статистика проекта"
    stats_ready: str = "готово"
    stats_components: str = "компонентов"
    stats_total: str = "Всего компонентов"
    stats_stable: str = "Готовых"
    stats_planned: str = "В планах"
    stats_demos: str = "Демо-страниц"

    # TagCloud / DemoComponentGrid
    tag_cloud_all: str = "Все"
    tag_cloud_title: str = "Облако тегов"

    # DemoSidebar
    sidebar_title: str = "Навигация"

    # FormField
    password_toggle: str = "Показать/скрыть пароль"


@dataclass(frozen=True, slots=True)
class WallKitConfig:
    """Active WallKit settings.

    Attributes:
        labels: Strings used by templates for fixed UI text
        highlighter: Highlighter used by Code when none is passed explicitly;
            None selects the Pygments-backed default
    """

    labels: Labels = field(default_factory=Labels)
    highlighter: Highlighter | None = None

    def resolve_highlighter(self) -> Highlighter:
        """Return the configured highlighter, or the shared Pygments default."""
        if self.highlighter is not None:
            return self.highlighter
        return _default_highlighter()


@lru_cache(maxsize=1)
def _default_highlighter() -> Highlighter:
    from wallkit.highlight import PygmentsHighlighter

    return PygmentsHighlighter()


_config: ContextVar[WallKitConfig] = ContextVar("wallkit_config", default=WallKitConfig())


def get_config() -> WallKitConfig:
    """Get the configuration active in the current context."""
    return _config.get()


@contextmanager
def configure(**overrides: object) -> Iterator[WallKitConfig]:
    """Install a modified configuration for the duration of the block.

    Accepts any ``WallKitConfig`` field as a keyword. Nested blocks stack;
    the previous configuration is restored on exit, even on error.

    Example:
        >>> with configure(labels=Labels(copy="Copy")) as cfg:
        ...     cfg.labels.copy
        'Copy'
    """
    new = replace(_config.get(), **overrides)
    token = _config.set(new)
    try:
        yield new
    finally:
        _config.reset(token)
