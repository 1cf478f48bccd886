"""Project statistics panel.

Shows four counters and a completion bar. The counters carry
``data-count`` so a browser script can animate them from zero; the markup
already holds the final values, so the panel reads correctly without it.
"""

from __future__ import annotations

import math

from markupsafe import Markup

from wallkit.component import Component
from wallkit.config import get_config
from wallkit.utils.html import escape


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class DemoStats(Component, tag="demo-stats"):
    total_components: int
    stable_components: int
    planned_components: int
    demo_pages: int
    latest_version: str = "1.0.0"

    def progress(self) -> float:
        """Percentage of stable components; 0.0 when there are none at all."""
        if self.total_components == 0:
            return 0.0
        return self.stable_components / self.total_components * 100

    def progress_percent(self) -> int:
        return round_half_up(self.progress())

    def items(self) -> list[tuple[str, int, str]]:
        """(modifier, value, label) for each counter, in display order."""
        labels = get_config().labels
        return [
            ("total", self.total_components, labels.stats_total),
            ("stable", self.stable_components, labels.stats_stable),
            ("planned", self.planned_components, labels.stats_planned),
            ("demos", self.demo_pages, labels.stats_demos),
        ]

    def render(self) -> Markup:
        labels = get_config().labels
        buf: list[str] = []
        _append = buf.append

        _append('<div class="wallkit-demo-stats">\n')
        _append('<div class="wallkit-demo-stats__header">\n')
        _append(f'<h3 class="wallkit-demo-stats__title">{escape(labels.stats_title)}</h3>\n')
        _append(f'<div class="wallkit-demo-stats__version">v{escape(self.latest_version)}</div>\n')
        _append("</div>\n")

        _append('<div class="wallkit-demo-stats__progress">\n')
        _append('<div class="wallkit-demo-stats__progress-bar">')
        _append(f'<div class="wallkit-demo-stats__progress-fill" style="width: {self.progress():g}%"></div>')
        _append("</div>\n")
        _append('<div class="wallkit-demo-stats__progress-text">')
        _append(f'<span class="wallkit-demo-stats__progress-percent">{self.progress_percent()}%</span> ')
        _append(
            f"{escape(labels.stats_ready)} "
            f"({self.stable_components}/{self.total_components} {escape(labels.stats_components)})"
        )
        _append("</div>\n</div>\n")

        _append('<div class="wallkit-demo-stats__grid">\n')
        for modifier, value, label in self.items():
            _append(f'<div class="wallkit-demo-stats__item wallkit-demo-stats__item--{modifier}">\n')
            _append(f'<div class="wallkit-demo-stats__item-value" data-count="{value}">{value}</div>\n')
            _append(f'<div class="wallkit-demo-stats__item-label">{escape(label)}</div>\n')
            _append("</div>\n")
        _append("</div>\n")

        _append("</div>")
        return Markup("".join(buf))
