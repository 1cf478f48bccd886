"""Two-column demo layout with a sidebar slot and a content slot.

Both slots take trusted HTML (usually other rendered components). The
sidebar width goes straight into ``grid-template-columns``, so it must be a
CSS length such as ``"280px"`` or ``"20rem"``.
"""

from __future__ import annotations

from markupsafe import Markup

from wallkit.component import Component, TrustedHTML
from wallkit.utils.html import escape


class DemoLayout(Component, tag="demo-layout"):
    sidebar: TrustedHTML
    content: TrustedHTML
    sidebar_left: bool = True
    sidebar_width: str = "280px"

    def grid_template(self) -> str:
        """CSS grid template: the sidebar column first when it sits on the left."""
        if self.sidebar_left:
            return f"{self.sidebar_width} 1fr"
        return f"1fr {self.sidebar_width}"

    def render(self) -> Markup:
        sidebar = f'<div class="wallkit-demo-layout__sidebar">\n{self.sidebar}\n</div>\n'
        content = f'<div class="wallkit-demo-layout__content">\n{self.content}\n</div>\n'
        columns = sidebar + content if self.sidebar_left else content + sidebar
        return Markup(
            '<div class="wallkit-demo-layout" '
            f'style="grid-template-columns: {escape(self.grid_template())};">\n'
            f"{columns}</div>"
        )
