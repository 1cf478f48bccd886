"""Demo-page components used to build the WallKit showcase site."""

from wallkit.demo.component_card import DemoComponentCard
from wallkit.demo.component_grid import ComponentGroup, DemoComponentGrid, GridItem
from wallkit.demo.form_example import DemoFormExample, FormAction
from wallkit.demo.header import DemoHeader
from wallkit.demo.layout import DemoLayout
from wallkit.demo.section import DemoSection
from wallkit.demo.sidebar import DemoSidebar, InfoCard, NavItem
from wallkit.demo.stats import DemoStats

__all__ = [
    "ComponentGroup",
    "DemoComponentCard",
    "DemoComponentGrid",
    "DemoFormExample",
    "DemoHeader",
    "DemoLayout",
    "DemoSection",
    "DemoSidebar",
    "DemoStats",
    "FormAction",
    "GridItem",
    "InfoCard",
    "NavItem",
]
