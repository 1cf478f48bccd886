"""WallKit: immutable HTML view components for Python.

Components are frozen pydantic models that validate their props at construction
and render themselves to safe HTML. Any text a component receives is
escaped. Only values that are already trusted (``Markup`` or objects with
``__html__``, such as other components) are inserted as-is.

Quickstart:
    >>> from wallkit import Code, DemoHeader
    >>> str(DemoHeader(title="WallKit", subtitle="<components>"))
    '<header class="wallkit-demo-header">...&lt;components&gt;...'
    >>> print(Code(content="print('hi')", language="python", line_numbers=True))

Nesting:
    Components are ``__html__`` objects, so they slot into each other's
    raw-HTML props without escaping:

    >>> section = DemoSection(
    ...     id="code", title="Code", description="Blocks of source",
    ...     icon="💻", component_cards=[DemoComponentCard(...)],
    ... )

Architecture:
Props → Validate → Prepare → render() → Markup

1. **Validate**: pydantic checks every prop in strict mode; errors become
   ``ComponentTypeError`` or ``ComponentValueError``
2. **Prepare**: component-specific normalization (highlighter lookup, the
   tag cloud's "all" entry)
3. **Render**: StringBuilder into a single ``Markup`` string

Thread-Safety:
Components are immutable and render from local buffers only. The registry
uses copy-on-write, and configuration lives in a ContextVar, so rendering
from many threads or tasks at once is safe.

Free-Threading (PEP 703):
Declares GIL-independence via `_Py_mod_gil = 0` attribute.

"""

from wallkit.component import (
    AttributeMap,
    Component,
    Fragments,
    HTMLSources,
    Record,
    TextList,
    TrustedHTML,
    is_component,
    render,
)
from wallkit.config import Labels, WallKitConfig, configure, get_config
from wallkit.content import Code, Markdown, TagCloud
from wallkit.demo import (
    ComponentGroup,
    DemoComponentCard,
    DemoComponentGrid,
    DemoFormExample,
    DemoHeader,
    DemoLayout,
    DemoSection,
    DemoSidebar,
    DemoStats,
    FormAction,
    GridItem,
    InfoCard,
    NavItem,
)
from wallkit.exceptions import (
    ComponentTypeError,
    ComponentValueError,
    ErrorCode,
    UnknownComponentError,
    UnsupportedLanguageError,
    WallKitError,
)
from wallkit.form import Button, Checkbox, FileUpload, Form, FormField, Input, Select, Textarea
from wallkit.highlight import Highlighter, PygmentsHighlighter
from wallkit.introspection import constructor_source
from wallkit.registry import ComponentRegistry, build, default_registry, render_tag
from wallkit.utils.html import Markup, attr, class_list, escape

__version__ = "1.0.0"

__all__ = [
    "AttributeMap",
    "Button",
    "Checkbox",
    "Code",
    "Component",
    "ComponentGroup",
    "ComponentRegistry",
    "ComponentTypeError",
    "ComponentValueError",
    "DemoComponentCard",
    "DemoComponentGrid",
    "DemoFormExample",
    "DemoHeader",
    "DemoLayout",
    "DemoSection",
    "DemoSidebar",
    "DemoStats",
    "ErrorCode",
    "FileUpload",
    "Form",
    "FormAction",
    "FormField",
    "Fragments",
    "GridItem",
    "HTMLSources",
    "Highlighter",
    "InfoCard",
    "Input",
    "Labels",
    "Markdown",
    "Markup",
    "NavItem",
    "PygmentsHighlighter",
    "Record",
    "Select",
    "TagCloud",
    "Textarea",
    "TextList",
    "TrustedHTML",
    "UnknownComponentError",
    "UnsupportedLanguageError",
    "WallKitConfig",
    "WallKitError",
    "__version__",
    "attr",
    "build",
    "class_list",
    "configure",
    "constructor_source",
    "default_registry",
    "escape",
    "get_config",
    "is_component",
    "render",
    "render_tag",
]


# Free-threading declaration (PEP 703)
def __getattr__(name: str) -> object:
    """Module-level getattr for the free-threading declaration."""
    if name == "_Py_mod_gil":
        # 0 = Py_MOD_GIL_NOT_USED
        return 0
    raise AttributeError(f"module 'wallkit' has no attribute {name!r}")
