"""Page from data -- build components by tag from plain JSON.

The component registry maps tags such as ``"demo-header"`` to component
classes, so a page described as data (from a CMS, a config file, an API)
renders without importing any component class. Props are validated exactly
as if the classes were called directly.

Run:
    python app.py
"""

import json

from wallkit import ComponentTypeError, render_tag

PAGE = json.loads(
    """
    [
        {"tag": "demo-header", "props": {"title": "Catalogue", "subtitle": "All components"}},
        {"tag": "demo-component-grid", "props": {
            "components": [
                {"name": "Button", "description": "Clickable", "icon": "🔘",
                 "group": "Forms", "tags": ["form", "action"], "demo_file": "button.php"},
                {"name": "Select", "description": "Pick one", "icon": "🔽",
                 "group": "Forms", "tags": ["form"], "status": "planned"},
                {"name": "Grid", "description": "Columns", "icon": "▦",
                 "group": "Layout", "tags": ["layout"]}
            ],
            "groups": [{"name": "Forms", "icon": "📝", "description": "Inputs and buttons"}]
        }},
        {"tag": "tag-cloud", "props": {"tags": {"form": 2, "layout": 1}, "active_tag": "form"}},
        {"tag": "markdown", "props": {"content": "Statuses: **stable**, *planned*.", "breaks": true}},
        {"tag": "button", "props": {"text": "Open catalogue", "href": "/catalogue", "variant": "link"}}
    ]
    """
)

output = "\n".join(render_tag(block["tag"], **block["props"]) for block in PAGE)

try:
    render_tag("demo-stats", total_components="12", stable_components=9, planned_components=3, demo_pages=4)
except ComponentTypeError as exc:
    error = exc.format_compact()


def main() -> None:
    print(output)
    print(error)


if __name__ == "__main__":
    main()
