"""Demo page -- a full showcase page composed from WallKit components.

Components nest through their raw-HTML props: cards go into sections,
sections and the sidebar go into the layout. Every text prop is escaped,
every nested component is inserted as-is.

Run:
    python app.py
"""

from markupsafe import Markup

from wallkit import (
    Button,
    Code,
    DemoComponentCard,
    DemoFormExample,
    DemoHeader,
    DemoLayout,
    DemoSection,
    DemoSidebar,
    DemoStats,
    Form,
    FormField,
    Input,
    Markdown,
)

header = DemoHeader(title="WallKit", subtitle="Components for <every> page", icon="🧱")

stats = DemoStats(total_components=12, stable_components=9, planned_components=3, demo_pages=4)

code_card = DemoComponentCard(
    title="Code",
    component=Code(content="print('hello')", language="python", copy_button=True, show_language=True),
    description="Source blocks with a copy button",
    badge_text="stable",
    badge_type="success",
    note="Pass highlight=True to colorize the source",
)

markdown_card = DemoComponentCard(
    title="Markdown",
    component=Markdown(content="Write **docs** in Markdown.\n\n```python\nprint('hi')\n```"),
    description="Fenced blocks become Code components",
    badge_text="new",
    code="Markdown(content=readme)",
)

form_card = DemoFormExample(
    title="Sign in",
    description="A plain form with two actions",
    form_html=Form(
        fields=[
            FormField(input=Input(name="login", required=True), label="Login"),
            FormField(input=Input(name="password", type="password"), label="Password"),
            Button(text="Sign in", type="submit"),
        ],
        action="/login",
        csrf_token="demo-token",
    ),
    actions=[
        {"text": "Sign in", "icon": "🔑"},
        {"text": "Cancel", "variant": "secondary"},
    ],
    notes={"tip": "Enter submits the form", "warning": "Passwords are case-sensitive"},
)

sections = [
    DemoSection(
        id="content",
        title="Content",
        description="Blocks for text and code",
        icon="📄",
        component_cards=[code_card, markdown_card],
    ),
    DemoSection(
        id="forms",
        title="Forms",
        description="Inputs and actions",
        icon="📝",
        component_cards=[form_card],
        extra_content=stats,
    ),
]

sidebar = DemoSidebar(
    nav_items=[
        {"title": section.title, "href": f"#{section.id}", "icon": section.icon, "active": i == 0}
        for i, section in enumerate(sections)
    ],
    info_cards=[{"icon": "ℹ️", "title": "About", "content": "Every block on this page is a component."}],
)

layout = DemoLayout(
    sidebar=sidebar,
    content=Markup("\n").join([header.__html__(), *(s.__html__() for s in sections)]),
)

output = str(layout)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
