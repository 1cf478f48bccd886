"""Tests for context-scoped configuration."""

from __future__ import annotations

import asyncio

from wallkit import Code, Labels, configure, get_config
from wallkit.highlight import PygmentsHighlighter


class TestConfigure:
    def test_defaults(self) -> None:
        config = get_config()
        assert config.labels == Labels()
        assert config.highlighter is None
        assert isinstance(config.resolve_highlighter(), PygmentsHighlighter)

    def test_default_highlighter_is_shared(self) -> None:
        assert get_config().resolve_highlighter() is get_config().resolve_highlighter()

    def test_override_is_scoped(self) -> None:
        with configure(labels=Labels(copy="Copy")) as config:
            assert get_config() is config
            assert get_config().labels.copy == "Copy"
        assert get_config().labels.copy == "Копировать"

    def test_nested_overrides_stack(self, uppercase_highlighter) -> None:
        with configure(labels=Labels(copy="Copy")):
            with configure(highlighter=uppercase_highlighter):
                assert get_config().labels.copy == "Copy"
                assert get_config().highlighter is uppercase_highlighter
            assert get_config().highlighter is None

    def test_restored_after_error(self) -> None:
        try:
            with configure(labels=Labels(copy="Copy")):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert get_config().labels.copy == "Копировать"

    def test_labels_read_at_render(self) -> None:
        code = Code(content="x", copy_button=True)
        with configure(labels=Labels(copy="Copy")):
            assert ">Copy</button>" in str(code)
        assert ">Копировать</button>" in str(code)

    def test_tasks_are_isolated(self) -> None:
        async def label_in_task(text: str) -> str:
            with configure(labels=Labels(copy=text)):
                await asyncio.sleep(0)
                return get_config().labels.copy

        async def main() -> list[str]:
            return await asyncio.gather(label_in_task("one"), label_in_task("two"))

        assert asyncio.run(main()) == ["one", "two"]
