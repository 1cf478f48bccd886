"""Shared pytest configuration for WallKit examples.

``example_app`` executes the ``app.py`` next to the requesting test in a
fresh module namespace, so every test sees a freshly built page. The app
runs under the default configuration (Russian labels, Pygments) whatever
the surrounding test configured, and it must leave the component registry
as it found it: re-executing an app that registered its own tags would
fail on the second run.

Every app publishes its rendered page as a module-level ``output`` string;
the ``output`` fixture hands it to tests directly.
"""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

from wallkit import Labels, configure, default_registry


def load_app(app_path: Path) -> ModuleType:
    """Execute ``app_path`` as a new module and return it."""
    spec = importlib.util.spec_from_file_location(f"wallkit_example_{app_path.parent.name}", app_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load example app from {app_path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> ModuleType:
    """The sibling app.py, freshly executed under the default configuration."""
    app_path = Path(request.path).parent / "app.py"
    tags_before = default_registry.tags()
    with configure(labels=Labels(), highlighter=None):
        module = load_app(app_path)
    assert default_registry.tags() == tags_before, f"{app_path} registered new component tags"
    assert isinstance(getattr(module, "output", None), str), f"{app_path} must define an output string"
    return module


@pytest.fixture
def output(example_app: ModuleType) -> str:
    """The page the example app rendered."""
    return example_app.output
