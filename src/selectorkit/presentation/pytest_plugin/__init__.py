"""pytest plugin for selectorkit.

Provides fixtures for selector tests:
    selector_builder: Fresh empty origin selector
    console_config: Console reporter configuration (override in conftest.py)
    console_reporter: ConsoleReporter built from console_config

Enable with: pytest_plugins = ["selectorkit.presentation.pytest_plugin"]
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from selectorkit.presentation.pytest_plugin.fixtures import (
    console_config,
    console_reporter,
    selector_builder,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "console_config",
    "console_reporter",
    "selector_builder",
]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "selector: mark test as selector building test",
    )
