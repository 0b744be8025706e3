"""pytest fixtures for selector tests.

User overrides console_config in their conftest.py.
"""

from __future__ import annotations

import pytest

from selectorkit.application.reporters.console import ConsoleConfig, ConsoleReporter
from selectorkit.presentation.api.builder import Selector, create_builder


@pytest.fixture
def selector_builder() -> Selector:
    """Fresh origin selector, isolated from the shared css_selector_builder."""
    return create_builder()


@pytest.fixture
def console_config() -> ConsoleConfig:
    """Console reporter configuration.

    Override in conftest.py to customize reporting.
    """
    return ConsoleConfig()


@pytest.fixture
def console_reporter(console_config: ConsoleConfig) -> ConsoleReporter:
    """ConsoleReporter using console_config."""
    return ConsoleReporter(console_config)
