"""Root conftest: enable the selectorkit pytest plugin for the test suite."""

pytest_plugins = ["selectorkit.presentation.pytest_plugin"]
