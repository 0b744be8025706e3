"""Reporters for selectors.

ConsoleReporter renders with rich, JsonReporter uses stdlib json.
Users can implement custom reporters via ReporterProtocol.
"""

from selectorkit.application.reporters.console import ConsoleConfig, ConsoleReporter
from selectorkit.application.reporters.json import JsonReporter
from selectorkit.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "ReporterProtocol",
]
