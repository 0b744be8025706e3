"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from selectorkit.presentation.api.builder import Selector


class ReporterProtocol(Protocol):
    """Protocol for selector reporters.

    Output is str, not print(). Caller decides destination.
    Reporters never consume the selector they describe.
    """

    def report(self, selector: Selector) -> str:
        """Format selector as string.

        Args:
            selector: Selector to describe.

        Returns:
            Formatted string representation.
        """
        ...
