"""JSON reporter: Selector → JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from selectorkit.domain.model.category import Category

if TYPE_CHECKING:
    from selectorkit.domain.model.selector_parts import SelectorParts
    from selectorkit.presentation.api.builder import Selector


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Schema mirrors SelectorParts, keyed by category label.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, selector: Selector) -> str:
        """Format selector as JSON string.

        Args:
            selector: Selector to describe (not consumed).

        Returns:
            JSON string with rendered selector and fragments.
        """
        return json.dumps(_parts_to_dict(selector.parts), indent=self._indent)


def _parts_to_dict(parts: SelectorParts) -> dict[str, object]:
    """Convert SelectorParts to dict."""
    return {
        "selector": parts.render(),
        "combined": parts.combined is not None,
        "last_rank": parts.last_rank,
        "fragments": {c.label: list(parts.fragments(c)) for c in Category},
    }
