"""Fluent API for building CSS selectors.

Public exports:
    Selector: Chainable selector handle
    create_builder: Factory for an empty origin selector
    css_selector_builder: Shared origin selector
"""

from selectorkit.presentation.api.builder import (
    Selector,
    create_builder,
    css_selector_builder,
)

__all__ = [
    "Selector",
    "create_builder",
    "css_selector_builder",
]
