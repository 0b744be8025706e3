"""selectorkit - fluent CSS selector builder with ordering validation."""

__version__ = "0.1.0"

from selectorkit.application.serialization import from_json, to_json
from selectorkit.domain.exceptions import (
    DuplicateCategoryError,
    OrderViolationError,
    SelectorBuildError,
    SelectorKitError,
    SerializationError,
)
from selectorkit.domain.model.category import Category
from selectorkit.domain.model.combinator import Combinator
from selectorkit.domain.model.rectangle import Rectangle
from selectorkit.presentation.api.builder import Selector, create_builder, css_selector_builder

__all__ = [
    "Category",
    "Combinator",
    "DuplicateCategoryError",
    "OrderViolationError",
    "Rectangle",
    "Selector",
    "SelectorBuildError",
    "SelectorKitError",
    "SerializationError",
    "__version__",
    "create_builder",
    "css_selector_builder",
    "from_json",
    "to_json",
]
