"""selectorkit domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum
"""

from selectorkit.domain.exceptions import (
    DuplicateCategoryError,
    OrderViolationError,
    SelectorBuildError,
    SelectorKitError,
    SerializationError,
)
from selectorkit.domain.model import (
    EMPTY,
    Category,
    Combinator,
    Rectangle,
    SelectorParts,
    with_fragment,
)

__all__ = [
    "EMPTY",
    "Category",
    "Combinator",
    "DuplicateCategoryError",
    "OrderViolationError",
    "Rectangle",
    "SelectorBuildError",
    "SelectorKitError",
    "SelectorParts",
    "SerializationError",
    "with_fragment",
]
