"""Domain model entities."""

from selectorkit.domain.model.category import Category
from selectorkit.domain.model.combinator import Combinator
from selectorkit.domain.model.rectangle import Rectangle
from selectorkit.domain.model.selector_parts import EMPTY, SelectorParts, with_fragment

__all__ = [
    "EMPTY",
    "Category",
    "Combinator",
    "Rectangle",
    "SelectorParts",
    "with_fragment",
]
