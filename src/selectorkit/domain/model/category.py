"""Selector fragment categories."""

from enum import Enum


class Category(Enum):
    """Fragment category of a compound selector.

    Value is the category rank: fragments must be added in
    non-decreasing rank order.

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    TYPE = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def rank(self) -> int:
        """Position in the fixed category order."""
        return self.value

    @property
    def unique(self) -> bool:
        """True if at most one fragment of this category is allowed."""
        return self in _UNIQUE

    @property
    def label(self) -> str:
        """Human readable name used in messages and reports."""
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        """Render raw fragment value with this category's syntax.

        Args:
            value: Raw fragment value (not validated)

        Returns:
            Fragment as it appears in the selector string
        """
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_UNIQUE = frozenset({Category.TYPE, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.TYPE: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}
