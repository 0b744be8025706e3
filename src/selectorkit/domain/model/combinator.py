"""Combinator tokens joining two selectors."""

from enum import StrEnum


class Combinator(StrEnum):
    """Standard CSS combinators.

    combine() accepts any str token; members are plain strings.
    """

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
