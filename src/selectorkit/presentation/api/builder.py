"""Fluent CSS selector builder.

Entry point for building selector strings.

Example:
    builder = css_selector_builder
    builder.set_id("main").add_class("container").stringify()
    # '#main.container'

    builder.combine(
        builder.set_type("div").set_id("main"),
        Combinator.CHILD,
        builder.set_type("span"),
    ).stringify()
    # 'div#main > span'
"""

from __future__ import annotations

import logging

from selectorkit.domain.model.category import Category
from selectorkit.domain.model.selector_parts import EMPTY, SelectorParts, with_fragment

logger = logging.getLogger(__name__)


class Selector:
    """Chainable handle around immutable SelectorParts.

    Fragment methods never modify the receiver: each returns a new
    Selector. stringify() is a destructive read: it resets the receiver,
    so a stringified Selector behaves as an empty one afterwards.

    Attributes:
        _parts: Current selector parts
    """

    __slots__ = ("_parts",)

    def __init__(self, parts: SelectorParts = EMPTY) -> None:
        """Initialize selector.

        Args:
            parts: Initial parts (default: empty)

        Raises:
            TypeError: If parts is None
        """
        if parts is None:
            raise TypeError("parts must not be None")
        self._parts = parts

    def __repr__(self) -> str:
        return f"Selector({self._parts.render()!r})"

    @property
    def parts(self) -> SelectorParts:
        """Current parts. Reading does not consume the selector."""
        return self._parts

    def _derive(self, category: Category, value: str) -> Selector:
        """Return new selector with one more fragment.

        Raises:
            DuplicateCategoryError: If unique category already set
            OrderViolationError: If category is out of order
        """
        return Selector(with_fragment(self._parts, category, value))

    def set_type(self, value: str) -> Selector:
        """Add type (element) selector, e.g. 'div'.

        Raises:
            DuplicateCategoryError: If type already set
            OrderViolationError: If a later category was already added
        """
        return self._derive(Category.TYPE, value)

    def set_id(self, value: str) -> Selector:
        """Add id selector, rendered as '#value'.

        Raises:
            DuplicateCategoryError: If id already set
            OrderViolationError: If a later category was already added
        """
        return self._derive(Category.ID, value)

    def add_class(self, value: str) -> Selector:
        """Append class selector, rendered as '.value'.

        Raises:
            OrderViolationError: If a later category was already added
        """
        return self._derive(Category.CLASS, value)

    def add_attr(self, value: str) -> Selector:
        """Append attribute selector, rendered as '[value]'.

        Value is the raw expression, e.g. 'href$=".png"'.

        Raises:
            OrderViolationError: If a later category was already added
        """
        return self._derive(Category.ATTRIBUTE, value)

    def add_pseudo_class(self, value: str) -> Selector:
        """Append pseudo-class, rendered as ':value'.

        Raises:
            OrderViolationError: If pseudo-element was already added
        """
        return self._derive(Category.PSEUDO_CLASS, value)

    def set_pseudo_element(self, value: str) -> Selector:
        """Set pseudo-element, rendered as '::value'.

        Raises:
            DuplicateCategoryError: If pseudo-element already set
        """
        return self._derive(Category.PSEUDO_ELEMENT, value)

    def combine(self, first: Selector, combinator: str, second: Selector) -> Selector:
        """Join two selectors with a combinator.

        Both arguments are stringified (and therefore reset). The receiver
        is not modified.

        Args:
            first: Left-hand selector
            combinator: Combinator token (' ', '>', '+', '~' or any str)
            second: Right-hand selector

        Returns:
            New Selector holding only the text '<first> <combinator> <second>'
        """
        if first is None or second is None:
            raise TypeError("selectors must not be None")
        if combinator is None:
            raise TypeError("combinator must not be None")

        text = f"{first.stringify()} {combinator} {second.stringify()}"
        logger.debug("Combined selector %r", text)
        return Selector(SelectorParts.joined(text))

    def preview(self) -> str:
        """Rendered string, without consuming the selector."""
        return self._parts.render()

    def stringify(self) -> str:
        """Render selector and reset it to empty.

        Returns:
            Selector string; empty string if already stringified
        """
        result = self._parts.render()
        self._parts = EMPTY
        return result


def create_builder() -> Selector:
    """Create fresh empty origin selector."""
    return Selector()


css_selector_builder = create_builder()
