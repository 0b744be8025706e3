"""Domain exceptions: all public errors of selectorkit.

All exceptions visible to users are defined in domain.
Application and presentation layers raise these, never their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.domain.model.category import Category


class SelectorKitError(Exception):
    """Base for all selectorkit error exceptions.

    Allows: except SelectorKitError to catch all library errors.
    """


class SelectorBuildError(SelectorKitError):
    """Base for errors raised while building a selector.

    Attributes:
        category: Category of the rejected fragment.
    """

    def __init__(self, category: Category, message: str) -> None:
        # FAIL-FIRST: validate required parameters
        if category is None:
            raise TypeError("category must not be None")
        if not message:
            raise ValueError("message must be non-empty string")

        self.category = category
        super().__init__(message)


class DuplicateCategoryError(SelectorBuildError):
    """Unique category (type, id, pseudo-element) set twice.

    Attributes:
        category: Category that was already populated.
    """

    def __init__(self, category: Category) -> None:
        super().__init__(
            category,
            f"{category.label} must not occur more than once inside a selector",
        )


class OrderViolationError(SelectorBuildError):
    """Fragment added out of the fixed category order.

    Attributes:
        category: Category of the rejected fragment.
        after: Category of the last fragment already present.
    """

    def __init__(self, category: Category, after: Category) -> None:
        if after is None:
            raise TypeError("after must not be None")

        self.after = after
        super().__init__(
            category,
            f"{category.label} must not follow {after.label}; selector parts "
            "should be arranged in the following order: element, id, class, "
            "attribute, pseudo-class, pseudo-element",
        )


class SerializationError(SelectorKitError, ValueError):
    """JSON text or value could not be converted.

    Inherits ValueError for semantic correctness (bad input value).
    Inherits SelectorKitError for unified exception handling.

    Attributes:
        reason: Why conversion failed.
    """

    def __init__(self, reason: str) -> None:
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.reason = reason
        super().__init__(f"Serialization failed: {reason}")
