"""Immutable selector value and the pure derive step."""

from __future__ import annotations

from dataclasses import dataclass, replace

from selectorkit.domain.exceptions import DuplicateCategoryError, OrderViolationError
from selectorkit.domain.model.category import Category


@dataclass(frozen=True, slots=True)
class SelectorParts:
    """Fragments of one compound selector, or a combined selector text.

    Presence is tested with `is None`: an explicitly set empty string
    counts as present.

    Attributes:
        type_: Type (element) token
        id_: Id token, raw (rendered with '#')
        classes: Class tokens in call order
        attrs: Attribute expressions in call order
        pseudo_classes: Pseudo-class tokens in call order
        pseudo_element: Pseudo-element token
        combined: Combined selector text, overrides all fragments
        last_rank: Rank of the most recently added category
    """

    type_: str | None = None
    id_: str | None = None
    classes: tuple[str, ...] = ()
    attrs: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element: str | None = None
    combined: str | None = None
    last_rank: int = Category.TYPE.rank

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not Category.TYPE.rank <= self.last_rank <= Category.PSEUDO_ELEMENT.rank:
            raise ValueError(f"last_rank must be a category rank, got {self.last_rank}")
        for name in ("classes", "attrs", "pseudo_classes"):
            if not isinstance(getattr(self, name), tuple):
                raise TypeError(f"{name} must be tuple")

    @classmethod
    def joined(cls, text: str) -> SelectorParts:
        """Create parts holding only a combined selector text."""
        if text is None:
            raise TypeError("text must not be None")
        return cls(combined=text)

    @property
    def is_empty(self) -> bool:
        """True if nothing would be rendered."""
        return self.combined is None and not any(
            self.fragments(category) for category in Category
        )

    def fragments(self, category: Category) -> tuple[str, ...]:
        """Raw values stored for category, in call order."""
        match category:
            case Category.TYPE:
                return _optional(self.type_)
            case Category.ID:
                return _optional(self.id_)
            case Category.CLASS:
                return self.classes
            case Category.ATTRIBUTE:
                return self.attrs
            case Category.PSEUDO_CLASS:
                return self.pseudo_classes
            case Category.PSEUDO_ELEMENT:
                return _optional(self.pseudo_element)

    def render(self) -> str:
        """Render selector string. Combined text wins over fragments.

        Fragments are concatenated in category order; repeatable
        categories keep call order.
        """
        if self.combined is not None:
            return self.combined
        return "".join(
            category.render(value)
            for category in Category
            for value in self.fragments(category)
        )


EMPTY = SelectorParts()


def with_fragment(parts: SelectorParts, category: Category, value: str) -> SelectorParts:
    """Derive new parts with one more fragment.

    Pure: parts is never modified.

    Args:
        parts: Current selector parts
        category: Category of the new fragment
        value: Raw fragment value (syntax not validated)

    Returns:
        New SelectorParts with the fragment added and last_rank = category rank

    Raises:
        DuplicateCategoryError: If a unique category is already present
        OrderViolationError: If category rank < parts.last_rank
    """
    if value is None:
        raise TypeError("value must not be None")

    if category.unique and parts.fragments(category):
        raise DuplicateCategoryError(category)
    if category.rank < parts.last_rank:
        raise OrderViolationError(category, Category(parts.last_rank))

    match category:
        case Category.TYPE:
            return replace(parts, type_=value, last_rank=category.rank)
        case Category.ID:
            return replace(parts, id_=value, last_rank=category.rank)
        case Category.CLASS:
            return replace(parts, classes=(*parts.classes, value), last_rank=category.rank)
        case Category.ATTRIBUTE:
            return replace(parts, attrs=(*parts.attrs, value), last_rank=category.rank)
        case Category.PSEUDO_CLASS:
            return replace(
                parts,
                pseudo_classes=(*parts.pseudo_classes, value),
                last_rank=category.rank,
            )
        case Category.PSEUDO_ELEMENT:
            return replace(parts, pseudo_element=value, last_rank=category.rank)


def _optional(value: str | None) -> tuple[str, ...]:
    return () if value is None else (value,)
