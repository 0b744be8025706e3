"""Rectangle value with a derived area."""

from dataclasses import dataclass


@dataclass(slots=True)
class Rectangle:
    """Axis-aligned rectangle.

    Attributes:
        width: Width (must be >= 0)
        height: Height (must be >= 0)
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 0:
            raise ValueError(f"width must be >= 0, got {self.width}")
        if self.height < 0:
            raise ValueError(f"height must be >= 0, got {self.height}")

    @property
    def area(self) -> float:
        """Width times height, computed on access."""
        return self.width * self.height

    def get_area(self) -> float:
        """Same as area, kept for callers using the method form."""
        return self.area
