"""Tests for application/serialization.py."""

from dataclasses import dataclass

import pytest

from selectorkit.application.serialization import from_json, to_json
from selectorkit.domain.exceptions import SerializationError
from selectorkit.domain.model.rectangle import Rectangle


class Circle:
    """Plain class used as re-tagging target."""

    def __init__(self, radius: float) -> None:
        self.radius = radius

    def get_circumference(self) -> float:
        return 2 * 3 * self.radius


@dataclass
class Point:
    x: int
    y: int


class Opaque:
    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value


class TestToJson:
    """Tests for to_json()."""

    def test_list(self) -> None:
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_mapping_keeps_key_order(self) -> None:
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_rectangle_record(self) -> None:
        """Derived area is not a field and is not encoded."""
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_public_fields(self) -> None:
        circle = Circle(5)
        circle._cache = 1  # type: ignore[attr-defined]
        assert to_json(circle) == '{"radius":5}'

    def test_nested_records(self) -> None:
        assert to_json({"p": Point(1, 2)}) == '{"p":{"x":1,"y":2}}'

    def test_unencodable_raises(self) -> None:
        with pytest.raises(SerializationError, match="Opaque"):
            to_json(Opaque(1))

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_raises(self, value: float) -> None:
        """NaN and infinities have no JSON form."""
        with pytest.raises(SerializationError, match="not JSON compliant"):
            to_json({"w": value})


class TestFromJson:
    """Tests for from_json()."""

    def test_retags_as_class(self) -> None:
        circle = from_json(Circle, '{"radius":10}')
        assert isinstance(circle, Circle)
        assert circle.radius == 10
        assert circle.get_circumference() == 60

    def test_does_not_validate_shape(self) -> None:
        """Keys are copied as-is, __init__ is not called."""
        circle = from_json(Circle, '{"width":10,"height":20}')
        assert isinstance(circle, Circle)
        assert circle.width == 10  # type: ignore[attr-defined]
        assert not hasattr(circle, "radius")

    def test_rectangle_roundtrip(self) -> None:
        rect = from_json(Rectangle, to_json(Rectangle(3, 4)))
        assert rect.area == 12

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(SerializationError, match="invalid JSON"):
            from_json(Circle, "{radius: 10}")

    def test_non_object_raises(self) -> None:
        with pytest.raises(SerializationError, match="expected JSON object, got list"):
            from_json(Circle, "[1,2,3]")

    def test_unknown_slot_raises(self) -> None:
        with pytest.raises(SerializationError, match="cannot set 'radius' on Rectangle"):
            from_json(Rectangle, '{"radius":10}')

    def test_non_class_raises(self) -> None:
        with pytest.raises(TypeError, match="cls must be a class"):
            from_json("Circle", "{}")  # type: ignore[arg-type]
