"""JSON conversion of plain records.

to_json: record → compact deterministic JSON string.
from_json: JSON object → instance of a given class, without __init__.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.domain.exceptions import SerializationError

logger = logging.getLogger(__name__)

_SEPARATORS = (",", ":")

T = TypeVar("T")


def to_json(obj: object) -> str:
    """Encode value as compact JSON.

    Keys keep field order. Dataclass instances are encoded via asdict(),
    other objects via their public instance attributes. NaN and
    infinities are rejected.

    Args:
        obj: JSON-compatible value or record

    Returns:
        JSON string without insignificant whitespace

    Raises:
        SerializationError: If some value cannot be encoded
    """
    try:
        return json.dumps(obj, separators=_SEPARATORS, allow_nan=False, default=_encode_record)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e


def from_json(cls: type[T], text: str) -> T:
    """Decode JSON object and re-tag it as an instance of cls.

    cls.__init__ is not called and field shapes are not validated:
    every key becomes an attribute, the instance gets cls's methods.

    Args:
        cls: Target class
        text: JSON text of an object

    Returns:
        Instance of cls carrying the decoded keys as attributes

    Raises:
        TypeError: If cls is not a class
        SerializationError: If text is not valid JSON, is not an object,
            or a key cannot be set on cls
    """
    if not isinstance(cls, type):
        raise TypeError(f"cls must be a class, got {type(cls).__name__}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"invalid JSON: {e.msg} at position {e.pos}") from e

    if not isinstance(data, dict):
        raise SerializationError(f"expected JSON object, got {type(data).__name__}")

    instance = cls.__new__(cls)
    for key, value in data.items():
        try:
            object.__setattr__(instance, key, value)
        except AttributeError as e:
            raise SerializationError(f"cannot set '{key}' on {cls.__name__}") from e

    logger.debug("Re-tagged %d field(s) as %s", len(data), cls.__name__)
    return instance


def _encode_record(obj: object) -> dict[str, Any]:
    """Fallback encoder for json.dumps: record → dict of public fields."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    try:
        attrs = vars(obj)
    except TypeError:
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable") from None
    return {k: v for k, v in attrs.items() if not k.startswith("_")}
