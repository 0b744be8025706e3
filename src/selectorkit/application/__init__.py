"""selectorkit application layer: serialization and reporting."""

from selectorkit.application.serialization import from_json, to_json

__all__ = ["from_json", "to_json"]
