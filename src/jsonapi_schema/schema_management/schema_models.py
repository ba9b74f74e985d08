"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

FieldDefinition = Mapping[str, Any]

IDENTITY_FIELDS = ("id", "type")


class FieldCategory:
    """Names of the field categories held under a resource schema's properties."""

    ATTRIBUTES = "attributes"
    RELATIONSHIPS = "relationships"
    ALL = (ATTRIBUTES, RELATIONSHIPS)


def category_field_definitions(category_node: Any) -> Mapping[str, FieldDefinition]:
    """Return the field definitions held by a field category node.

    A category is either a JSON-Schema object node (``"type": "object"``) whose
    fields live under its own ``properties`` mapping, or a bare mapping of field
    name to definition. Field definitions are mappings, so a bare category never
    has a string ``type``.
    """
    if not isinstance(category_node, Mapping):
        return {}
    nested = category_node.get("properties")
    if category_node.get("type") == "object" and isinstance(nested, Mapping):
        return nested
    return category_node


@dataclass(frozen=True, eq=False)
class ProcessedSchema:
    """A dereferenced resource schema document with typed accessors."""

    document: Mapping[str, Any]

    @property
    def required(self) -> tuple[str, ...]:
        required = self.document.get("required")
        if isinstance(required, Sequence) and not isinstance(required, str):
            return tuple(required)
        return ()

    @property
    def properties(self) -> Mapping[str, Any]:
        properties = self.document.get("properties")
        return properties if isinstance(properties, Mapping) else {}

    def has_category(self, category: str) -> bool:
        return isinstance(self.properties.get(category), Mapping)

    def category_fields(self, category: str) -> Mapping[str, FieldDefinition]:
        """Field definitions of one category; empty when the category is absent."""
        return category_field_definitions(self.properties.get(category))
