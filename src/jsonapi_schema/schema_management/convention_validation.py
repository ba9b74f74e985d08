"""Resource schema convention checks.

Only the conventions below are enforced; general JSON-Schema validity is not
checked here.

1. The schema declares ``required``.
2. ``id`` then ``type`` are declared under ``properties``, listed in
   ``required`` and typed ``"string"``.
3. ``attributes`` and ``relationships`` do not share field names.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema_errors import SchemaValidationError
from .schema_models import IDENTITY_FIELDS, FieldCategory, ProcessedSchema


def validate_schema(schema: Mapping[str, Any]) -> None:
    """Validate a dereferenced schema against the resource conventions.

    Raises:
      SchemaValidationError: At the first convention the schema breaks.
    """
    if not isinstance(schema, Mapping) or "required" not in schema:
        raise SchemaValidationError('Schema must require the "id" and "type" properties')

    candidate = ProcessedSchema(document=schema)
    required = candidate.required
    properties = candidate.properties

    for name in IDENTITY_FIELDS:
        if name not in properties or name not in required:
            raise SchemaValidationError(f'Schema must require the property "{name}"')
        definition = properties[name]
        declared_type = definition.get("type") if isinstance(definition, Mapping) else None
        if declared_type != "string":
            raise SchemaValidationError(
                f'Schema must require a type of "string" for the "{name}" property'
            )

    if candidate.has_category(FieldCategory.ATTRIBUTES) and candidate.has_category(
        FieldCategory.RELATIONSHIPS
    ):
        relationship_names = set(candidate.category_fields(FieldCategory.RELATIONSHIPS))
        overlap = [
            name
            for name in candidate.category_fields(FieldCategory.ATTRIBUTES)
            if name in relationship_names
        ]
        if overlap:
            raise SchemaValidationError(
                "Schema must not allow multiple fields with the same name. "
                "The following fields are present in both attributes and relationships: "
                f"{', '.join(overlap)}"
            )

