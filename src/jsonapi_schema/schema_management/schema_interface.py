"""Resource schema facade: dereference, validate, cache and query fields."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .convention_validation import validate_schema
from .dereferencing import ResolutionService, dereference_schema
from .schema_errors import MissingFieldError
from .schema_models import FieldCategory, FieldDefinition, ProcessedSchema

NameArgument = str | Iterable[str] | None

logger = logging.getLogger(__name__)


class SchemaInterface:
    """Interface to one raw resource schema.

    The processed schema is cached after the first successful :meth:`process`
    and never invalidated. Concurrent :meth:`get_schema` calls made before the
    cache is set each run their own processing cycle; callers that need a
    single in-flight cycle must coordinate it themselves.
    """

    def __init__(
        self,
        raw_schema: Mapping[str, Any],
        config: Mapping[str, Any] | None = None,
        *,
        resolution_service: ResolutionService | None = None,
    ) -> None:
        self.raw_schema = raw_schema
        self.config: Mapping[str, Any] = config if config is not None else {}
        self._resolution_service = resolution_service
        self._schema: ProcessedSchema | None = None

    @property
    def schema(self) -> ProcessedSchema | None:
        """The cached processed schema, ``None`` until processing succeeds."""
        return self._schema

    @property
    def is_processed(self) -> bool:
        return self._schema is not None

    async def process(self) -> ProcessedSchema:
        """Dereference and validate the raw schema, then cache the result.

        Every call does the work again; use :meth:`get_schema` for the cached
        result.
        """
        resolved = await dereference_schema(
            self.raw_schema,
            self.config.get("deref"),
            service=self._resolution_service,
        )
        validate_schema(resolved)
        logger.debug("Schema passed convention validation")
        self._schema = ProcessedSchema(document=resolved)
        return self._schema

    async def get_schema(self) -> ProcessedSchema:
        """Return the cached processed schema, processing it first if needed."""
        if self._schema is not None:
            logger.debug("Returning cached schema")
            return self._schema
        logger.debug("Schema not processed yet; processing")
        return await self.process()

    async def get_fields_by_type(
        self, field_names: NameArgument, field_types: NameArgument
    ) -> dict[str, FieldDefinition]:
        """Get field definitions of the given category or categories.

        Args:
          field_names: A name or names to return. Empty or ``None`` returns
            every field of the requested categories.
          field_types: A field category or categories to search.

        Returns:
          Field name to definition. Later categories win on a name clash.

        Raises:
          MissingFieldError: If a requested name is not defined.
        """
        names = _normalize_names(field_names)
        categories = _normalize_names(field_types)
        schema = await self.get_schema()

        fields: dict[str, FieldDefinition] = {}
        for category in categories:
            fields.update(schema.category_fields(category))

        if names:
            fields = {name: fields[name] for name in names if name in fields}

        missing = [name for name in names if name not in fields]
        if missing:
            raise MissingFieldError(missing)
        logger.debug("Resolved %d field(s) from %s", len(fields), ", ".join(categories))
        return fields

    async def get_attributes(self, field_names: NameArgument = None) -> dict[str, FieldDefinition]:
        """Get attribute definitions; all attributes when no names are given."""
        return await self.get_fields_by_type(field_names, FieldCategory.ATTRIBUTES)

    async def get_relationships(
        self, field_names: NameArgument = None
    ) -> dict[str, FieldDefinition]:
        """Get relationship definitions; all relationships when no names are given."""
        return await self.get_fields_by_type(field_names, FieldCategory.RELATIONSHIPS)

    async def get_fields(self, field_names: NameArgument = None) -> dict[str, FieldDefinition]:
        """Get attribute and relationship definitions."""
        return await self.get_fields_by_type(field_names, list(FieldCategory.ALL))


def _normalize_names(value: NameArgument) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [item for item in value if item]
