"""Interface to JSON:API resource schemas."""

import logging

from .schema_management import (
    FieldCategory,
    MissingFieldError,
    ProcessedSchema,
    ResolutionError,
    SchemaError,
    SchemaInterface,
    SchemaValidationError,
    dereference_schema,
    validate_schema,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FieldCategory",
    "MissingFieldError",
    "ProcessedSchema",
    "ResolutionError",
    "SchemaError",
    "SchemaInterface",
    "SchemaValidationError",
    "dereference_schema",
    "validate_schema",
]
