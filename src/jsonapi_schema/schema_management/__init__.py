"""Schema management exports."""

from .convention_validation import validate_schema
from .dereferencing import (
    ResolutionCallback,
    ResolutionService,
    dereference_schema,
    jsonref_resolution_service,
)
from .schema_errors import (
    MissingFieldError,
    ResolutionError,
    SchemaError,
    SchemaLoadError,
    SchemaValidationError,
)
from .schema_interface import SchemaInterface
from .schema_loading import build_schema_interface, load_raw_schema
from .schema_models import FieldCategory, FieldDefinition, ProcessedSchema

__all__ = [
    "FieldCategory",
    "FieldDefinition",
    "MissingFieldError",
    "ProcessedSchema",
    "ResolutionCallback",
    "ResolutionError",
    "ResolutionService",
    "SchemaError",
    "SchemaInterface",
    "SchemaLoadError",
    "SchemaValidationError",
    "build_schema_interface",
    "dereference_schema",
    "jsonref_resolution_service",
    "load_raw_schema",
    "validate_schema",
]
