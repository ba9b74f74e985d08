"""Schema management error types."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class SchemaError(Exception):
    """Base class for schema processing and query failures."""


class SchemaLoadError(SchemaError):
    """Raised when raw schema text cannot be parsed into a mapping."""


class SchemaValidationError(SchemaError):
    """Raised when a dereferenced schema breaks a resource convention."""


class ResolutionError(SchemaError):
    """Raised when a resolution service reports a failure that is not an exception.

    Exceptions reported by the service are re-raised unchanged; this type only
    carries non-exception error values so they can travel through ``await``.
    """

    def __init__(self, error: Any) -> None:
        super().__init__(str(error))
        self.error = error


class MissingFieldError(SchemaError):
    """Raised when requested field names do not exist on the schema."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            f"The following fields do not exist on the schema: {', '.join(self.missing)}"
        )
