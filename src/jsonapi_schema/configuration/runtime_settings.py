"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SchemaConfig:
    """Normalized raw schema source."""

    text: str
    source_path: Path | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaConfig
    deref: Mapping[str, Any] = field(default_factory=dict)

    def interface_config(self) -> dict[str, Any]:
        """Configuration mapping understood by ``SchemaInterface``."""
        return {"deref": dict(self.deref)}
