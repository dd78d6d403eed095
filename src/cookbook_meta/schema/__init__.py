# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating metadata documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Final

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from ..errors import MetadataValidationError
from ..io import load_schema
from ..types import JSONValue

METADATA_SCHEMA_PATH: Final[Path] = Path(__file__).resolve().parent / "metadata.schema.json"


@dataclass(frozen=True, slots=True)
class SchemaRepository:
    """Hold the JSON schema validator for metadata documents."""

    schema_path: Path
    validator: Draft202012Validator

    @classmethod
    def load(cls, schema_path: Path | None = None) -> SchemaRepository:
        """Load the metadata schema from disk.

        Args:
            schema_path: Optional override for the bundled schema file.

        Returns:
            SchemaRepository: Repository configured with a Draft 2020-12 validator.
        """
        resolved = schema_path or METADATA_SCHEMA_PATH
        schema = load_schema(resolved)
        Draft202012Validator.check_schema(schema)
        return cls(schema_path=resolved, validator=Draft202012Validator(schema))

    def errors(self, document: Mapping[str, JSONValue] | JSONValue) -> list[ValidationError]:
        """Return every validation error of ``document`` ordered by location."""

        return sorted(self.validator.iter_errors(document), key=_location)

    def validate(self, document: Mapping[str, JSONValue] | JSONValue, *, source: str) -> None:
        """Validate ``document`` against the metadata schema.

        Args:
            document: Parsed metadata document.
            source: Label for error messages, usually the document path.

        Raises:
            MetadataValidationError: When the document fails schema validation.
        """
        messages = [_describe(error) for error in self.errors(document)]
        if messages:
            raise MetadataValidationError(f"{source}: " + "; ".join(messages))


@lru_cache(maxsize=1)
def default_repository() -> SchemaRepository:
    """Return the repository for the bundled schema, loading it once."""

    return SchemaRepository.load()


def _location(error: ValidationError) -> str:
    return "/".join(str(part) for part in error.absolute_path) or "<root>"


def _describe(error: ValidationError) -> str:
    return f"{_location(error)}: {error.message}"


__all__ = ["METADATA_SCHEMA_PATH", "SchemaRepository", "default_repository"]
