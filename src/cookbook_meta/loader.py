# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level helpers that read, validate, build and write metadata documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from .codec import deserialize_metadata, serialize_metadata
from .config import MetadataSettings
from .cookbook import Cookbook
from .io import load_document, write_document
from .metadata import CookbookMetadata
from .schema import SchemaRepository, default_repository

LOGGER = logging.getLogger(__name__)

METADATA_FILENAME: Final[str] = "metadata.json"


def load_metadata(
    path: Path,
    *,
    validate: bool = True,
    schemas: SchemaRepository | None = None,
) -> CookbookMetadata:
    """Read a metadata document and materialise it.

    Args:
        path: Metadata JSON file.
        validate: Check the document against the metadata schema first.
        schemas: Schema repository overriding the bundled schema.

    Returns:
        CookbookMetadata: Deserialized metadata.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        MetadataValidationError: If schema validation fails.
        MetadataIntegrityError: If the document is malformed.
    """

    document = load_document(path)
    if validate:
        (schemas or default_repository()).validate(document, source=str(path))
    metadata = deserialize_metadata(document)
    LOGGER.debug("loaded metadata for %s from %s", metadata.name or "<unnamed>", path)
    return metadata


def write_metadata(path: Path, metadata: CookbookMetadata) -> Path:
    """Write ``metadata`` to ``path`` and return the path written."""

    write_document(path, serialize_metadata(metadata))
    LOGGER.debug("wrote metadata for %s to %s", metadata.name or "<unnamed>", path)
    return path


def build_metadata(
    root: Path,
    *,
    name: str | None = None,
    settings: MetadataSettings | None = None,
) -> CookbookMetadata:
    """Create metadata for the cookbook stored in ``root``.

    Recipes are discovered on disk; the remaining fields take the settings
    defaults.

    Args:
        root: Cookbook directory.
        name: Cookbook name; defaults to the directory name.
        settings: Defaults and discovery rules.

    Returns:
        CookbookMetadata: Metadata seeded from the cookbook's recipes.
    """

    cookbook = Cookbook.from_directory(root, name=name, settings=settings)
    return CookbookMetadata(cookbook, settings=settings)


__all__ = ["METADATA_FILENAME", "build_metadata", "load_metadata", "write_metadata"]
