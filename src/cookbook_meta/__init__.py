# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Cookbook metadata: version constraints, relation tables, attribute schemas and JSON codec."""

from __future__ import annotations

from importlib import metadata as _metadata

from .attributes import AttributeSchema, AttributeType
from .codec import deserialize_metadata, dumps_metadata, loads_metadata, serialize_metadata
from .config import MetadataSettings, load_settings
from .constraint import ConstraintOperator, VersionConstraint, check_valid_version, check_version_expression
from .cookbook import Cookbook, recipe_name
from .errors import (
    ConfigError,
    InvalidAttributeOption,
    InvalidConstraintExpression,
    InvalidVersionFormat,
    MetadataError,
    MetadataIntegrityError,
    MetadataValidationError,
    UnknownRecipeError,
)
from .loader import build_metadata, load_metadata, write_metadata
from .metadata import CookbookMetadata
from .registry import ConstraintTable, DependencyRegistry, RelationKind
from .version import compare_versions

try:
    __version__ = _metadata.version("cookbook-meta")
except _metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "AttributeSchema",
    "AttributeType",
    "ConfigError",
    "ConstraintOperator",
    "ConstraintTable",
    "Cookbook",
    "CookbookMetadata",
    "DependencyRegistry",
    "InvalidAttributeOption",
    "InvalidConstraintExpression",
    "InvalidVersionFormat",
    "MetadataError",
    "MetadataIntegrityError",
    "MetadataSettings",
    "MetadataValidationError",
    "RelationKind",
    "UnknownRecipeError",
    "VersionConstraint",
    "__version__",
    "build_metadata",
    "check_valid_version",
    "check_version_expression",
    "compare_versions",
    "deserialize_metadata",
    "dumps_metadata",
    "load_metadata",
    "load_settings",
    "loads_metadata",
    "recipe_name",
    "serialize_metadata",
    "write_metadata",
]
