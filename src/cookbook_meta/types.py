# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for cookbook metadata."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

ConstraintTableData: TypeAlias = dict[str, list[str]]

DEFAULT_CONSTRAINT: Final[str] = ">= 0.0.0"
DEFAULT_RECIPE: Final[str] = "default"
RECIPE_SEPARATOR: Final[str] = "::"

SCALAR_FIELDS: Final[tuple[str, ...]] = (
    "name",
    "description",
    "long_description",
    "maintainer",
    "maintainer_email",
    "license",
    "version",
)

CANONICAL_FIELDS: Final[tuple[str, ...]] = (
    "name",
    "description",
    "long_description",
    "maintainer",
    "maintainer_email",
    "license",
    "platforms",
    "dependencies",
    "suggestions",
    "recommendations",
    "conflicting",
    "providing",
    "replacing",
    "attributes",
    "recipes",
)

__all__ = [
    "CANONICAL_FIELDS",
    "DEFAULT_CONSTRAINT",
    "DEFAULT_RECIPE",
    "RECIPE_SEPARATOR",
    "SCALAR_FIELDS",
    "ConstraintTableData",
    "JSONPrimitive",
    "JSONValue",
]
