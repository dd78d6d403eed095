# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Conversion between :class:`CookbookMetadata` and JSON-compatible data."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Final

from .errors import MetadataIntegrityError
from .metadata import CookbookMetadata
from .registry import RelationKind
from .types import CANONICAL_FIELDS, SCALAR_FIELDS, JSONValue
from .utils import expect_mapping, optional_mapping, string_array, string_mapping

SERIALIZED_FIELDS: Final[tuple[str, ...]] = (*CANONICAL_FIELDS, "version")

_SCALAR_SETTERS: Final[dict[str, str]] = {field: f"set_{field}" for field in SCALAR_FIELDS}


def serialize_metadata(metadata: CookbookMetadata) -> dict[str, JSONValue]:
    """Convert ``metadata`` into a JSON-friendly mapping.

    The mapping holds the canonical field set plus ``version``; every value is
    already made of plain ``dict``, ``list`` and scalar objects.
    """
    fields = metadata.canonical_fields()
    return {field: fields[field] for field in SERIALIZED_FIELDS}


def deserialize_metadata(data: Mapping[str, JSONValue]) -> CookbookMetadata:
    """Rehydrate :class:`CookbookMetadata` from its serialized representation.

    Fields are replayed through the regular setters and declarations so every
    value is validated again. Absent fields keep their defaults.

    Args:
        data: Mapping produced by :func:`serialize_metadata` or read from a
            metadata document.

    Returns:
        CookbookMetadata: A fresh instance without an owning cookbook.

    Raises:
        MetadataIntegrityError: If a field has the wrong shape.
        InvalidConstraintExpression: If a stored constraint is malformed.
        InvalidAttributeOption: If a stored attribute schema is invalid.
    """
    payload = expect_mapping(data, key="<root>", context="metadata")
    metadata = CookbookMetadata()

    for field, setter in _SCALAR_SETTERS.items():
        value = payload.get(field)
        if value is not None:
            getattr(metadata, setter)(value)

    for platform, expressions in _constraint_table(payload, "platforms").items():
        metadata.supports(platform, *expressions)

    # Provisions are replayed before recipes so registering a recipe does not
    # add a second provision for it.
    for kind in RelationKind:
        for name, expressions in _constraint_table(payload, kind.table_name).items():
            metadata.declare(kind, name, *expressions)

    attributes = optional_mapping(payload.get("attributes"), key="attributes", context="metadata")
    for path, options in attributes.items():
        metadata.set_attribute(
            path,
            expect_mapping(options, key=path, context="metadata.attributes"),
        )

    recipes = string_mapping(payload.get("recipes"), key="recipes", context="metadata")
    for name, description in recipes.items():
        metadata.register_recipe(name, description)

    return metadata


def dumps_metadata(metadata: CookbookMetadata, *, indent: int | None = 2) -> str:
    """Return ``metadata`` encoded as a JSON document."""
    return json.dumps(serialize_metadata(metadata), indent=indent, sort_keys=True)


def loads_metadata(text: str | bytes) -> CookbookMetadata:
    """Decode a JSON document produced by :func:`dumps_metadata`.

    Raises:
        MetadataIntegrityError: If ``text`` is not valid JSON or not an object.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MetadataIntegrityError(f"metadata: failed to parse JSON: {exc}") from exc
    return deserialize_metadata(expect_mapping(payload, key="<root>", context="metadata"))


def _constraint_table(payload: Mapping[str, JSONValue], key: str) -> dict[str, tuple[str, ...]]:
    """Return the ``key`` table of ``payload`` with validated string lists.

    Empty lists are rejected because every stored entry holds at least one
    constraint; replaying one would otherwise insert the default constraint.
    """
    table = optional_mapping(payload.get(key), key=key, context="metadata")
    result: dict[str, tuple[str, ...]] = {}
    for name, expressions in table.items():
        values = string_array(expressions, key=f"{key}.{name}", context="metadata")
        if not values:
            raise MetadataIntegrityError(f"metadata: expected '{key}.{name}' to list at least one constraint")
        result[name] = values
    return result


__all__ = [
    "SERIALIZED_FIELDS",
    "deserialize_metadata",
    "dumps_metadata",
    "loads_metadata",
    "serialize_metadata",
]
