# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading and writing metadata JSON documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import cast

from .errors import MetadataIntegrityError
from .types import JSONValue


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        MetadataIntegrityError: If the schema cannot be parsed or is not a JSON object.
    """
    payload = _read_json(path, what="JSON schema")
    return _ensure_json_object(payload, context=str(path))


def load_document(path: Path) -> Mapping[str, JSONValue]:
    """Load a metadata document from disk and validate the payload shape.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON object.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        MetadataIntegrityError: If the document cannot be parsed or is not a JSON object.
    """
    payload = _read_json(path, what="metadata JSON")
    return _ensure_json_object(payload, context=str(path))


def write_document(path: Path, document: Mapping[str, JSONValue]) -> None:
    """Write ``document`` as indented, key-sorted JSON followed by a newline.

    Args:
        path: Destination file; parent directories are created.
        document: JSON-compatible mapping.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(document, indent=2, sort_keys=True)
    path.write_text(f"{text}\n", encoding="utf-8")


__all__ = ["load_document", "load_schema", "write_document"]


def _read_json(path: Path, *, what: str) -> JSONValue:
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            return cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise MetadataIntegrityError(f"{path}: failed to parse {what}") from exc


def _ensure_json_object(value: JSONValue, *, context: str) -> Mapping[str, JSONValue]:
    if not isinstance(value, Mapping):
        raise MetadataIntegrityError(f"{context}: expected a JSON object")
    return value
