# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating and normalising metadata JSON structures."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import MetadataIntegrityError
from .types import JSONValue

ErrorType = type[MetadataIntegrityError]


def is_array(value: object) -> bool:
    """Return ``True`` when ``value`` is a JSON array rather than a string.

    Args:
        value: Candidate value.

    Returns:
        bool: ``True`` for non-string sequences.
    """

    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def expect_string(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    error: ErrorType = MetadataIntegrityError,
) -> str:
    """Return ``value`` when it is a string or raise ``error``.

    Args:
        value: Raw value extracted from the metadata payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        error: Exception type raised on failure.

    Returns:
        str: The validated string.

    Raises:
        MetadataIntegrityError: If ``value`` is not a string.
    """
    if not isinstance(value, str):
        raise error(f"{context}: expected '{key}' to be a string")
    return value


def optional_string(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    error: ErrorType = MetadataIntegrityError,
) -> str | None:
    """Return ``value`` as an optional string with validation.

    Args:
        value: Raw value extracted from the metadata payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        error: Exception type raised on failure.

    Returns:
        str | None: ``value`` when present, otherwise ``None``.

    Raises:
        MetadataIntegrityError: If ``value`` is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise error(f"{context}: expected '{key}' to be a string if present")
    return value


def optional_bool(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    default: bool,
    error: ErrorType = MetadataIntegrityError,
) -> bool:
    """Return ``value`` as a ``bool``, falling back to ``default`` when absent.

    Args:
        value: Raw value extracted from the metadata payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        default: Value returned when ``value`` is ``None``.
        error: Exception type raised on failure.

    Returns:
        bool: Boolean value derived from ``value`` or ``default``.

    Raises:
        MetadataIntegrityError: If ``value`` is present and not a bool.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise error(f"{context}: expected '{key}' to be a boolean")


def string_array(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    error: ErrorType = MetadataIntegrityError,
) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings with validation.

    Args:
        value: Raw value extracted from the metadata payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        error: Exception type raised on failure.

    Returns:
        tuple[str, ...]: Tuple containing all string entries from ``value``.

    Raises:
        MetadataIntegrityError: If ``value`` is not a sequence of strings.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise error(f"{context}: expected '{key}' to be an array of strings")
    result: list[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise error(f"{context}: expected '{key}[{index}]' to be a string")
        result.append(item)
    return tuple(result)


def expect_mapping(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    error: ErrorType = MetadataIntegrityError,
) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping of JSON values or raise ``error``.

    Args:
        value: Raw value extracted from the metadata payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        error: Exception type raised on failure.

    Returns:
        Mapping[str, JSONValue]: Mapping derived from ``value``.

    Raises:
        MetadataIntegrityError: If ``value`` is not a mapping with string keys.
    """
    if not isinstance(value, Mapping):
        raise error(f"{context}: expected '{key}' to be an object")
    for item_key in value:
        if not isinstance(item_key, str):
            raise error(f"{context}: expected keys of '{key}' to be strings")
    return value


def optional_mapping(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    error: ErrorType = MetadataIntegrityError,
) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping, treating ``None`` as an empty object.

    Args:
        value: Raw value extracted from the metadata payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        error: Exception type raised on failure.

    Returns:
        Mapping[str, JSONValue]: Mapping derived from ``value``.
    """
    if value is None:
        return {}
    return expect_mapping(value, key=key, context=context, error=error)


def string_mapping(
    value: JSONValue | None,
    *,
    key: str,
    context: str,
    error: ErrorType = MetadataIntegrityError,
) -> dict[str, str]:
    """Return ``value`` as a mapping of strings.

    Args:
        value: Raw value extracted from the metadata payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.
        error: Exception type raised on failure.

    Returns:
        dict[str, str]: Mapping containing string keys and string values.

    Raises:
        MetadataIntegrityError: If ``value`` is not a mapping of strings.
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise error(f"{context}: expected '{key}' to be an object")
    result: dict[str, str] = {}
    for item_key, item_value in value.items():
        if not isinstance(item_key, str) or not isinstance(item_value, str):
            raise error(f"{context}: expected '{key}' to be a mapping of strings")
        result[item_key] = item_value
    return result


__all__ = [
    "expect_mapping",
    "expect_string",
    "is_array",
    "optional_bool",
    "optional_mapping",
    "optional_string",
    "string_array",
    "string_mapping",
]
