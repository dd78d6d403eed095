# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema descriptors for the attributes a cookbook exposes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, TypeAlias

from .errors import InvalidAttributeOption
from .types import JSONValue
from .utils import expect_string, is_array, optional_bool, optional_string, string_array, string_mapping

AttributeDefault: TypeAlias = str | tuple[str, ...] | Mapping[str, str]


class AttributeType(str, Enum):
    """Enumerate the value shapes an attribute may hold."""

    STRING = "string"
    ARRAY = "array"
    HASH = "hash"


ATTRIBUTE_OPTIONS: Final[frozenset[str]] = frozenset(
    {
        "display_name",
        "description",
        "multiple_values",
        "type",
        "required",
        "recipes",
        "default",
    },
)


def normalize_attribute_type(value: JSONValue | None, *, context: str) -> AttributeType:
    """Return the attribute type named by ``value``.

    Args:
        value: Raw ``type`` option; ``None`` selects ``string``.
        context: Human-readable context used in error messages.

    Returns:
        AttributeType: Recognised attribute type.

    Raises:
        InvalidAttributeOption: If ``value`` is not one of the known type names.
    """

    if value is None:
        return AttributeType.STRING
    raw = expect_string(value, key="type", context=context, error=InvalidAttributeOption)
    try:
        return AttributeType(raw)
    except ValueError as exc:
        raise InvalidAttributeOption(f"{context}: unknown attribute type '{raw}'") from exc


def normalize_attribute_default(value: JSONValue | None, *, context: str) -> AttributeDefault:
    """Return the validated ``default`` option.

    Args:
        value: Raw ``default`` option; ``None`` selects an empty array.
        context: Human-readable context used in error messages.

    Returns:
        AttributeDefault: A string, a tuple of strings or a mapping of strings.

    Raises:
        InvalidAttributeOption: If ``value`` has any other shape.
    """

    if value is None:
        return ()
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return MappingProxyType(
            string_mapping(value, key="default", context=context, error=InvalidAttributeOption),
        )
    if is_array(value):
        return string_array(value, key="default", context=context, error=InvalidAttributeOption)
    raise InvalidAttributeOption(
        f"{context}: expected 'default' to be a string, an array or an object",
    )


@dataclass(frozen=True, slots=True)
class AttributeSchema:
    """Validated description of one configurable attribute."""

    display_name: str | None = None
    description: str | None = None
    multiple_values: bool = False
    attribute_type: AttributeType = AttributeType.STRING
    required: bool = False
    recipes: tuple[str, ...] = ()
    default: AttributeDefault = ()

    @staticmethod
    def from_options(options: Mapping[str, JSONValue] | None, *, context: str) -> AttributeSchema:
        """Create an ``AttributeSchema`` from user supplied options.

        Args:
            options: Mapping of option names to values; missing options take
                their defaults.
            context: Human-readable context used in error messages.

        Returns:
            AttributeSchema: Frozen schema with every option resolved.

        Raises:
            InvalidAttributeOption: If an option is unknown or has the wrong type.
        """

        data: Mapping[str, JSONValue] = {} if options is None else options
        if not isinstance(data, Mapping):
            raise InvalidAttributeOption(f"{context}: expected options to be an object")
        unknown = sorted(str(key) for key in data if key not in ATTRIBUTE_OPTIONS)
        if unknown:
            raise InvalidAttributeOption(f"{context}: unknown attribute options {', '.join(unknown)}")

        display_name_value = optional_string(
            data.get("display_name"),
            key="display_name",
            context=context,
            error=InvalidAttributeOption,
        )
        description_value = optional_string(
            data.get("description"),
            key="description",
            context=context,
            error=InvalidAttributeOption,
        )
        multiple_values_value = optional_bool(
            data.get("multiple_values"),
            key="multiple_values",
            context=context,
            default=False,
            error=InvalidAttributeOption,
        )
        required_value = optional_bool(
            data.get("required"),
            key="required",
            context=context,
            default=False,
            error=InvalidAttributeOption,
        )
        recipes_value = string_array(
            data.get("recipes"),
            key="recipes",
            context=context,
            error=InvalidAttributeOption,
        )
        return AttributeSchema(
            display_name=display_name_value,
            description=description_value,
            multiple_values=multiple_values_value,
            attribute_type=normalize_attribute_type(data.get("type"), context=context),
            required=required_value,
            recipes=recipes_value,
            default=normalize_attribute_default(data.get("default"), context=context),
        )

    def to_dict(self) -> dict[str, JSONValue]:
        """Return the resolved options as plain JSON-compatible data.

        ``display_name`` and ``description`` only appear when they were set.
        """

        payload: dict[str, JSONValue] = {}
        if self.display_name is not None:
            payload["display_name"] = self.display_name
        if self.description is not None:
            payload["description"] = self.description
        payload["multiple_values"] = self.multiple_values
        payload["type"] = self.attribute_type.value
        payload["required"] = self.required
        payload["recipes"] = list(self.recipes)
        if isinstance(self.default, str):
            payload["default"] = self.default
        elif isinstance(self.default, Mapping):
            payload["default"] = dict(self.default)
        else:
            payload["default"] = list(self.default)
        return payload


__all__ = [
    "ATTRIBUTE_OPTIONS",
    "AttributeDefault",
    "AttributeSchema",
    "AttributeType",
    "normalize_attribute_default",
    "normalize_attribute_type",
]
