# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for attribute schema validation."""

from __future__ import annotations

import pytest

from cookbook_meta.attributes import AttributeSchema, AttributeType
from cookbook_meta.errors import InvalidAttributeOption


def _schema(**options: object) -> AttributeSchema:
    return AttributeSchema.from_options(options, context="attribute db/mysql/databases")  # type: ignore[arg-type]


def test_defaults_are_filled_in() -> None:
    """An empty option set resolves every default."""
    schema = _schema()
    assert schema.multiple_values is False
    assert schema.required is False
    assert schema.recipes == ()
    assert schema.attribute_type is AttributeType.STRING
    assert schema.to_dict() == {
        "multiple_values": False,
        "type": "string",
        "required": False,
        "recipes": [],
        "default": [],
    }


def test_full_option_set_round_trips() -> None:
    """Resolved options equal the supplied ones when all are given."""
    options = {
        "display_name": "MySQL Databases",
        "multiple_values": True,
        "type": "string",
        "required": False,
        "recipes": ["mysql::server", "mysql::master"],
        "default": [],
    }
    assert AttributeSchema.from_options(options, context="test").to_dict() == options


@pytest.mark.parametrize(
    "options",
    [
        {"display_name": {}},
        {"description": {}},
        {"multiple_values": {}},
        {"multiple_values": "yes"},
        {"type": []},
        {"type": "integer"},
        {"required": {}},
        {"required": 1},
        {"recipes": "mysql::server"},
        {"recipes": ["mysql::server", 3]},
        {"default": 3},
        {"default": ["a", 1]},
        {"default": {"a": 1}},
        {"colour": "blue"},
    ],
)
def test_invalid_options_are_rejected(options: dict[str, object]) -> None:
    """Every option is checked against its declared type."""
    with pytest.raises(InvalidAttributeOption):
        _schema(**options)


def test_valid_option_values_are_accepted() -> None:
    """Strings, booleans, the three types and all default shapes are accepted."""
    for attribute_type in ("string", "array", "hash"):
        assert _schema(type=attribute_type).attribute_type.value == attribute_type
    assert _schema(multiple_values=False).multiple_values is False
    assert _schema(required=True).required is True
    assert _schema(default="alice in chains").to_dict()["default"] == "alice in chains"
    assert _schema(default={"port": "3306"}).to_dict()["default"] == {"port": "3306"}
    assert _schema(default=["a", "b"]).to_dict()["default"] == ["a", "b"]


def test_invalid_option_is_a_value_error() -> None:
    """Attribute errors can be caught as ``ValueError``."""
    with pytest.raises(ValueError, match="display_name"):
        _schema(display_name=7)


@pytest.mark.parametrize("options", ["", [], 0, "display_name"])
def test_non_mapping_options_are_rejected(options: object) -> None:
    """Only ``None`` stands for "no options"; other non-objects raise."""
    with pytest.raises(InvalidAttributeOption, match="expected options to be an object"):
        AttributeSchema.from_options(options, context="attribute web/port")  # type: ignore[arg-type]
    assert AttributeSchema.from_options(None, context="attribute web/port") == AttributeSchema()
