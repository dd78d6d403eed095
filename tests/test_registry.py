# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the relation tables of the dependency registry."""

from __future__ import annotations

import pytest

from cookbook_meta.errors import InvalidConstraintExpression, InvalidVersionFormat, MetadataIntegrityError
from cookbook_meta.registry import ConstraintTable, DependencyRegistry, RelationKind


def test_declare_returns_current_list_and_appends() -> None:
    """Repeated declarations for a name extend its list."""
    table = ConstraintTable("depends")
    assert table.declare("foo::bar", ">> 0.2") == [">> 0.2"]
    assert table.declare("foo::bar", "<< 1.0") == [">> 0.2", "<< 1.0"]
    assert table.query() == {"foo::bar": [">> 0.2", "<< 1.0"]}


def test_declare_without_expressions_is_unconditional() -> None:
    """No expressions means any version."""
    table = ConstraintTable("depends")
    assert table.declare("apache2") == [">= 0.0.0"]


def test_declare_is_all_or_nothing() -> None:
    """An invalid expression leaves the table unmodified."""
    table = ConstraintTable("depends")
    table.declare("mysql", ">= 1.0")
    with pytest.raises(InvalidConstraintExpression):
        table.declare("mysql", "<< 2.0", "soon")
    with pytest.raises(InvalidConstraintExpression):
        table.declare("postgresql", "any")
    assert table.query() == {"mysql": [">= 1.0"]}


def test_declare_rejects_non_string_names() -> None:
    """Names must be strings."""
    table = ConstraintTable("depends")
    with pytest.raises(MetadataIntegrityError):
        table.declare(42, ">= 1.0")  # type: ignore[arg-type]
    assert len(table) == 0


def test_query_returns_a_copy() -> None:
    """Mutating a query result does not reach the stored table."""
    table = ConstraintTable("depends")
    table.declare("foo", ">= 1.0")
    snapshot = table.query()
    snapshot["foo"].append("<< 0.1")
    snapshot["bar"] = ["= 1.0"]
    assert table.query() == {"foo": [">= 1.0"]}
    fetched = table.get("foo")
    assert fetched == [">= 1.0"]
    assert table.get("missing") is None


def test_allows_checks_every_recorded_constraint() -> None:
    """A version is allowed only when it satisfies every constraint for the name."""
    table = ConstraintTable("depends")
    table.declare("kindness", ">> 2.0", "<< 4.0")
    assert table.allows("kindness", "3.1")
    assert not table.allows("kindness", "4.0")
    assert table.allows("unconstrained", "0.0.1")
    with pytest.raises(InvalidVersionFormat):
        table.allows("kindness", "3.x")


def test_registry_tables_are_independent() -> None:
    """Declaring one relation never touches another."""
    registry = DependencyRegistry()
    registry.declare(RelationKind.DEPENDS, "foo", ">= 1.0")
    registry.declare("conflicts", "bar")
    assert registry.query(RelationKind.DEPENDS) == {"foo": [">= 1.0"]}
    assert registry.query(RelationKind.CONFLICTS) == {"bar": [">= 0.0.0"]}
    for kind in (RelationKind.RECOMMENDS, RelationKind.SUGGESTS, RelationKind.PROVIDES, RelationKind.REPLACES):
        assert registry.query(kind) == {}


def test_registry_to_dict_uses_table_names() -> None:
    """The published form is keyed by the plural table names."""
    registry = DependencyRegistry()
    registry.declare(RelationKind.PROVIDES, "cookbook::recipe")
    assert registry.to_dict() == {
        "dependencies": {},
        "recommendations": {},
        "suggestions": {},
        "conflicting": {},
        "providing": {"cookbook::recipe": [">= 0.0.0"]},
        "replacing": {},
    }


def test_relation_kind_table_names() -> None:
    """Each relation publishes under its own table name."""
    assert RelationKind.CONFLICTS.table_name == "conflicting"
    assert len({kind.table_name for kind in RelationKind}) == len(RelationKind)
