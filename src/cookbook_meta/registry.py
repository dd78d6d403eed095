# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Dependency declaration tables keyed by relation kind."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from .constraint import allows_all, normalize_expressions
from .types import DEFAULT_CONSTRAINT, ConstraintTableData
from .utils import expect_string

LOGGER = logging.getLogger(__name__)


class RelationKind(str, Enum):
    """Enumerate the relations a cookbook may declare against another cookbook.

    Each member's value is the verb used to declare the relation; the
    ``table_name`` property is the plural name the table is published under.
    """

    DEPENDS = "depends"
    RECOMMENDS = "recommends"
    SUGGESTS = "suggests"
    CONFLICTS = "conflicts"
    PROVIDES = "provides"
    REPLACES = "replaces"

    @property
    def table_name(self) -> str:
        """Return the name of the table holding this relation's declarations."""

        return _TABLE_NAMES[self]


_TABLE_NAMES: Final[dict[RelationKind, str]] = {
    RelationKind.DEPENDS: "dependencies",
    RelationKind.RECOMMENDS: "recommendations",
    RelationKind.SUGGESTS: "suggestions",
    RelationKind.CONFLICTS: "conflicting",
    RelationKind.PROVIDES: "providing",
    RelationKind.REPLACES: "replacing",
}


@dataclass(slots=True)
class ConstraintTable:
    """Ordered constraint expressions keyed by name.

    ``label`` names the declaring verb (``depends``, ``supports``...) and is
    only used in messages.
    """

    label: str
    _entries: ConstraintTableData = field(default_factory=dict, repr=False)

    def declare(self, name: str, *expressions: str) -> list[str]:
        """Append constraint expressions for ``name``.

        Args:
            name: Cookbook (or recipe) name the relation targets.
            *expressions: Constraint expressions; none means any version.

        Returns:
            list[str]: Every expression now recorded for ``name``.

        Raises:
            InvalidConstraintExpression: If any expression is malformed. The
                table is left untouched in that case.
            MetadataIntegrityError: If ``name`` is not a string.
        """

        expect_string(name, key="name", context=self.label)
        normalized = normalize_expressions(expressions or (DEFAULT_CONSTRAINT,))
        entry = self._entries.setdefault(name, [])
        entry.extend(normalized)
        LOGGER.debug("%s %s %s", self.label, name, ", ".join(normalized))
        return list(entry)

    def query(self) -> ConstraintTableData:
        """Return a copy of the whole table."""

        return {name: list(expressions) for name, expressions in self._entries.items()}

    def get(self, name: str) -> list[str] | None:
        """Return the expressions recorded for ``name`` or ``None``."""

        expressions = self._entries.get(name)
        return list(expressions) if expressions is not None else None

    def allows(self, name: str, version: str) -> bool:
        """Return whether ``version`` of ``name`` satisfies every recorded constraint.

        Names without declarations are unconstrained.

        Raises:
            InvalidVersionFormat: If ``version`` is malformed.
        """

        return allows_all(version, self._entries.get(name, ()))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(slots=True)
class DependencyRegistry:
    """Independent constraint tables for every :class:`RelationKind`."""

    _tables: dict[RelationKind, ConstraintTable] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Create one empty table per relation kind."""

        self._tables = {kind: ConstraintTable(kind.value) for kind in RelationKind}

    def table(self, kind: RelationKind | str) -> ConstraintTable:
        """Return the table storing ``kind`` declarations.

        Args:
            kind: Relation kind or its declaring verb.

        Returns:
            ConstraintTable: Table owned by this registry.
        """

        return self._tables[RelationKind(kind)]

    def declare(self, kind: RelationKind | str, name: str, *expressions: str) -> list[str]:
        """Declare a relation of ``kind`` against ``name``.

        See :meth:`ConstraintTable.declare`.
        """

        return self.table(kind).declare(name, *expressions)

    def query(self, kind: RelationKind | str) -> ConstraintTableData:
        """Return a copy of the ``kind`` table."""

        return self.table(kind).query()

    def to_dict(self) -> dict[str, ConstraintTableData]:
        """Return every table keyed by its published table name."""

        return {kind.table_name: table.query() for kind, table in self._tables.items()}


__all__ = ["ConstraintTable", "DependencyRegistry", "RelationKind"]
