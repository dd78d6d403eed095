# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Version constraint expressions such as ``">= 8.04"`` or ``"<< 2.0"``."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import InvalidConstraintExpression
from .version import Comparison, compare_versions, is_valid_version


class ConstraintOperator(str, Enum):
    """Enumerate the comparison operators of the constraint language."""

    GREATER = ">>"
    GREATER_EQUAL = ">="
    EQUAL = "="
    LESS_EQUAL = "<="
    LESS = "<<"

    def accepts(self, comparison: Comparison) -> bool:
        """Return whether a three-way ``comparison`` result satisfies the operator.

        Args:
            comparison: Result of comparing the candidate against the constraint version.

        Returns:
            bool: ``True`` when the operator holds for ``comparison``.
        """

        if self is ConstraintOperator.GREATER:
            return comparison > 0
        if self is ConstraintOperator.GREATER_EQUAL:
            return comparison >= 0
        if self is ConstraintOperator.EQUAL:
            return comparison == 0
        if self is ConstraintOperator.LESS_EQUAL:
            return comparison <= 0
        return comparison < 0


# Two-character operators come first so "=" never matches inside ">=" or "<=".
_EXPRESSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s*(>>|>=|<=|<<|=) (\S+)\s*")


@dataclass(frozen=True, slots=True)
class VersionConstraint:
    """A parsed ``"<op> <version>"`` expression."""

    operator: ConstraintOperator
    version: str

    @classmethod
    def parse(cls, expression: object) -> VersionConstraint:
        """Parse ``expression`` into an operator and version.

        The grammar is an operator token, exactly one space and a dotted
        numeric version, optionally surrounded by whitespace.

        Args:
            expression: Raw constraint expression.

        Returns:
            VersionConstraint: Parsed constraint.

        Raises:
            InvalidConstraintExpression: If the expression does not follow the grammar.
        """

        if not isinstance(expression, str):
            raise InvalidConstraintExpression(expression)
        match = _EXPRESSION_PATTERN.fullmatch(expression)
        if match is None or not is_valid_version(match.group(2)):
            raise InvalidConstraintExpression(expression)
        return cls(operator=ConstraintOperator(match.group(1)), version=match.group(2))

    def satisfied_by(self, candidate: str) -> bool:
        """Return whether ``candidate`` satisfies this constraint.

        Args:
            candidate: Version to test.

        Returns:
            bool: ``True`` when the candidate matches the constraint.

        Raises:
            InvalidVersionFormat: If ``candidate`` is not a dotted numeric version.
        """

        return self.operator.accepts(compare_versions(candidate, self.version))

    def __str__(self) -> str:
        return f"{self.operator.value} {self.version}"


def check_version_expression(expression: str) -> tuple[str, str]:
    """Return the ``(operator, version)`` pair of ``expression``.

    Raises:
        InvalidConstraintExpression: If the expression is malformed.
    """

    constraint = VersionConstraint.parse(expression)
    return constraint.operator.value, constraint.version


def check_valid_version(candidate: str, expression: str) -> bool:
    """Return whether ``candidate`` satisfies ``expression``.

    Raises:
        InvalidConstraintExpression: If the expression is malformed.
        InvalidVersionFormat: If ``candidate`` is malformed.
    """

    return VersionConstraint.parse(expression).satisfied_by(candidate)


def normalize_expressions(expressions: Iterable[object]) -> list[str]:
    """Validate every expression and return their normalised forms.

    Nothing is returned unless all expressions parse, so callers can store the
    result without risking a partial write.

    Args:
        expressions: Raw constraint expressions.

    Returns:
        list[str]: Normalised ``"<op> <version>"`` strings in input order.

    Raises:
        InvalidConstraintExpression: On the first malformed expression.
    """

    return [str(VersionConstraint.parse(expression)) for expression in expressions]


def allows_all(candidate: str, expressions: Iterable[str]) -> bool:
    """Return whether ``candidate`` satisfies every expression in ``expressions``."""

    return all(VersionConstraint.parse(expression).satisfied_by(candidate) for expression in expressions)


__all__ = [
    "ConstraintOperator",
    "VersionConstraint",
    "allows_all",
    "check_valid_version",
    "check_version_expression",
    "normalize_expressions",
]
