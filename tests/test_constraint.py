# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for parsing and evaluating version constraint expressions."""

from __future__ import annotations

import pytest

from cookbook_meta.constraint import (
    ConstraintOperator,
    VersionConstraint,
    allows_all,
    check_valid_version,
    check_version_expression,
    normalize_expressions,
)
from cookbook_meta.errors import InvalidConstraintExpression, InvalidVersionFormat


@pytest.mark.parametrize("operator", [">>", ">=", "=", "<=", "<<"])
def test_check_version_expression_accepts_every_operator(operator: str) -> None:
    """Each operator parses into its token and the version string."""
    assert check_version_expression(f"{operator} 8.04") == (operator, "8.04")


def test_parse_round_trips_through_str() -> None:
    """Formatting a parsed expression yields the whitespace-normalised input."""
    for expression in (">> 0.2", ">= 8.04", "= 1.0.0", "<= 10", "<< 3.0"):
        assert str(VersionConstraint.parse(expression)) == expression
    assert str(VersionConstraint.parse("  >= 8.04 ")) == ">= 8.04"


def test_longest_operator_wins() -> None:
    """``>=`` is never read as ``>`` followed by ``=``."""
    constraint = VersionConstraint.parse(">= 1.0")
    assert constraint.operator is ConstraintOperator.GREATER_EQUAL
    assert constraint.version == "1.0"


def test_malformed_expressions_are_rejected() -> None:
    """Unknown operators, missing versions and extra tokens all fail."""
    for expression in (
        "tried to << love you",
        "> 1.0",
        "< 1.0",
        "~> 1.0",
        ">=1.0",
        ">=  1.0",
        ">=",
        ">= ",
        "1.0",
        ">= 1.0 extra",
        ">= one",
        "",
    ):
        with pytest.raises(InvalidConstraintExpression):
            VersionConstraint.parse(expression)
    with pytest.raises(InvalidConstraintExpression):
        VersionConstraint.parse(None)


@pytest.mark.parametrize(
    ("candidate", "expression", "expected"),
    [
        ("8.00", "<< 8.04", True),
        ("9.04", "<< 8.04", False),
        ("8.00", "<= 8.04", True),
        ("8.04", "<= 8.04", True),
        ("9.04", "<= 8.04", False),
        ("8.00", "= 8.04", False),
        ("8.04", "= 8.04", True),
        ("8.00", ">= 8.04", False),
        ("9.04", ">= 8.04", True),
        ("8.04", ">= 8.04", True),
        ("8.00", ">> 8.04", False),
        ("8.04", ">> 8.04", False),
        ("9.04", ">> 8.04", True),
    ],
)
def test_check_valid_version(candidate: str, expression: str, expected: bool) -> None:
    """Candidates are compared against the constraint through its operator."""
    assert check_valid_version(candidate, expression) is expected


def test_evaluation_rejects_malformed_candidate() -> None:
    """A malformed candidate version surfaces as a version format error."""
    with pytest.raises(InvalidVersionFormat):
        check_valid_version("latest", ">= 1.0")


def test_normalize_expressions_is_all_or_nothing() -> None:
    """One bad expression fails the whole batch."""
    assert normalize_expressions([" >= 1.0", "<< 2.0"]) == [">= 1.0", "<< 2.0"]
    with pytest.raises(InvalidConstraintExpression, match="bogus"):
        normalize_expressions([">= 1.0", "bogus"])


def test_allows_all() -> None:
    """Every constraint must hold for a candidate to be allowed."""
    assert allows_all("3.0", [">> 2.0", "<< 4.0"])
    assert not allows_all("4.0", [">> 2.0", "<< 4.0"])
    assert allows_all("0.1", [])


def test_oversized_version_token_fails_at_parse() -> None:
    """A constraint whose version cannot be compared is rejected up front."""
    expression = "<< " + "1" * 5000
    with pytest.raises(InvalidConstraintExpression):
        VersionConstraint.parse(expression)
    with pytest.raises(InvalidVersionFormat):
        check_valid_version("1" * 5000, ">= 1.0")
