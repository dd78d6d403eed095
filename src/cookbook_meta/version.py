# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for validating and comparing dotted cookbook versions."""

from __future__ import annotations

import re
from typing import Final, Literal

from packaging.version import Version

from .errors import InvalidVersionFormat

VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+(?:\.[0-9]+)*")

Comparison = Literal[-1, 0, 1]


def is_valid_version(raw: object) -> bool:
    """Return ``True`` when ``raw`` is a dot-separated list of non-negative integers."""

    try:
        parse_version(raw)
    except InvalidVersionFormat:
        return False
    return True


def parse_version(raw: object) -> Version:
    """Return the comparable form of ``raw``.

    Only plain release numbers are accepted: ``"8.04"`` and ``"1.2.3"`` are
    valid while ``"1.0a1"``, ``"v1"`` or ``"1..2"`` are not. Components are
    compared numerically and missing trailing components count as zero.

    Args:
        raw: Version string to parse.

    Returns:
        Version: Parsed version used for ordering.

    Raises:
        InvalidVersionFormat: If ``raw`` is not a dotted numeric version.
    """

    if not isinstance(raw, str) or VERSION_PATTERN.fullmatch(raw) is None:
        raise InvalidVersionFormat(raw)
    # Components beyond the interpreter's int conversion limit raise a plain ValueError.
    try:
        return Version(raw)
    except ValueError as exc:
        raise InvalidVersionFormat(raw) from exc


def compare_versions(left: str, right: str) -> Comparison:
    """Compare two dotted versions component by component.

    Args:
        left: Candidate version.
        right: Reference version.

    Returns:
        Comparison: ``-1`` when ``left`` is lower, ``0`` when equal and ``1``
        when ``left`` is higher.

    Raises:
        InvalidVersionFormat: If either version is malformed.
    """

    left_version = parse_version(left)
    right_version = parse_version(right)
    if left_version < right_version:
        return -1
    if left_version > right_version:
        return 1
    return 0


__all__ = ["VERSION_PATTERN", "Comparison", "compare_versions", "is_valid_version", "parse_version"]
