# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by cookbook metadata operations."""

from __future__ import annotations


class MetadataError(Exception):
    """Base class for every error raised by :mod:`cookbook_meta`."""


class MetadataIntegrityError(MetadataError, ValueError):
    """Raised when metadata values violate their declared structure."""


class InvalidConstraintExpression(MetadataIntegrityError):
    """Raised when a ``"<op> <version>"`` expression cannot be parsed."""

    def __init__(self, expression: object) -> None:
        """Create the error for the offending ``expression``.

        Args:
            expression: Raw value supplied as a version constraint.
        """

        super().__init__(f"invalid version constraint expression: {expression!r}")
        self.expression = expression


class InvalidVersionFormat(MetadataIntegrityError):
    """Raised when a version is not made of dot-separated non-negative integers."""

    def __init__(self, version: object) -> None:
        """Create the error for the offending ``version``.

        Args:
            version: Raw value supplied as a version string.
        """

        super().__init__(f"invalid version format: {version!r}")
        self.version = version


class InvalidAttributeOption(MetadataIntegrityError):
    """Raised when an attribute option fails its type or enumeration check."""


class UnknownRecipeError(MetadataError, LookupError):
    """Raised when a recipe name was never discovered or registered."""

    def __init__(self, name: str) -> None:
        """Create the error for the unknown recipe ``name``.

        Args:
            name: Recipe name that could not be found.
        """

        super().__init__(f"unknown recipe '{name}'")
        self.name = name


class MetadataValidationError(MetadataError):
    """Raised when a metadata document fails structural schema validation."""


class ConfigError(MetadataError):
    """Raised when settings input is invalid."""


__all__ = (
    "ConfigError",
    "InvalidAttributeOption",
    "InvalidConstraintExpression",
    "InvalidVersionFormat",
    "MetadataError",
    "MetadataIntegrityError",
    "MetadataValidationError",
    "UnknownRecipeError",
)
