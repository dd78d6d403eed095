# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Aggregate metadata describing a single cookbook."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .attributes import AttributeSchema
from .config import MetadataSettings
from .cookbook import Cookbook
from .errors import UnknownRecipeError
from .registry import ConstraintTable, DependencyRegistry, RelationKind
from .types import ConstraintTableData, JSONValue
from .utils import expect_string

LOGGER = logging.getLogger(__name__)


class CookbookMetadata:
    """Identity, authorship, platform support, relations, attributes and recipes of a cookbook.

    Scalar fields are read through properties and written through the
    matching ``set_*`` method, which validates the value and returns what was
    stored. Every declaration validates its input before writing anything.

    Args:
        cookbook: Owning cookbook; its name and recipe files seed the metadata.
        maintainer: Maintainer name overriding the settings default.
        maintainer_email: Maintainer e-mail overriding the settings default.
        license: License overriding the settings default.
        settings: Defaults for fields not supplied explicitly.
    """

    def __init__(
        self,
        cookbook: Cookbook | None = None,
        maintainer: str | None = None,
        maintainer_email: str | None = None,
        license: str | None = None,
        *,
        settings: MetadataSettings | None = None,
    ) -> None:
        resolved = settings or MetadataSettings()
        self._cookbook = cookbook
        self._name = cookbook.name if cookbook is not None else ""
        self._description = ""
        self._long_description = ""
        self._maintainer = resolved.maintainer
        self._maintainer_email = resolved.maintainer_email
        self._license = resolved.license
        self._version = resolved.version
        self._platforms = ConstraintTable("supports")
        self._relations = DependencyRegistry()
        self._attributes: dict[str, AttributeSchema] = {}
        self._recipes: dict[str, str] = {}

        if maintainer is not None:
            self.set_maintainer(maintainer)
        if maintainer_email is not None:
            self.set_maintainer_email(maintainer_email)
        if license is not None:
            self.set_license(license)
        if cookbook is not None:
            for name in cookbook.recipe_names():
                if name not in self._recipes:
                    self.register_recipe(name)

    # Scalar fields -----------------------------------------------------

    @property
    def cookbook(self) -> Cookbook | None:
        """Return the cookbook this metadata was created for."""

        return self._cookbook

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, value: str) -> str:
        """Rename the cookbook and return the stored name."""

        self._name = expect_string(value, key="name", context="metadata")
        return self._name

    @property
    def description(self) -> str:
        return self._description

    def set_description(self, value: str) -> str:
        self._description = expect_string(value, key="description", context="metadata")
        return self._description

    @property
    def long_description(self) -> str:
        return self._long_description

    def set_long_description(self, value: str) -> str:
        self._long_description = expect_string(value, key="long_description", context="metadata")
        return self._long_description

    @property
    def maintainer(self) -> str:
        return self._maintainer

    def set_maintainer(self, value: str) -> str:
        self._maintainer = expect_string(value, key="maintainer", context="metadata")
        return self._maintainer

    @property
    def maintainer_email(self) -> str:
        return self._maintainer_email

    def set_maintainer_email(self, value: str) -> str:
        self._maintainer_email = expect_string(value, key="maintainer_email", context="metadata")
        return self._maintainer_email

    @property
    def license(self) -> str:
        return self._license

    def set_license(self, value: str) -> str:
        self._license = expect_string(value, key="license", context="metadata")
        return self._license

    @property
    def version(self) -> str:
        return self._version

    def set_version(self, value: str) -> str:
        """Set the cookbook version; dotted numbers are expected but not enforced."""

        self._version = expect_string(value, key="version", context="metadata")
        return self._version

    # Platforms ---------------------------------------------------------

    def supports(self, platform: str, *expressions: str) -> list[str]:
        """Declare support for ``platform`` within the given version constraints.

        Args:
            platform: Platform name such as ``ubuntu``.
            *expressions: Constraint expressions; none means every version.

        Returns:
            list[str]: All constraints now recorded for ``platform``.

        Raises:
            InvalidConstraintExpression: If an expression is malformed.
        """

        return self._platforms.declare(platform, *expressions)

    @property
    def platforms(self) -> ConstraintTableData:
        return self._platforms.query()

    def satisfies_platform(self, platform: str, version: str) -> bool:
        """Return whether ``version`` of ``platform`` is a supported target.

        Raises:
            InvalidVersionFormat: If ``version`` is malformed.
        """

        return platform in self._platforms and self._platforms.allows(platform, version)

    # Relations ---------------------------------------------------------

    def declare(self, kind: RelationKind | str, name: str, *expressions: str) -> list[str]:
        """Declare a relation of ``kind`` against cookbook ``name``.

        Args:
            kind: Relation kind or its verb (``depends``, ``conflicts``...).
            name: Target cookbook or recipe name.
            *expressions: Constraint expressions; none means every version.

        Returns:
            list[str]: All constraints now recorded for ``name`` in that relation.

        Raises:
            InvalidConstraintExpression: If an expression is malformed.
        """

        return self._relations.declare(kind, name, *expressions)

    def depends(self, name: str, *expressions: str) -> list[str]:
        return self.declare(RelationKind.DEPENDS, name, *expressions)

    def recommends(self, name: str, *expressions: str) -> list[str]:
        return self.declare(RelationKind.RECOMMENDS, name, *expressions)

    def suggests(self, name: str, *expressions: str) -> list[str]:
        return self.declare(RelationKind.SUGGESTS, name, *expressions)

    def conflicts(self, name: str, *expressions: str) -> list[str]:
        return self.declare(RelationKind.CONFLICTS, name, *expressions)

    def provides(self, name: str, *expressions: str) -> list[str]:
        return self.declare(RelationKind.PROVIDES, name, *expressions)

    def replaces(self, name: str, *expressions: str) -> list[str]:
        return self.declare(RelationKind.REPLACES, name, *expressions)

    def relation(self, kind: RelationKind | str) -> ConstraintTable:
        """Return the live table for ``kind`` for read-mostly consumers such as solvers."""

        return self._relations.table(kind)

    @property
    def dependencies(self) -> ConstraintTableData:
        return self._relations.query(RelationKind.DEPENDS)

    @property
    def recommendations(self) -> ConstraintTableData:
        return self._relations.query(RelationKind.RECOMMENDS)

    @property
    def suggestions(self) -> ConstraintTableData:
        return self._relations.query(RelationKind.SUGGESTS)

    @property
    def conflicting(self) -> ConstraintTableData:
        return self._relations.query(RelationKind.CONFLICTS)

    @property
    def providing(self) -> ConstraintTableData:
        return self._relations.query(RelationKind.PROVIDES)

    @property
    def replacing(self) -> ConstraintTableData:
        return self._relations.query(RelationKind.REPLACES)

    # Recipes -----------------------------------------------------------

    def register_recipe(self, name: str, description: str = "") -> str:
        """Register recipe ``name`` and make sure the cookbook provides it.

        An unconditional provision is added unless ``name`` is already in the
        ``providing`` table, so explicit provisions are never duplicated.

        Args:
            name: Qualified recipe name.
            description: Free-text description.

        Returns:
            str: The stored description.
        """

        expect_string(name, key="name", context="recipe")
        self._recipes[name] = expect_string(description, key="description", context=f"recipe {name}")
        if name not in self._relations.table(RelationKind.PROVIDES):
            self.provides(name)
        LOGGER.debug("registered recipe %s", name)
        return self._recipes[name]

    def get_recipe(self, name: str) -> str:
        """Return the description of recipe ``name``.

        Raises:
            UnknownRecipeError: If the recipe was never discovered or registered.
        """

        try:
            return self._recipes[name]
        except KeyError as exc:
            raise UnknownRecipeError(name) from exc

    def set_recipe(self, name: str, description: str) -> str:
        """Describe a known recipe and return the stored description.

        Raises:
            UnknownRecipeError: If the recipe was never discovered or registered;
                use :meth:`register_recipe` to add new recipes.
        """

        if name not in self._recipes:
            raise UnknownRecipeError(name)
        self._recipes[name] = expect_string(description, key="description", context=f"recipe {name}")
        return self._recipes[name]

    @property
    def recipes(self) -> dict[str, str]:
        return dict(self._recipes)

    # Attributes --------------------------------------------------------

    def set_attribute(self, path: str, options: Mapping[str, JSONValue] | None = None) -> dict[str, JSONValue]:
        """Validate and record the schema of attribute ``path``.

        Args:
            path: Attribute path such as ``mysql/server/port``.
            options: Attribute options; omitted ones take their defaults.

        Returns:
            dict[str, JSONValue]: The resolved options that were stored.

        Raises:
            InvalidAttributeOption: If an option is unknown or invalid. Nothing
                is stored in that case.
        """

        expect_string(path, key="path", context="attribute")
        schema = AttributeSchema.from_options(options, context=f"attribute {path}")
        self._attributes[path] = schema
        return schema.to_dict()

    def get_attribute(self, path: str) -> AttributeSchema:
        """Return the schema recorded for ``path``.

        Raises:
            KeyError: If no schema was recorded for ``path``.
        """

        return self._attributes[path]

    @property
    def attributes(self) -> dict[str, dict[str, JSONValue]]:
        return {path: schema.to_dict() for path, schema in self._attributes.items()}

    # Canonical view ----------------------------------------------------

    def canonical_fields(self) -> dict[str, JSONValue]:
        """Return every persisted field as plain JSON-compatible containers."""

        fields: dict[str, JSONValue] = {
            "name": self._name,
            "description": self._description,
            "long_description": self._long_description,
            "maintainer": self._maintainer,
            "maintainer_email": self._maintainer_email,
            "license": self._license,
            "version": self._version,
            "platforms": self.platforms,
        }
        fields.update(self._relations.to_dict())
        fields["attributes"] = self.attributes
        fields["recipes"] = self.recipes
        return fields

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CookbookMetadata):
            return NotImplemented
        return self.canonical_fields() == other.canonical_fields()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, version={self._version!r})"


__all__ = ["CookbookMetadata"]
