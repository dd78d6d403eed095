# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Cookbook references and recipe discovery."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path, PurePath

from .config import MetadataSettings
from .types import DEFAULT_RECIPE, RECIPE_SEPARATOR

LOGGER = logging.getLogger(__name__)


def recipe_name(cookbook_name: str, filename: str) -> str:
    """Return the qualified recipe name for a recipe source file.

    The ``default`` recipe is addressed by the bare cookbook name; every other
    recipe ``X`` becomes ``<cookbook>::X``.

    Args:
        cookbook_name: Name of the owning cookbook.
        filename: Recipe source filename; directories and extension are ignored.

    Returns:
        str: Qualified recipe name.
    """

    stem = PurePath(filename).stem
    if stem == DEFAULT_RECIPE:
        return cookbook_name
    return f"{cookbook_name}{RECIPE_SEPARATOR}{stem}"


@dataclass(slots=True)
class RecipeScanner:
    """Scan a cookbook directory for recipe source files."""

    cookbook_root: Path
    recipes_dir: str = "recipes"
    extension: str = ".rb"

    def recipe_files(self) -> tuple[Path, ...]:
        """Return sorted recipe file paths.

        Returns:
            tuple[Path, ...]: Recipe files directly inside the recipes directory.
        """
        recipes_root = self.cookbook_root / self.recipes_dir
        if not recipes_root.is_dir():
            return ()
        paths = [path for path in recipes_root.iterdir() if path.is_file() and path.suffix == self.extension]
        return tuple(sorted(paths))


@dataclass(slots=True)
class Cookbook:
    """A cookbook as seen by its metadata: a name and its recipe files."""

    name: str
    recipe_files: Sequence[str] = ()

    def recipe_names(self) -> tuple[str, ...]:
        """Return qualified recipe names in recipe-file order."""

        return tuple(recipe_name(self.name, filename) for filename in self.recipe_files)

    @classmethod
    def from_directory(
        cls,
        root: Path,
        *,
        name: str | None = None,
        settings: MetadataSettings | None = None,
    ) -> Cookbook:
        """Build a cookbook reference from a directory on disk.

        Args:
            root: Cookbook directory.
            name: Cookbook name; defaults to the directory name.
            settings: Discovery settings; defaults apply when omitted.

        Returns:
            Cookbook: Cookbook whose recipe files were discovered under ``root``.
        """

        resolved = settings or MetadataSettings()
        scanner = RecipeScanner(
            root,
            recipes_dir=resolved.recipes_dir,
            extension=resolved.recipe_extension,
        )
        files = tuple(path.name for path in scanner.recipe_files())
        cookbook_name = name or root.resolve().name
        LOGGER.debug("discovered %d recipe(s) for cookbook %s", len(files), cookbook_name)
        return cls(name=cookbook_name, recipe_files=files)


__all__ = ["Cookbook", "RecipeScanner", "recipe_name"]
