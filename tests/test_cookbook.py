# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for recipe naming and discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from cookbook_meta import Cookbook, MetadataSettings, recipe_name
from cookbook_meta.cookbook import RecipeScanner


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("default.rb", "apache2"),
        ("mod_ssl.rb", "apache2::mod_ssl"),
        ("recipes/default.rb", "apache2"),
        ("/srv/cookbooks/apache2/recipes/mod_php5.rb", "apache2::mod_php5"),
    ],
)
def test_recipe_name(filename: str, expected: str) -> None:
    """The default recipe takes the bare cookbook name."""
    assert recipe_name("apache2", filename) == expected


def test_scanner_filters_by_extension(cookbook_dir: Path) -> None:
    """Only files with the recipe extension are returned, sorted."""
    files = RecipeScanner(cookbook_dir).recipe_files()
    assert [path.name for path in files] == ["default.rb", "mod_ssl.rb"]


def test_scanner_without_recipes_dir(tmp_path: Path) -> None:
    """A cookbook without recipes has no recipe files."""
    assert RecipeScanner(tmp_path).recipe_files() == ()


def test_from_directory(cookbook_dir: Path) -> None:
    """Directory scans store filenames and derive the name from the directory."""
    cookbook = Cookbook.from_directory(cookbook_dir)
    assert cookbook.name == "apache2"
    assert tuple(cookbook.recipe_files) == ("default.rb", "mod_ssl.rb")
    assert cookbook.recipe_names() == ("apache2", "apache2::mod_ssl")


def test_from_directory_with_settings(cookbook_dir: Path) -> None:
    """Discovery follows the configured directory and extension."""
    (cookbook_dir / "roles").mkdir()
    (cookbook_dir / "roles" / "web.json").write_text("{}", encoding="utf-8")
    settings = MetadataSettings(recipes_dir="roles", recipe_extension="json")
    cookbook = Cookbook.from_directory(cookbook_dir, name="site", settings=settings)
    assert cookbook.recipe_names() == ("site::web",)
