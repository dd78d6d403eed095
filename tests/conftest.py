# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from cookbook_meta import Cookbook, CookbookMetadata


@pytest.fixture
def cookbook() -> Cookbook:
    """Return a cookbook with a default and an ``enlighten`` recipe."""
    return Cookbook("test_cookbook", ["default.rb", "enlighten.rb"])


@pytest.fixture
def metadata(cookbook: Cookbook) -> CookbookMetadata:
    """Return metadata seeded from :func:`cookbook`."""
    return CookbookMetadata(cookbook)


@pytest.fixture
def populated_metadata(metadata: CookbookMetadata) -> CookbookMetadata:
    """Return metadata with every kind of field declared."""
    metadata.set_version("1.0")
    metadata.set_maintainer("Bobo T. Clown")
    metadata.set_maintainer_email("bobo@example.com")
    metadata.set_description("Clowns around")
    metadata.set_long_description("I have a long arm!")
    metadata.set_license("Clown License v1")
    metadata.supports("ubuntu", ">> 8.04")
    metadata.supports("debian", ">= 5.0", "<< 7.0")
    metadata.depends("bobo", "= 1.0")
    metadata.depends("bobotclown", "= 1.1")
    metadata.recommends("snark", "<< 3.0")
    metadata.suggests("kindness", ">> 2.0", "<< 4.0")
    metadata.conflicts("hatred")
    metadata.provides("foo(:bar, :baz)")
    metadata.replaces("snarkitron")
    metadata.set_recipe("test_cookbook::enlighten", "is your buddy")
    metadata.set_attribute("bizspark/has_login", {"display_name": "You have nothing"})
    metadata.set_attribute(
        "apache/listen_ports",
        {
            "display_name": "Listen ports",
            "description": "Ports keyed by protocol",
            "type": "hash",
            "required": True,
            "recipes": ["test_cookbook", "test_cookbook::enlighten"],
            "default": {"http": "80", "https": "443"},
        },
    )
    metadata.set_attribute("apache/user", {"default": "www-data"})
    metadata.set_attribute(
        "apache/modules",
        {"type": "array", "multiple_values": True, "default": ["ssl", "rewrite"]},
    )
    return metadata


@pytest.fixture
def cookbook_dir(tmp_path: Path) -> Path:
    """Return a cookbook directory holding two recipes and a stray file."""
    root = tmp_path / "apache2"
    recipes = root / "recipes"
    recipes.mkdir(parents=True)
    (recipes / "default.rb").write_text("package 'apache2'\n", encoding="utf-8")
    (recipes / "mod_ssl.rb").write_text("include_recipe 'apache2'\n", encoding="utf-8")
    (recipes / "README.md").write_text("notes\n", encoding="utf-8")
    return root
