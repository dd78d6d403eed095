# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Settings controlling metadata defaults and recipe discovery."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .version import is_valid_version

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "cookbook-meta"


class MetadataSettings(BaseModel):
    """Defaults applied to newly created metadata and discovery rules."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    maintainer: str = "Your Name"
    maintainer_email: str = "youremail@example.com"
    license: str = "Apache v2.0"
    version: str = "0.0.0"
    recipes_dir: str = Field(default="recipes", min_length=1)
    recipe_extension: str = ".rb"

    @field_validator("version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        if not is_valid_version(value):
            raise ValueError(f"default version '{value}' is not a dotted numeric version")
        return value

    @field_validator("recipe_extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if value and not value.startswith("."):
            return f".{value}"
        return value


def load_settings(path: Path | None = None) -> MetadataSettings:
    """Load settings from a TOML document.

    ``pyproject.toml`` files contribute their ``[tool.cookbook-meta]`` table;
    any other file is read as a whole. Without a path the defaults apply.

    Args:
        path: Optional settings file.

    Returns:
        MetadataSettings: Validated settings.

    Raises:
        ConfigError: If the file is missing, cannot be parsed or holds invalid values.
    """

    if path is None:
        return MetadataSettings()
    if not path.is_file():
        raise ConfigError(f"{path}: settings file not found")
    try:
        with path.open("rb") as handle:
            document: dict[str, Any] = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: failed to parse TOML: {exc}") from exc
    section: Any = document
    if path.name == PYPROJECT_FILENAME:
        tool_section = document.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return MetadataSettings()
        section = tool_section.get(PYPROJECT_SECTION_KEY, {})
    if not isinstance(section, Mapping):
        raise ConfigError(f"{path}: settings must be a table")
    return settings_from_mapping(section, source=str(path))


def settings_from_mapping(data: Mapping[str, Any], *, source: str = "<mapping>") -> MetadataSettings:
    """Validate ``data`` into :class:`MetadataSettings`.

    Keys may use dashes or underscores.

    Raises:
        ConfigError: If validation fails.
    """

    normalised = {str(key).replace("-", "_"): value for key, value in data.items()}
    try:
        return MetadataSettings.model_validate(normalised)
    except ValidationError as exc:
        raise ConfigError(f"{source}: invalid settings: {exc}") from exc


__all__ = ["MetadataSettings", "load_settings", "settings_from_mapping"]
