# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Command-line interface for inspecting and generating cookbook metadata."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer
from rich.table import Table

from .config import load_settings
from .constraint import VersionConstraint
from .errors import ConfigError, MetadataError, MetadataValidationError
from .loader import METADATA_FILENAME, build_metadata, load_metadata, write_metadata
from .logging import configure_logging, detect_tty, fail, get_console, info, ok, section, warn
from .metadata import CookbookMetadata
from .registry import RelationKind

EXIT_OK: Final[int] = 0
EXIT_FAILED: Final[int] = 1
EXIT_USAGE: Final[int] = 2

app = typer.Typer(
    name="cookbook-meta",
    help="Inspect, validate and generate cookbook metadata documents.",
    no_args_is_help=True,
    add_completion=False,
)


@dataclass(slots=True)
class OutputOptions:
    """Presentation flags shared by every command."""

    use_color: bool
    use_emoji: bool


def _options(ctx: typer.Context) -> OutputOptions:
    options = ctx.obj
    if isinstance(options, OutputOptions):
        return options
    return OutputOptions(use_color=detect_tty(), use_emoji=False)


@app.callback()
def main(
    ctx: typer.Context,
    color: Annotated[bool, typer.Option("--color/--no-color", help="Colourise output.")] = True,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Prefix messages with emoji.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging.")] = False,
) -> None:
    """Configure shared output options."""

    configure_logging(verbose=verbose)
    ctx.obj = OutputOptions(use_color=color and detect_tty(), use_emoji=emoji)


@app.command()
def generate(
    ctx: typer.Context,
    cookbook_dir: Annotated[Path, typer.Argument(help="Cookbook directory to scan.")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Destination file (defaults to <cookbook>/metadata.json)."),
    ] = None,
    name: Annotated[str | None, typer.Option("--name", help="Cookbook name override.")] = None,
    config: Annotated[Path | None, typer.Option("--config", help="Settings TOML file.")] = None,
) -> None:
    """Scan a cookbook's recipes and write its metadata document."""

    options = _options(ctx)
    if not cookbook_dir.is_dir():
        fail(f"{cookbook_dir} is not a directory", use_emoji=options.use_emoji, use_color=options.use_color)
        raise typer.Exit(code=EXIT_USAGE)
    try:
        settings = load_settings(config)
    except ConfigError as exc:
        fail(str(exc), use_emoji=options.use_emoji, use_color=options.use_color)
        raise typer.Exit(code=EXIT_USAGE) from exc
    metadata = build_metadata(cookbook_dir, name=name, settings=settings)
    if not metadata.recipes:
        warn(f"No recipes found in {cookbook_dir}", use_emoji=options.use_emoji, use_color=options.use_color)
    destination = write_metadata(output or cookbook_dir / METADATA_FILENAME, metadata)
    ok(
        f"Wrote metadata for {metadata.name} ({len(metadata.recipes)} recipe(s)) to {destination}",
        use_emoji=options.use_emoji,
        use_color=options.use_color,
    )


@app.command()
def show(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Metadata JSON document.")],
) -> None:
    """Render a metadata document as tables."""

    options = _options(ctx)
    metadata = _load_or_exit(path, options)
    console = get_console(color=options.use_color)
    section(f"{metadata.name} {metadata.version}", use_color=options.use_color)
    console.print(_summary_table(metadata))
    console.print(_constraints_table("Platforms", "platform", metadata.platforms))
    for kind in RelationKind:
        table = metadata.relation(kind).query()
        if table:
            console.print(_constraints_table(kind.table_name.capitalize(), "name", table))
    if metadata.recipes:
        recipes = Table(title="Recipes")
        recipes.add_column("recipe")
        recipes.add_column("description")
        for recipe, description in metadata.recipes.items():
            recipes.add_row(recipe, description)
        console.print(recipes)
    if metadata.attributes:
        attributes = Table(title="Attributes")
        for column in ("path", "type", "required", "default"):
            attributes.add_column(column)
        for attribute_path, options_map in metadata.attributes.items():
            attributes.add_row(
                attribute_path,
                str(options_map["type"]),
                str(options_map["required"]),
                repr(options_map["default"]),
            )
        console.print(attributes)


@app.command()
def validate(
    ctx: typer.Context,
    paths: Annotated[list[Path], typer.Argument(help="Metadata JSON documents.")],
) -> None:
    """Validate metadata documents against the schema and constraint rules."""

    options = _options(ctx)
    failures = 0
    for path in paths:
        try:
            metadata = load_metadata(path)
        except (FileNotFoundError, MetadataError) as exc:
            failures += 1
            fail(_error_message(path, exc), use_emoji=options.use_emoji, use_color=options.use_color)
            continue
        ok(f"{path}: {metadata.name or '<unnamed>'} is valid", use_emoji=options.use_emoji, use_color=options.use_color)
    if failures:
        raise typer.Exit(code=EXIT_FAILED)


@app.command()
def check(
    ctx: typer.Context,
    version: Annotated[str, typer.Argument(help="Candidate version, e.g. 8.04.")],
    expressions: Annotated[list[str], typer.Argument(help="Constraints such as '>= 8.04'.")],
) -> None:
    """Exit 0 when VERSION satisfies every EXPRESSION, 1 otherwise."""

    options = _options(ctx)
    try:
        constraints = [VersionConstraint.parse(expression) for expression in expressions]
        failed = [str(constraint) for constraint in constraints if not constraint.satisfied_by(version)]
    except MetadataError as exc:
        fail(str(exc), use_emoji=options.use_emoji, use_color=options.use_color)
        raise typer.Exit(code=EXIT_USAGE) from exc
    if failed:
        info(f"{version} does not satisfy {', '.join(failed)}", use_emoji=options.use_emoji, use_color=options.use_color)
        raise typer.Exit(code=EXIT_FAILED)
    ok(f"{version} satisfies {', '.join(expressions)}", use_emoji=options.use_emoji, use_color=options.use_color)


def _load_or_exit(path: Path, options: OutputOptions) -> CookbookMetadata:
    try:
        return load_metadata(path)
    except (FileNotFoundError, MetadataError) as exc:
        fail(_error_message(path, exc), use_emoji=options.use_emoji, use_color=options.use_color)
        raise typer.Exit(code=EXIT_FAILED) from exc


def _error_message(path: Path, exc: Exception) -> str:
    if isinstance(exc, FileNotFoundError):
        return f"{path}: no such file"
    if isinstance(exc, MetadataValidationError):
        return str(exc)
    return f"{path}: {exc}"


def _summary_table(metadata: CookbookMetadata) -> Table:
    table = Table(title="Cookbook", show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    for label, value in (
        ("name", metadata.name),
        ("version", metadata.version),
        ("maintainer", f"{metadata.maintainer} <{metadata.maintainer_email}>"),
        ("license", metadata.license),
        ("description", metadata.description),
    ):
        table.add_row(label, value)
    return table


def _constraints_table(title: str, key_label: str, data: dict[str, list[str]]) -> Table:
    table = Table(title=title)
    table.add_column(key_label)
    table.add_column("constraints")
    for key, expressions in data.items():
        table.add_row(key, ", ".join(expressions))
    return table


__all__ = ["app"]
