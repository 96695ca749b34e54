# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the render, ref and facts commands."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from ..config import Settings, load_settings
from ..errors import ArgumentError, ConfigError, SerializationError
from ..facts import FactsTerminus, StaticFactSource
from ..logging import Level, report
from ..manifest import render, render_all
from ..resource import Resource
from ..serialization import load_many, serialize

app = typer.Typer(help="Inspect and render declarative resources.", no_args_is_help=True, add_completion=False)

RootOption = Annotated[
    Path,
    typer.Option("--root", help="Directory holding pyproject.toml / statecraft.toml.", file_okay=False),
]


class FactsFormat(str, Enum):
    """Output formats supported by ``statecraft facts``."""

    MANIFEST = "manifest"
    JSON = "json"


def _settings_or_exit(root: Path) -> Settings:
    try:
        return load_settings(root)
    except ConfigError as exc:
        report(Level.ERROR, str(exc))
        raise typer.Exit(code=1) from exc


def _load_resources(paths: list[Path], settings: Settings) -> list[Resource]:
    resources: list[Resource] = []
    for path in paths:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            report(Level.ERROR, f"{path}: {exc.strerror or exc}", settings)
            raise typer.Exit(code=1) from exc
        try:
            loaded = load_many(text)
        except SerializationError as exc:
            report(Level.ERROR, f"{path}: {exc}", settings)
            raise typer.Exit(code=1) from exc
        for resource in loaded:
            if resource.file is None:
                resource.file = str(path)
        resources.extend(loaded)
    return resources


@app.command("render")
def render_command(
    paths: Annotated[list[Path], typer.Argument(help="JSON files holding serialized resources.")],
    root: RootOption = Path("."),
) -> None:
    """Print the manifest text for every serialized resource."""

    settings = _settings_or_exit(root)
    resources = _load_resources(paths, settings)
    typer.echo(render_all(resources), nl=False)


@app.command("ref")
def ref_command(
    paths: Annotated[list[Path], typer.Argument(help="JSON files holding serialized resources.")],
    root: RootOption = Path("."),
) -> None:
    """Print the canonical reference of every serialized resource, sorted."""

    settings = _settings_or_exit(root)
    resources = _load_resources(paths, settings)
    for reference in sorted(resource.reference for resource in resources):
        typer.echo(str(reference))


@app.command("facts")
def facts_command(
    facts_file: Annotated[
        Path,
        typer.Option("--facts-file", help="JSON object mapping fact names to values.", dir_okay=False),
    ],
    name: Annotated[str | None, typer.Option("--name", help="Node name; defaults to the certname.")] = None,
    output: Annotated[FactsFormat, typer.Option("--format", help="Output format.")] = FactsFormat.MANIFEST,
    root: RootOption = Path("."),
) -> None:
    """Retrieve facts through the read-only terminus and print them."""

    settings = _settings_or_exit(root)
    try:
        snapshot = json.loads(facts_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        report(Level.ERROR, f"{facts_file}: unable to read facts: {exc}", settings)
        raise typer.Exit(code=1) from exc
    if not isinstance(snapshot, dict):
        report(Level.ERROR, f"{facts_file}: expected a JSON object", settings)
        raise typer.Exit(code=1)

    terminus = FactsTerminus(StaticFactSource(snapshot), settings)
    node = name or settings.certname
    facts = terminus.find(node)
    try:
        resource = facts.to_resource()
    except ArgumentError as exc:
        report(Level.ERROR, f"{facts_file}: {exc}", settings)
        raise typer.Exit(code=1) from exc
    if output is FactsFormat.JSON:
        typer.echo(json.dumps(serialize(resource, stringify=settings.stringify_facts), indent=2))
        return
    report(Level.INFO, f"{len(facts.values)} facts for {node}", settings)
    typer.echo(render(resource), nl=False)


def main() -> None:
    """Run the statecraft CLI."""

    app()


__all__ = ["app", "main"]
