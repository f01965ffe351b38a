"""Show command - print the parsed os-release record."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from osrel.cli.commands._helpers import load_record
from osrel.cli.context import build_context
from osrel.output.console import Style
from osrel.release.record import OsRelease


def show(
    path: Path | None = typer.Option(
        None, "--path", "-p", help="os-release file to read (no fallback lookup)."
    ),
    all_fields: bool = typer.Option(False, "--all", "-a", help="Include empty fields."),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print the file that was read."),
) -> None:
    """Show the os-release record."""
    ctx = build_context()
    record = load_record(ctx, path, verbose=verbose)

    values = record.as_dict(include_empty=all_fields)
    if as_json:
        ctx.console.print(json.dumps(values, indent=2))
        return

    for key, value in values.items():
        ctx.console.print(f"{key}: {value}", _style_for(record, key))


def _style_for(record: OsRelease, key: str) -> Style:
    # Keys outside the known schema are shown muted
    if key in record.extra:
        return Style.DIM
    return Style.DEFAULT
