from __future__ import annotations

from pathlib import Path

import typer

from osrel.cli.commands._helpers import load_record
from osrel.cli.context import build_context
from osrel.core.errors import ErrorCode


def get(
    key: str = typer.Argument(..., help="os-release key, e.g. VERSION_ID."),
    path: Path | None = typer.Option(
        None, "--path", "-p", help="os-release file to read (no fallback lookup)."
    ),
) -> None:
    """Print the value of one os-release key."""
    ctx = build_context()
    record = load_record(ctx, path)

    value = record.get(key)
    if not value:
        ctx.console.error(f"{key}: not set")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    ctx.console.print(value)
