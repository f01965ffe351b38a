"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from osrel.core.errors import ErrorCode
from osrel.core.result import Err
from osrel.output.console import Style
from osrel.release.loader import open_source
from osrel.release.parser import parse_lines
from osrel.release.record import OsRelease

if TYPE_CHECKING:
    from osrel.cli.context import CLIContext


def load_record(ctx: CLIContext, path: Path | None, *, verbose: bool = False) -> OsRelease:
    """Read the requested (or configured) os-release file, or exit.

    Exits with ErrorCode.IO_ERROR when no file can be read.
    """
    paths = ctx.config.paths
    result = open_source(path, primary=paths.primary, fallback=paths.fallback)
    if isinstance(result, Err):
        error = result.error
        ctx.console.error(error.message)
        if error.hint:
            ctx.console.print(f"hint: {error.hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    source = result.value
    if verbose:
        ctx.console.info(f"source: {source.path}")
    return parse_lines(source.lines)
