from __future__ import annotations

from pathlib import Path

import typer

from osrel.cli.commands._helpers import load_record
from osrel.cli.context import build_context
from osrel.output.console import Style
from osrel.release.family import LinuxDistro, describe_os, distro_family


def describe(
    path: Path | None = typer.Option(
        None, "--path", "-p", help="os-release file to read (no fallback lookup)."
    ),
) -> None:
    """Print a short OS tag (ID + VERSION_ID) and the distro family."""
    ctx = build_context()
    record = load_record(ctx, path)

    ctx.console.print(describe_os(record), Style.BOLD)

    family = distro_family(record)
    ctx.console.print(f"family: {family}", Style.DIM)
    if family != LinuxDistro.UNKNOWN:
        ctx.console.print(f"package manager: {family.package_manager}", Style.DIM)
