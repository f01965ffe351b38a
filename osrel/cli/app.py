from __future__ import annotations

import os
from pathlib import Path

import typer

from osrel import __version__
from osrel.cli.commands.describe import describe
from osrel.cli.commands.get import get
from osrel.cli.commands.show import show
from osrel.cli.context import CONFIG_ENV
from osrel.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(show)
app.command()(get)
app.command()(describe)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: ~/.config/osrel/config.toml)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if config is not None:
        path = config.expanduser()
        if not path.is_file():
            typer.echo(f"error: --config '{path}' is not a file", err=True)
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

        os.environ[CONFIG_ENV] = str(path)


def main() -> None:
    app()
