from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from osrel.core.config import Config, default_config_path, load_config
from osrel.core.errors import ErrorCode
from osrel.core.result import Err
from osrel.output.console import ConsoleProtocol, RichConsole

# Set by the --config global option, or by the user's environment
CONFIG_ENV = "OSREL_CONFIG"


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    config_path: Path | None
    console: ConsoleProtocol


def _config_path() -> Path | None:
    explicit = os.environ.get(CONFIG_ENV)
    if explicit:
        return Path(explicit).expanduser()
    default = default_config_path()
    return default if default.is_file() else None


def build_context() -> CLIContext:
    console = RichConsole()
    path = _config_path()

    config = Config()
    if path is not None:
        result = load_config(path)
        if isinstance(result, Err):
            console.error(result.error.message)
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
        config = result.value

    return CLIContext(config=config, config_path=path, console=console)
