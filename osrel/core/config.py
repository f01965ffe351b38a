"""Typed configuration loading and access.

The config file is optional TOML:

    [paths]
    primary = "/etc/os-release"
    fallback = "/usr/lib/os-release"
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "Config",
    "ConfigError",
    "PathsConfig",
    "default_config_path",
    "load_config",
    "OS_RELEASE_PATH",
    "OS_RELEASE_FALLBACK_PATH",
]

# Locations defined by os-release(5)
OS_RELEASE_PATH = Path("/etc/os-release")
OS_RELEASE_FALLBACK_PATH = Path("/usr/lib/os-release")

APP_NAME = "osrel"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Where the os-release file is looked up."""

    primary: Path = OS_RELEASE_PATH
    fallback: Path = OS_RELEASE_FALLBACK_PATH


def _path_or(table: Mapping[str, object], key: str, default: Path) -> Path:
    # Missing, non-string and blank values keep the default
    value = table.get(key)
    if not isinstance(value, str) or not value.strip():
        return default
    return Path(value.strip()).expanduser()


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    paths: PathsConfig = field(default_factory=PathsConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        paths = data.get("paths")
        if not isinstance(paths, Mapping):
            paths = {}

        return cls(
            paths=PathsConfig(
                primary=_path_or(paths, "primary", OS_RELEASE_PATH),
                fallback=_path_or(paths, "fallback", OS_RELEASE_FALLBACK_PATH),
            ),
        )


def default_config_path() -> Path:
    """Location of the user config file.

    `$XDG_CONFIG_HOME/osrel/config.toml`, or `~/.config/osrel/config.toml`.
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME / "config.toml"
    home_env = os.environ.get("HOME")
    home = Path(home_env) if home_env else Path.home()
    return home / ".config" / APP_NAME / "config.toml"


def _parse_toml(path: Path) -> Result[dict[str, object], ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        return Ok(tomllib.loads(content.decode("utf-8")))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except (UnicodeDecodeError, OSError) as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to config.toml file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
