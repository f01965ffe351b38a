"""Locate and read os-release files.

The default lookup follows os-release(5): `/etc/os-release` first, then
`/usr/lib/os-release`. An explicit path is read as-is with no fallback.
Failures are returned as `Err(LoadError)`; nothing here raises for I/O.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from osrel.core.config import OS_RELEASE_FALLBACK_PATH, OS_RELEASE_PATH, Config
from osrel.core.result import Err, Ok, Result

from .parser import parse_lines
from .record import OsRelease

__all__ = [
    "LoadError",
    "Source",
    "load",
    "load_from_config",
    "open_source",
    "read_lines",
]


@dataclass(frozen=True, slots=True)
class LoadError:
    """The os-release file could not be read.

    Attributes:
        message: Human readable summary naming every path tried.
        paths: Paths that were tried, in order.
        causes: Underlying error for each path, same order as `paths`.
        hint: Optional suggestion for the user.
    """

    message: str
    paths: tuple[Path, ...] = ()
    causes: tuple[str, ...] = ()
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class Source:
    """Lines read from an os-release file, with the path they came from."""

    path: Path
    lines: list[str]


def _describe(e: OSError) -> str:
    return e.strerror or str(e)


def _decode_lines(chunks: Iterable[bytes]) -> list[str]:
    lines: list[str] = []
    for chunk in chunks:
        try:
            text = chunk.decode("utf-8")
        except UnicodeDecodeError:
            # Undecodable lines are dropped like any other unusable line
            continue
        lines.append(text.rstrip("\r\n"))
    return lines


def read_lines(path: Path) -> Result[list[str], LoadError]:
    """Read one file as a list of text lines without line endings."""
    try:
        with path.open("rb") as handle:
            return Ok(_decode_lines(handle))
    except OSError as e:
        cause = _describe(e)
        return Err(
            LoadError(
                f"unable to open file at {path}: {cause}",
                paths=(path,),
                causes=(cause,),
            )
        )


def open_source(
    path: Path | str | None = None,
    *,
    primary: Path = OS_RELEASE_PATH,
    fallback: Path = OS_RELEASE_FALLBACK_PATH,
) -> Result[Source, LoadError]:
    """Resolve which file to read and read it.

    Args:
        path: Explicit file to read; disables the fallback lookup.
        primary: First location tried when `path` is None.
        fallback: Location tried when `primary` cannot be read.
    """
    if path is not None:
        explicit = Path(path)
        return read_lines(explicit).map(lambda lines: Source(explicit, lines))

    first = read_lines(primary)
    if isinstance(first, Ok):
        return Ok(Source(primary, first.value))

    second = read_lines(fallback)
    if isinstance(second, Ok):
        return Ok(Source(fallback, second.value))

    causes = first.error.causes + second.error.causes
    return Err(
        LoadError(
            f"unable to open {primary} ({causes[0]}) or fallback {fallback} ({causes[1]})",
            paths=(primary, fallback),
            causes=causes,
            hint="pass an explicit path to an os-release file",
        )
    )


def load(
    path: Path | str | None = None,
    *,
    primary: Path = OS_RELEASE_PATH,
    fallback: Path = OS_RELEASE_FALLBACK_PATH,
) -> Result[OsRelease, LoadError]:
    """Read and parse an os-release file.

    Returns:
        Ok(OsRelease) on success, Err(LoadError) if no file could be read.
    """
    source = open_source(path, primary=primary, fallback=fallback)
    return source.map(lambda s: parse_lines(s.lines))


def load_from_config(config: Config) -> Result[OsRelease, LoadError]:
    """Read and parse the os-release file from the configured locations."""
    return load(primary=config.paths.primary, fallback=config.paths.fallback)
