"""Parsing and loading of os-release files."""

from .cache import ReleaseCell, os_release
from .family import LinuxDistro, describe_os, detect_linux_distro, distro_family
from .loader import LoadError, Source, load, load_from_config, open_source, read_lines
from .parser import parse_lines, parse_text, parse_value
from .record import KNOWN_KEYS, OsRelease

__all__ = [
    # cache
    "ReleaseCell",
    "os_release",
    # family
    "LinuxDistro",
    "describe_os",
    "detect_linux_distro",
    "distro_family",
    # loader
    "LoadError",
    "Source",
    "load",
    "load_from_config",
    "open_source",
    "read_lines",
    # parser
    "parse_lines",
    "parse_text",
    "parse_value",
    # record
    "KNOWN_KEYS",
    "OsRelease",
]
