"""Parse os-release files into typed records."""

from osrel.core.result import Err, Ok, Result
from osrel.release import (
    KNOWN_KEYS,
    LinuxDistro,
    LoadError,
    OsRelease,
    describe_os,
    distro_family,
    load,
    os_release,
    parse_lines,
    parse_text,
)

__version__ = "0.3.0"

__all__ = [
    "Err",
    "KNOWN_KEYS",
    "LinuxDistro",
    "LoadError",
    "Ok",
    "OsRelease",
    "Result",
    "describe_os",
    "distro_family",
    "load",
    "os_release",
    "parse_lines",
    "parse_text",
    "__version__",
]
