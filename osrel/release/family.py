"""Distribution family detection.

Classifies a record into a broad Linux family from its `ID` and `ID_LIKE`
identifiers, e.g. Pop!_OS (`ID=pop`, `ID_LIKE="ubuntu debian"`) is DEBIAN.
"""

from __future__ import annotations

from enum import Enum, auto

from osrel.core.result import Ok

from .cache import os_release
from .record import OsRelease

__all__ = [
    "LinuxDistro",
    "describe_os",
    "detect_linux_distro",
    "distro_family",
]


class LinuxDistro(Enum):
    """Linux distribution family."""

    DEBIAN = auto()  # Debian, Ubuntu, Mint, Pop!_OS, etc.
    FEDORA = auto()  # Fedora, RHEL, CentOS, Rocky, etc.
    ARCH = auto()  # Arch, Manjaro, EndeavourOS, etc.
    SUSE = auto()  # openSUSE, SLES, etc.
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def package_manager(self) -> str:
        """Get the package manager command for this distro."""
        return {
            LinuxDistro.DEBIAN: "apt",
            LinuxDistro.FEDORA: "dnf",
            LinuxDistro.ARCH: "pacman",
            LinuxDistro.SUSE: "zypper",
            LinuxDistro.UNKNOWN: "unknown",
        }[self]


_FAMILY_IDS: dict[str, LinuxDistro] = {
    "debian": LinuxDistro.DEBIAN,
    "ubuntu": LinuxDistro.DEBIAN,
    "linuxmint": LinuxDistro.DEBIAN,
    "pop": LinuxDistro.DEBIAN,
    "fedora": LinuxDistro.FEDORA,
    "rhel": LinuxDistro.FEDORA,
    "centos": LinuxDistro.FEDORA,
    "rocky": LinuxDistro.FEDORA,
    "almalinux": LinuxDistro.FEDORA,
    "arch": LinuxDistro.ARCH,
    "manjaro": LinuxDistro.ARCH,
    "endeavouros": LinuxDistro.ARCH,
    "suse": LinuxDistro.SUSE,
    "opensuse": LinuxDistro.SUSE,
    "sles": LinuxDistro.SUSE,
}


def _family_of(identifier: str) -> LinuxDistro:
    family = _FAMILY_IDS.get(identifier.lower())
    if family is not None:
        return family
    # opensuse-tumbleweed, opensuse-leap, ...
    if identifier.lower().startswith("opensuse"):
        return LinuxDistro.SUSE
    return LinuxDistro.UNKNOWN


def distro_family(record: OsRelease) -> LinuxDistro:
    """Classify a record by `ID`, then by each `ID_LIKE` entry in order."""
    for identifier in (record.id, *record.id_like_list):
        family = _family_of(identifier)
        if family is not LinuxDistro.UNKNOWN:
            return family
    return LinuxDistro.UNKNOWN


def describe_os(record: OsRelease) -> str:
    """Short OS tag: `ID` followed by `VERSION_ID` without dots.

    `ID=fedora VERSION_ID=40` gives `fedora40`, `ID=ubuntu VERSION_ID=22.04`
    gives `ubuntu2204`.
    """
    return record.id + record.version_id.replace(".", "")


def detect_linux_distro() -> LinuxDistro:
    """Family of the running host; UNKNOWN if os-release cannot be read."""
    result = os_release()
    if isinstance(result, Ok):
        return distro_family(result.value)
    return LinuxDistro.UNKNOWN
