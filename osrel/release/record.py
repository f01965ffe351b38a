"""The Release Record: contents of an os-release file as a data structure."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

__all__ = ["OsRelease", "KNOWN_KEYS", "DEFAULT_NAME", "DEFAULT_ID"]

# Fallback values from os-release(5) for a file that omits them
DEFAULT_NAME = "Linux"
DEFAULT_ID = "linux"

# The closed schema, in matching order: (os-release key, record field)
KNOWN_KEYS: tuple[tuple[str, str], ...] = (
    ("NAME", "name"),
    ("VERSION", "version"),
    ("ID", "id"),
    ("ID_LIKE", "id_like"),
    ("VERSION_ID", "version_id"),
    ("VERSION_CODENAME", "version_codename"),
    ("PRETTY_NAME", "pretty_name"),
    ("ANSI_COLOR", "ansi_color"),
    ("CPE_NAME", "cpe_name"),
    ("HOME_URL", "home_url"),
    ("DOCUMENTATION_URL", "documentation_url"),
    ("SUPPORT_URL", "support_url"),
    ("BUG_REPORT_URL", "bug_report_url"),
    ("PRIVACY_POLICY_URL", "privacy_policy_url"),
    ("BUILD_ID", "build_id"),
    ("VARIANT", "variant"),
    ("VARIANT_ID", "variant_id"),
    ("LOGO", "logo"),
)


def _empty_extra() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class OsRelease:
    """Contents of an `/etc/os-release` file.

    Every field is text. Keys outside the known schema land in `extra`, a
    read-only mapping ordered by key. Use `osrel.release.parser.parse_lines()`
    to build one.
    """

    name: str = DEFAULT_NAME  # e.g. "Ubuntu"
    version: str = ""  # e.g. "18.04 LTS (Bionic Beaver)"
    id: str = DEFAULT_ID  # e.g. "ubuntu"
    id_like: str = ""  # space-separated, e.g. "debian"
    version_id: str = ""  # e.g. "18.04"
    version_codename: str = ""  # e.g. "bionic"
    pretty_name: str = DEFAULT_NAME  # e.g. "Ubuntu 18.04 LTS"
    ansi_color: str = ""
    cpe_name: str = ""
    home_url: str = ""
    documentation_url: str = ""
    support_url: str = ""
    bug_report_url: str = ""
    privacy_policy_url: str = ""
    build_id: str = ""
    variant: str = ""
    variant_id: str = ""
    logo: str = ""
    extra: Mapping[str, str] = field(default_factory=_empty_extra)

    def __post_init__(self) -> None:
        # Read-only and sorted by key, whatever mapping the caller passed
        object.__setattr__(self, "extra", MappingProxyType(dict(sorted(self.extra.items()))))

    def __hash__(self) -> int:
        return hash((self._known_values(), tuple(self.extra.items())))

    @property
    def id_like_list(self) -> tuple[str, ...]:
        """Identifiers of the operating systems this one derives from."""
        return tuple(self.id_like.split())

    def _known_values(self) -> tuple[str, ...]:
        # Same order as KNOWN_KEYS
        return (
            self.name,
            self.version,
            self.id,
            self.id_like,
            self.version_id,
            self.version_codename,
            self.pretty_name,
            self.ansi_color,
            self.cpe_name,
            self.home_url,
            self.documentation_url,
            self.support_url,
            self.bug_report_url,
            self.privacy_policy_url,
            self.build_id,
            self.variant,
            self.variant_id,
            self.logo,
        )

    def as_dict(self, *, include_empty: bool = False) -> dict[str, str]:
        """Return `KEY -> value` for known keys (schema order), then `extra`."""
        out: dict[str, str] = {}
        for (key, _), value in zip(KNOWN_KEYS, self._known_values(), strict=True):
            if value or include_empty:
                out[key] = value
        for key, value in self.extra.items():
            out.setdefault(key, value)
        return out

    def get(self, key: str, default: str = "") -> str:
        """Look up a value by its os-release key, e.g. `"VERSION_ID"`."""
        value = self.as_dict().get(key)
        return value if value else default

    def with_overrides(self, **changes: object) -> OsRelease:
        """Return a copy with some fields replaced.

        Raises:
            TypeError: if a name is not a record field.
        """
        return replace(self, **changes)  # type: ignore[arg-type]
