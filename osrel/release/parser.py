"""Parser for os-release files.

Parsing is permissive and never fails: blank lines, comments, lines without
`=` and `KEY=` lines with nothing after the separator are skipped. Known keys
(see `KNOWN_KEYS`) fill the record fields; anything else is kept verbatim in
`OsRelease.extra`.
"""

from __future__ import annotations

from collections.abc import Iterable

from .record import KNOWN_KEYS, OsRelease

__all__ = ["parse_lines", "parse_text", "parse_value"]

_FIELD_BY_KEY: dict[str, str] = dict(KNOWN_KEYS)

_QUOTES = ('"', "'")

# Unicode White_Space, which excludes the \x1c-\x1f separators
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def parse_value(raw: str) -> str:
    """Normalize the value of a known key.

    Surrounding whitespace is stripped, then one enclosing pair of matching
    quotes: `"Pop!_OS"` -> `Pop!_OS`. A lone quote or unbalanced quotes are
    kept as-is.
    """
    value = raw.strip(_WHITESPACE)
    if len(value) >= 2 and value[0] in _QUOTES and value[0] == value[-1]:
        return value[1:-1]
    return value


def parse_lines(lines: Iterable[str]) -> OsRelease:
    """Build a record from os-release lines (line endings already removed).

    A line belongs to a known field when it starts with `KEY=` exactly.
    Since no key contains `=`, that is the same as the text before the first
    `=` being `KEY`, so `VERSION=` never captures `VERSION_ID=...`.
    """
    known: dict[str, str] = {}
    extra: dict[str, str] = {}

    for raw in lines:
        line = raw.strip(_WHITESPACE)
        key, sep, rest = line.partition("=")
        if not sep:
            continue

        field_name = _FIELD_BY_KEY.get(key)
        if field_name is not None:
            known[field_name] = parse_value(rest)
            continue

        # Unknown keys are stored raw, last one wins
        if rest:
            extra[key] = rest

    return OsRelease(**known, extra=extra)


def parse_text(text: str) -> OsRelease:
    """Build a record from the full text of an os-release file."""
    # Lines end at "\n" only, with an optional "\r" before it
    return parse_lines(line.removesuffix("\r") for line in text.split("\n"))
