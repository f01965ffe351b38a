"""The host's os-release record, loaded once per process.

    match os_release():
        case Ok(record):
            ...
        case Err(error):
            ...

The first call reads the file; every later call returns the same result,
including a failure. The cell is safe to use from several threads.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from osrel.core.result import Result

from .loader import LoadError, load
from .record import OsRelease

__all__ = ["ReleaseCell", "os_release", "reset"]

type ReleaseResult = Result[OsRelease, LoadError]


class ReleaseCell:
    """Lazily computed, memoized release result."""

    def __init__(self, loader: Callable[[], ReleaseResult] = load) -> None:
        self._loader = loader
        self._lock = threading.Lock()
        self._result: ReleaseResult | None = None

    @property
    def is_initialized(self) -> bool:
        return self._result is not None

    def get(self) -> ReleaseResult:
        """Return the cached result, loading it on first use."""
        result = self._result
        if result is not None:
            return result
        with self._lock:
            if self._result is None:
                self._result = self._loader()
            return self._result

    def reset(self) -> None:
        """Forget the cached result (for tests)."""
        with self._lock:
            self._result = None


_HOST = ReleaseCell()


def os_release() -> ReleaseResult:
    """The os-release record of the running host (cached)."""
    return _HOST.get()


def reset() -> None:
    """Clear the process-wide cache."""
    _HOST.reset()
