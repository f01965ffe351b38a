"""Tests for osrel.release.cache module."""

from __future__ import annotations

import threading
import time
from pathlib import Path

import pytest

from osrel.core.result import Err, Ok
from osrel.release import cache
from osrel.release.cache import ReleaseCell, os_release
from osrel.release.loader import LoadError, load
from osrel.release.record import OsRelease


class TestReleaseCell:
    """Test the memoization cell."""

    def test_lazy(self) -> None:
        calls: list[int] = []

        def loader() -> Ok[OsRelease]:
            calls.append(1)
            return Ok(OsRelease())

        cell = ReleaseCell(loader)
        assert cell.is_initialized is False
        assert calls == []

        cell.get()
        assert cell.is_initialized is True
        assert calls == [1]

    def test_returns_same_object(self) -> None:
        cell = ReleaseCell(lambda: Ok(OsRelease(id="arch")))
        assert cell.get() is cell.get()

    def test_caches_errors(self) -> None:
        calls: list[int] = []

        def loader() -> Err[LoadError]:
            calls.append(1)
            return Err(LoadError("unable to open"))

        cell = ReleaseCell(loader)
        first = cell.get()
        second = cell.get()
        assert isinstance(first, Err)
        assert first is second
        assert calls == [1]

    def test_reset(self) -> None:
        calls: list[int] = []

        def loader() -> Ok[OsRelease]:
            calls.append(1)
            return Ok(OsRelease())

        cell = ReleaseCell(loader)
        cell.get()
        cell.reset()
        assert cell.is_initialized is False
        cell.get()
        assert calls == [1, 1]

    def test_loads_once_under_concurrency(self) -> None:
        calls: list[int] = []
        start = threading.Barrier(8)

        def loader() -> Ok[OsRelease]:
            calls.append(1)
            time.sleep(0.05)
            return Ok(OsRelease(id="debian"))

        cell = ReleaseCell(loader)
        results: list[object] = []

        def worker() -> None:
            start.wait()
            results.append(cell.get())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert calls == [1]
        assert len(results) == 8
        assert all(r is results[0] for r in results)


class TestHostRecord:
    """Test the process-wide accessor."""

    def test_os_release_uses_process_cell(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "os-release"
        path.write_text("ID=gentoo\n", encoding="utf-8")
        monkeypatch.setattr(cache, "_HOST", ReleaseCell(lambda: load(path)))

        result = os_release()
        assert result.unwrap().id == "gentoo"
        assert os_release() is result

    def test_reset_clears_process_cell(self, monkeypatch: pytest.MonkeyPatch) -> None:
        cell = ReleaseCell(lambda: Ok(OsRelease()))
        monkeypatch.setattr(cache, "_HOST", cell)
        os_release()
        cache.reset()
        assert cell.is_initialized is False

    def test_shared_record_cannot_be_mutated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        cell = ReleaseCell(lambda: Ok(OsRelease(extra={"EXTRA": "test"})))
        monkeypatch.setattr(cache, "_HOST", cell)

        record = os_release().unwrap()
        with pytest.raises(TypeError):
            record.extra["INJECTED"] = "x"  # type: ignore[index]

        assert os_release().unwrap().extra == {"EXTRA": "test"}
