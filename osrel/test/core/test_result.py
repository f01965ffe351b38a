"""Tests for osrel.core.result module."""

import pytest

from osrel.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    """Tests for Ok type."""

    def test_ok_flags(self) -> None:
        result = Ok("ubuntu")
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_ok_unwrap(self) -> None:
        assert Ok("ubuntu").unwrap() == "ubuntu"
        assert Ok("ubuntu").unwrap_or("linux") == "ubuntu"

    def test_ok_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap_err on Ok"):
            Ok("ubuntu").unwrap_err()

    def test_ok_map(self) -> None:
        assert Ok("22.04").map(lambda v: v.replace(".", "")) == Ok("2204")

    def test_ok_map_err(self) -> None:
        result: Result[str, str] = Ok("ubuntu")
        assert result.map_err(lambda e: f"error: {e}") == Ok("ubuntu")

    def test_ok_repr(self) -> None:
        assert repr(Ok("x")) == "Ok('x')"

    def test_ok_frozen(self) -> None:
        result = Ok(1)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]


class TestErr:
    """Tests for Err type."""

    def test_err_flags(self) -> None:
        result = Err("missing")
        assert result.is_ok() is False
        assert result.is_err() is True

    def test_err_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("missing").unwrap()

    def test_err_unwrap_or(self) -> None:
        result: Result[str, str] = Err("missing")
        assert result.unwrap_or("linux") == "linux"

    def test_err_unwrap_err(self) -> None:
        assert Err("missing").unwrap_err() == "missing"

    def test_err_map(self) -> None:
        result: Result[str, str] = Err("missing")
        assert result.map(str.upper) == Err("missing")

    def test_err_map_err(self) -> None:
        assert Err("missing").map_err(lambda e: f"error: {e}") == Err("error: missing")

    def test_err_repr(self) -> None:
        assert repr(Err("oops")) == "Err('oops')"

    def test_equality(self) -> None:
        assert Err("a") == Err("a")
        assert Err(1) != Ok(1)


class TestTypeGuards:
    """Tests for is_ok() and is_err()."""

    def test_guards(self) -> None:
        ok: Result[int, str] = Ok(1)
        err: Result[int, str] = Err("e")
        assert is_ok(ok) is True
        assert is_err(ok) is False
        assert is_ok(err) is False
        assert is_err(err) is True


class TestPatternMatching:
    """Tests for match statements."""

    def test_match(self) -> None:
        result: Result[int, str] = Err("oops")
        match result:
            case Ok(_):
                pytest.fail("Should not match Ok")
            case Err(error):
                assert error == "oops"
