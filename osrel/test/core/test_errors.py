"""Tests for osrel.core.errors module."""

from osrel.core.errors import ErrorCode


class TestErrorCodeValues:
    """Exit codes are part of the CLI contract."""

    def test_values(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.CONFIG_ERROR == 2
        assert ErrorCode.IO_ERROR == 5

    def test_str(self) -> None:
        assert str(ErrorCode.IO_ERROR) == "io error"

    def test_success_flags(self) -> None:
        assert ErrorCode.OK.is_success is True
        assert ErrorCode.OK.is_error is False
        assert ErrorCode.IO_ERROR.is_error is True

    def test_int_conversion(self) -> None:
        assert int(ErrorCode.CONFIG_ERROR) == 2
