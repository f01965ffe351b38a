"""Exit codes for the osrel command line.

Library functions never exit; they return `Result` values. The CLI maps
failures onto these codes so shell scripts can tell a missing file apart
from a bad invocation.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values are stable.

    - 0: Success
    - 1: User error (unknown key, bad arguments)
    - 2: Configuration error (unreadable or invalid config file)
    - 5: I/O error (os-release file not found, permission denied)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
