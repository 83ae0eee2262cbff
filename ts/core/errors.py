"""Error codes for CLI exit status.

Every command exits with one of these codes. They are part of the tool's
contract with scripts that call it, so the numeric values must stay stable:
- 0: Success
- 1: User error (bad config path, invalid telemetry.toml)
- 2: Environment error (cargo or cross not installed)
- 3: Build error (cross build failed or produced no binary; also ``run`` and
  ``test`` when cargo was killed by a signal, otherwise they exit with
  cargo's own status)
- 5: I/O error (dist directory could not be staged)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    BUILD_ERROR = 3
    IO_ERROR = 5
