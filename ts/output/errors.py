"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ts.core.errors import ErrorCode
from ts.output.console import Style
from ts.platform.process import ProcessError
from ts.services.errors import (
    BuildError,
    ConfigNotFoundError,
    EnvironmentCheckError,
    PackageError,
    PackagingError,
)

if TYPE_CHECKING:
    from ts.output.console import ConsoleProtocol

__all__ = [
    "package_error_exit_code",
    "print_package_error",
    "print_process_error",
    "process_error_exit_code",
]


def print_package_error(error: PackageError, console: ConsoleProtocol) -> None:
    """Print a pipeline error with a hint for the operator."""
    match error:
        case EnvironmentCheckError(hint=hint):
            console.error(error.message)
            console.print(f"hint: {hint}", Style.DIM)
        case ConfigNotFoundError():
            console.error(error.message)
            console.print("hint: pass the path of an existing config file", Style.DIM)
        case BuildError():
            console.error(error.message)
            console.print("hint: fix the build (or Cargo.lock) and re-run", Style.DIM)
        case PackagingError():
            console.error(error.message)
            console.print(
                "hint: the dist directory is not a valid release; fix the filesystem "
                "issue and re-run",
                Style.DIM,
            )


def package_error_exit_code(error: PackageError) -> int:
    match error:
        case EnvironmentCheckError():
            return int(ErrorCode.ENV_ERROR)
        case ConfigNotFoundError():
            return int(ErrorCode.USER_ERROR)
        case BuildError():
            return int(ErrorCode.BUILD_ERROR)
        case PackagingError():
            return int(ErrorCode.IO_ERROR)


def print_process_error(error: ProcessError, console: ConsoleProtocol) -> None:
    if not error.launched:
        console.error(f"could not start {error.command[0]}: {error.stderr}")
        return
    console.error(str(error))


def process_error_exit_code(error: ProcessError) -> int:
    """Exit code for a failed cargo invocation.

    A command that could not be started points at the environment; otherwise
    the child's own exit status is passed through.
    """
    if not error.launched:
        return int(ErrorCode.ENV_ERROR)
    return error.returncode if error.returncode > 0 else int(ErrorCode.BUILD_ERROR)
