"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer

from ts.core.result import Err, Result
from ts.output.errors import print_process_error, process_error_exit_code
from ts.platform.process import ProcessError

if TYPE_CHECKING:
    from ts.cli.context import CLIContext

T = TypeVar("T")


def exit_on_process_error(result: Result[T, ProcessError], ctx: CLIContext) -> None:
    """Exit with the mapped code if a cargo invocation failed, otherwise return."""
    if isinstance(result, Err):
        print_process_error(result.error, ctx.console)
        exit_with_code(process_error_exit_code(result.error))


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
