"""Run command - launch the server locally with a config file."""

from __future__ import annotations

from pathlib import Path

import typer

from ts.cli.context import build_context
from ts.core.result import Err
from ts.output.errors import (
    package_error_exit_code,
    print_package_error,
    print_process_error,
    process_error_exit_code,
)
from ts.platform.process import ProcessError
from ts.services.errors import ConfigNotFoundError
from ts.services.server import ServerService


def run(
    config: Path = typer.Argument(..., help="Server config file (YAML)"),
) -> None:
    """Run the server with a config file and debug logging."""
    ctx = build_context()
    service = ServerService(
        server_dir=ctx.workspace.server_dir,
        console=ctx.console,
        run_config=ctx.workspace.config.run,
    )

    match service.run(config):
        case Err(ConfigNotFoundError() as error):
            print_package_error(error, ctx.console)
            raise typer.Exit(code=package_error_exit_code(error))
        case Err(ProcessError() as error):
            print_process_error(error, ctx.console)
            raise typer.Exit(code=process_error_exit_code(error))
        case _:
            pass
