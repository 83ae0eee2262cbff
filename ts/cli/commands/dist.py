"""build-dist command - clean cross build + dist directory packaging."""

from __future__ import annotations

from pathlib import Path

import typer

from ts.cli.context import build_context
from ts.core.config import RELEASE_TARGET
from ts.core.result import Err, Ok
from ts.output.errors import package_error_exit_code, print_package_error
from ts.services.builder import CargoCrossBuilder
from ts.services.environment import EnvironmentChecker
from ts.services.package import ReleasePackager


def build_dist(
    config: Path = typer.Argument(..., help="Server config file to ship as config.yaml"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print actions without modifying"),
) -> None:
    """Cross-compile a release build and package it with its config."""
    ctx = build_context()
    packager = ReleasePackager(
        builder=CargoCrossBuilder(
            server_dir=ctx.workspace.server_dir,
            console=ctx.console,
            dry_run=dry_run,
        ),
        environment=EnvironmentChecker(),
        dist_dir=ctx.workspace.dist_dir,
        console=ctx.console,
        dry_run=dry_run,
    )

    match packager.package(config, RELEASE_TARGET):
        case Ok(dist_dir):
            if dry_run:
                ctx.console.info(f"dry-run: nothing written to {dist_dir}")
            else:
                ctx.console.success(f"TelemetryServer files packaged in {dist_dir}")
        case Err(error):
            print_package_error(error, ctx.console)
            raise typer.Exit(code=package_error_exit_code(error))
