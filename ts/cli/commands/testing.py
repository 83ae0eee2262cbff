"""Test command - run the server crate's test suite."""

from __future__ import annotations

from ts.cli.commands._helpers import exit_on_process_error
from ts.cli.context import build_context
from ts.services.server import ServerService


def run_tests() -> None:
    """Run the server's test suite (cargo test)."""
    ctx = build_context()
    service = ServerService(server_dir=ctx.workspace.server_dir, console=ctx.console)
    exit_on_process_error(service.test(), ctx)
    ctx.console.success("tests passed")
