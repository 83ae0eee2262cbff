"""check-env command - report the build tooling build-dist needs."""

from __future__ import annotations

import typer

from ts.core.errors import ErrorCode
from ts.output.console import RichConsole, Style
from ts.services.environment import EnvironmentChecker
from ts.services.errors import EnvironmentCheckError


def check_env() -> None:
    """Check that cargo and cross are installed."""
    # Only PATH matters here, so this works outside a workspace too
    console = RichConsole()
    statuses = EnvironmentChecker().report()

    console.header("Tools")
    for s in statuses:
        if s.path is None:
            console.print(f"{s.name}: missing", Style.ERROR)
        else:
            console.print(f"{s.name}: {s.version or 'ok'} ({s.path})", Style.SUCCESS)

    missing = tuple(s.name for s in statuses if not s.ok)
    if missing:
        console.print(f"hint: {EnvironmentCheckError(missing=missing).hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
