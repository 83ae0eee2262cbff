"""Development entry points for the server: ``run`` and ``test``.

Both are thin delegations to cargo in the server project directory.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ts.core.config import RunConfig
from ts.core.result import Err, Result
from ts.output.console import ConsoleProtocol
from ts.platform.process import ProcessError, format_command, run_silent
from ts.services.config_file import resolve_config_file
from ts.services.errors import ConfigNotFoundError

__all__ = ["ServerService", "cargo_run_command", "cargo_test_command"]

EnvCommandRunner = Callable[
    [list[str], Path, dict[str, str] | None], Result[None, ProcessError]
]


def _run_with_env(
    cmd: list[str], cwd: Path, env: dict[str, str] | None = None
) -> Result[None, ProcessError]:
    return run_silent(cmd, cwd=cwd, env=env)


def cargo_run_command(config_path: Path, *, cargo: str = "cargo") -> list[str]:
    return [cargo, "run", "--", "--config-path", str(config_path)]


def cargo_test_command(*, cargo: str = "cargo") -> list[str]:
    return [cargo, "test"]


@dataclass(frozen=True, slots=True)
class ServerService:
    """Run or test the server crate with cargo.

    Attributes:
        server_dir: The server cargo project
        console: Commands are echoed here before they run
        run_config: Logging environment passed to ``cargo run``
        runner: Executes one command with extra env vars, streaming output
    """

    server_dir: Path
    console: ConsoleProtocol
    run_config: RunConfig = field(default_factory=RunConfig)
    runner: EnvCommandRunner = field(default=_run_with_env)

    def run(self, config_path: Path) -> Result[None, ConfigNotFoundError | ProcessError]:
        """Validate the config and launch the server in the foreground.

        The server is never launched if the config is missing.
        """
        config = resolve_config_file(config_path)
        if isinstance(config, Err):
            return config

        cmd = cargo_run_command(config.value)
        env = self.run_config.env_vars()
        self.console.command(format_command(cmd, env))
        return self.runner(cmd, self.server_dir, env)

    def test(self) -> Result[None, ProcessError]:
        """Run the server's test suite."""
        cmd = cargo_test_command()
        self.console.command(format_command(cmd))
        return self.runner(cmd, self.server_dir, None)
