"""Release builds of the server crate.

``Builder`` is the seam between the packaging pipeline and the toolchain:
the packager only needs "give me a freshly built binary for this target",
which lets tests substitute a fake that writes a file instead of compiling.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from ts.core.config import SERVER_BINARY_NAME
from ts.core.result import Err, Ok, Result
from ts.output.console import ConsoleProtocol
from ts.platform.process import ProcessError, format_command, run_silent
from ts.services.errors import BuildError

__all__ = ["Builder", "CargoCrossBuilder", "build_commands"]


class Builder(Protocol):
    def build(self, target: str, tools: Mapping[str, Path]) -> Result[Path, BuildError]:
        """Build the release binary for ``target`` and return its path.

        ``tools`` maps each required tool name to the executable the
        environment check found for it.
        """
        ...


CommandRunner = Callable[[list[str], Path], Result[None, ProcessError]]


def _run_streaming(cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
    return run_silent(cmd, cwd=cwd)


def build_commands(target: str, *, cargo: str = "cargo", cross: str = "cross") -> list[list[str]]:
    """Commands for a clean, locked release build of ``target``.

    The build tree is always wiped first so nothing from an earlier
    incremental build can end up in the shipped binary.
    """
    return [
        [cargo, "clean"],
        [cross, "build", "--release", "--locked", "--target", target],
    ]


@dataclass(frozen=True, slots=True)
class CargoCrossBuilder:
    """Clean build with ``cargo clean`` then ``cross build --release --locked``.

    Attributes:
        server_dir: The server cargo project
        console: Commands are echoed here before they run
        dry_run: Echo commands only, and report the expected binary path
        runner: Executes one command, streaming its output
    """

    server_dir: Path
    console: ConsoleProtocol
    dry_run: bool = False
    runner: CommandRunner = field(default=_run_streaming)

    def output_path(self, target: str) -> Path:
        return self.server_dir / "target" / target / "release" / SERVER_BINARY_NAME

    def build(self, target: str, tools: Mapping[str, Path]) -> Result[Path, BuildError]:
        commands = build_commands(target, cargo=str(tools["cargo"]), cross=str(tools["cross"]))
        for cmd in commands:
            self.console.command(format_command(cmd))
            if self.dry_run:
                continue
            result = self.runner(cmd, self.server_dir)
            if isinstance(result, Err):
                return Err(_build_error(result.error))

        binary = self.output_path(target)
        if not self.dry_run and not binary.is_file():
            return Err(
                BuildError(
                    command=tuple(commands[-1]),
                    returncode=None,
                    reason=f"build finished but output not found: {binary}",
                )
            )
        return Ok(binary)


def _build_error(error: ProcessError) -> BuildError:
    if not error.launched:
        return BuildError(command=error.command, returncode=None, reason=error.stderr)
    return BuildError(
        command=error.command,
        returncode=error.returncode,
        reason=error.stderr.strip() or "see build output above",
    )
