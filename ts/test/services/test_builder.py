from __future__ import annotations

from pathlib import Path

from ts.core.result import Err, Ok, Result
from ts.output.console import MockConsole
from ts.platform.process import ProcessError
from ts.services.builder import CargoCrossBuilder, build_commands
from ts.services.errors import BuildError

TARGET = "x86_64-unknown-linux-gnu"
TOOLS = {"cargo": Path("cargo"), "cross": Path("cross")}


class RecordingRunner:
    def __init__(self, *, fail_on: str | None = None, produce: Path | None = None) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self._fail_on = fail_on
        self._produce = produce

    def __call__(self, cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
        self.calls.append((cmd, cwd))
        if self._fail_on is not None and cmd[1] == self._fail_on:
            return Err(ProcessError(tuple(cmd), 101, "", "error[E0425]: cannot find value"))
        if self._produce is not None and cmd[1] == "build":
            self._produce.parent.mkdir(parents=True, exist_ok=True)
            self._produce.write_bytes(b"bin")
        return Ok(None)


def _builder(tmp_path: Path, runner: RecordingRunner, **kwargs: object) -> CargoCrossBuilder:
    return CargoCrossBuilder(
        server_dir=tmp_path,
        console=MockConsole(),
        runner=runner,
        **kwargs,  # type: ignore[arg-type]
    )


def test_build_commands_clean_then_locked_release() -> None:
    assert build_commands(TARGET) == [
        ["cargo", "clean"],
        ["cross", "build", "--release", "--locked", "--target", TARGET],
    ]


def test_build_runs_clean_first_and_returns_binary(tmp_path: Path) -> None:
    binary = tmp_path / "target" / TARGET / "release" / "server"
    runner = RecordingRunner(produce=binary)

    result = _builder(tmp_path, runner).build(TARGET, TOOLS)

    assert result == Ok(binary)
    assert [c[0][:2] for c in runner.calls] == [["cargo", "clean"], ["cross", "build"]]
    assert all(cwd == tmp_path for _, cwd in runner.calls)


def test_build_runs_the_tools_it_was_given(tmp_path: Path) -> None:
    binary = tmp_path / "target" / TARGET / "release" / "server"
    runner = RecordingRunner(produce=binary)
    tools = {"cargo": Path("/opt/rust/bin/cargo"), "cross": Path("/opt/rust/bin/cross")}

    _builder(tmp_path, runner).build(TARGET, tools)

    assert [c[0][0] for c in runner.calls] == ["/opt/rust/bin/cargo", "/opt/rust/bin/cross"]


def test_build_echoes_commands(tmp_path: Path) -> None:
    binary = tmp_path / "target" / TARGET / "release" / "server"
    runner = RecordingRunner(produce=binary)
    builder = _builder(tmp_path, runner)

    builder.build(TARGET, TOOLS)

    assert isinstance(builder.console, MockConsole)
    assert builder.console.commands == [
        "cargo clean",
        f"cross build --release --locked --target {TARGET}",
    ]


def test_clean_failure_stops_before_build(tmp_path: Path) -> None:
    runner = RecordingRunner(fail_on="clean")

    result = _builder(tmp_path, runner).build(TARGET, TOOLS)

    assert isinstance(result, Err)
    assert result.error.command == ("cargo", "clean")
    assert len(runner.calls) == 1


def test_compile_failure_carries_exit_code(tmp_path: Path) -> None:
    runner = RecordingRunner(fail_on="build")

    result = _builder(tmp_path, runner).build(TARGET, TOOLS)

    assert isinstance(result, Err)
    assert isinstance(result.error, BuildError)
    assert result.error.returncode == 101
    assert "E0425" in result.error.reason


def test_missing_output_is_a_build_error(tmp_path: Path) -> None:
    runner = RecordingRunner()

    result = _builder(tmp_path, runner).build(TARGET, TOOLS)

    assert isinstance(result, Err)
    assert result.error.returncode is None
    assert "output not found" in result.error.reason


def test_unlaunchable_tool_is_a_build_error(tmp_path: Path) -> None:
    def runner(cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
        return Err(ProcessError(tuple(cmd), -1, "", "No such file or directory"))

    builder = CargoCrossBuilder(server_dir=tmp_path, console=MockConsole(), runner=runner)
    result = builder.build(TARGET, TOOLS)

    assert isinstance(result, Err)
    assert result.error.returncode is None
    assert result.error.reason == "No such file or directory"


def test_dry_run_runs_nothing(tmp_path: Path) -> None:
    runner = RecordingRunner()

    result = _builder(tmp_path, runner, dry_run=True).build(TARGET, TOOLS)

    assert result == Ok(tmp_path / "target" / TARGET / "release" / "server")
    assert runner.calls == []
