from __future__ import annotations

from pathlib import Path

import pytest

from ts.core.errors import ErrorCode
from ts.output.console import MockConsole, Style
from ts.output.errors import (
    package_error_exit_code,
    print_package_error,
    print_process_error,
    process_error_exit_code,
)
from ts.platform.process import ProcessError
from ts.services.errors import (
    BuildError,
    ConfigNotFoundError,
    EnvironmentCheckError,
    PackageError,
    PackagingError,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (EnvironmentCheckError(missing=("cross",)), ErrorCode.ENV_ERROR),
        (ConfigNotFoundError(path=Path("/nope.yaml")), ErrorCode.USER_ERROR),
        (BuildError(command=("cross", "build"), returncode=101, reason="x"), ErrorCode.BUILD_ERROR),
        (PackagingError(path=Path("/dist"), reason="No space left"), ErrorCode.IO_ERROR),
    ],
)
def test_exit_codes(error: PackageError, code: ErrorCode) -> None:
    assert package_error_exit_code(error) == int(code)


def test_every_error_prints_message_and_hint() -> None:
    errors: list[PackageError] = [
        EnvironmentCheckError(missing=("cargo", "cross")),
        ConfigNotFoundError(path=Path("/missing.yaml")),
        BuildError(command=("cargo", "clean"), returncode=None, reason="not found"),
        PackagingError(path=Path("/dist"), reason="Permission denied"),
    ]
    for error in errors:
        console = MockConsole()
        print_package_error(error, console)
        assert console.outputs[0].style == Style.ERROR
        assert error.message in console.outputs[0].message
        assert console.outputs[1].message.startswith("hint:")


def test_config_not_found_message() -> None:
    console = MockConsole()
    print_package_error(ConfigNotFoundError(path=Path("/missing.yaml")), console)
    assert "Config file does not exist: /missing.yaml" in console.text


def test_process_error_passes_child_exit_code_through() -> None:
    assert process_error_exit_code(ProcessError(("cargo", "test"), 101, "", "")) == 101


def test_process_error_not_launched_is_env_error() -> None:
    error = ProcessError(("cargo", "test"), -1, "", "No such file or directory")
    console = MockConsole()

    print_process_error(error, console)

    assert process_error_exit_code(error) == int(ErrorCode.ENV_ERROR)
    assert "could not start cargo" in console.text
