from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class EnvironmentCheckError:
    """Required build tooling is not on PATH."""

    missing: tuple[str, ...]
    hint: str = "Install rustup (cargo) and run: cargo install cross"

    @property
    def message(self) -> str:
        return f"missing required tools: {', '.join(self.missing)}"


@dataclass(frozen=True, slots=True)
class ConfigNotFoundError:
    """Config path does not refer to an existing regular file."""

    path: Path

    @property
    def message(self) -> str:
        return f"Config file does not exist: {self.path}"


@dataclass(frozen=True, slots=True)
class BuildError:
    """The toolchain failed, or finished without producing the binary.

    ``returncode`` is None when the command never ran or the failure is not
    tied to an exit status (output missing).
    """

    command: tuple[str, ...]
    returncode: int | None
    reason: str

    @property
    def message(self) -> str:
        cmd = " ".join(self.command)
        if self.returncode is None:
            return f"{cmd}: {self.reason}"
        return f"{cmd} failed (exit {self.returncode}): {self.reason}"


@dataclass(frozen=True, slots=True)
class PackagingError:
    """Filesystem failure while staging the dist directory."""

    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"packaging failed at {self.path}: {self.reason}"


PackageError = EnvironmentCheckError | ConfigNotFoundError | BuildError | PackagingError
