"""Workspace detection and paths.

The workspace is the repository root that holds the server project. It is
identified by either a ``telemetry.toml`` file or a ``rust-server/Cargo.toml``
below it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .config import CONFIG_FILE_NAME, Config, ConfigError
from .result import Err, Ok, Result

__all__ = [
    "Workspace",
    "WorkspaceError",
    "WORKSPACE_ENV_VAR",
    "detect_workspace",
    "find_workspace_upward",
    "is_workspace_root",
]

WORKSPACE_ENV_VAR = "TS_WORKSPACE_ROOT"


@dataclass(frozen=True)
class WorkspaceError:
    """Error when workspace cannot be detected."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Workspace:
    """A detected TelemetryServer workspace.

    The workspace root contains:
    - telemetry.toml (optional tooling config)
    - rust-server/ cargo project (location configurable)
    - dist/ packaged release (generated, location configurable)
    """

    root: Path
    config: Config = field(default_factory=Config)

    @property
    def config_path(self) -> Path:
        """Path to telemetry.toml."""
        return self.root / CONFIG_FILE_NAME

    @property
    def server_dir(self) -> Path:
        """Path to the server cargo project."""
        return self.root / self.config.paths.server

    @property
    def dist_dir(self) -> Path:
        """Path to the packaged release directory."""
        return self.root / self.config.paths.dist

    def check_paths(self) -> Result[None, ConfigError]:
        """Reject a dist directory whose replacement would delete other files.

        The dist directory is deleted and recreated by ``build-dist``, so it must
        sit strictly inside the workspace root and must not be, or contain, the
        server project.
        """
        root = self.root.resolve()
        dist = self.dist_dir.resolve()
        server = self.server_dir.resolve()
        configured = self.config.paths.dist

        if root not in dist.parents:
            return Err(
                ConfigError(
                    f"[paths] dist = '{configured}' must be a directory inside {root}",
                    path=self.config_path,
                )
            )
        if dist == server or dist in server.parents:
            return Err(
                ConfigError(
                    f"[paths] dist = '{configured}' would replace the server project at {server}",
                    path=self.config_path,
                )
            )
        return Ok(None)

    def __str__(self) -> str:
        return str(self.root)


def is_workspace_root(path: Path) -> bool:
    return (path / CONFIG_FILE_NAME).is_file() or (path / "rust-server" / "Cargo.toml").is_file()


def find_workspace_upward(start: Path) -> Path | None:
    """Search upward from start directory for a workspace root."""
    for parent in (start, *start.parents):
        if is_workspace_root(parent):
            return parent
    return None


def detect_workspace(
    *,
    start_dir: Path | None = None,
    env_var: str = WORKSPACE_ENV_VAR,
) -> Result[Path, WorkspaceError]:
    """Detect the workspace root directory.

    Detection order:
    1. ``$TS_WORKSPACE_ROOT`` (if set, it must point at a workspace)
    2. Search upward from start_dir (or cwd)
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir() and is_workspace_root(env_path):
            return Ok(env_path)
        return Err(
            WorkspaceError(
                message=f"${env_var} is set to '{env_value}' but it is not a valid workspace",
                searched_from=env_path if env_path.is_dir() else None,
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_workspace_upward(search_start)
    if found:
        return Ok(found)

    return Err(
        WorkspaceError(
            message=(
                f"Could not find workspace ({CONFIG_FILE_NAME} or rust-server/Cargo.toml not found)"
            ),
            searched_from=search_start,
        )
    )
