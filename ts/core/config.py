"""Typed configuration loading and access.

Two kinds of settings live here:

- Release constants. The target triple and the names of the shipped files are
  fixed; they are not read from any file.
- Workspace settings from an optional ``telemetry.toml`` at the workspace
  root (where the server project lives, where dist output goes, how ``run``
  configures the server's logging).

This config is about the tooling only. The server's own ``config.yaml`` is
opaque to this package.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "PathsConfig",
    "RunConfig",
    "load_config",
    "CONFIG_FILE_NAME",
    "RELEASE_TARGET",
    "SERVER_BINARY_NAME",
    "DIST_BINARY_NAME",
    "DIST_CONFIG_NAME",
    "REQUIRED_TOOLS",
]

CONFIG_FILE_NAME = "telemetry.toml"

# -----------------------------------------------------------------------------
# Release constants
# -----------------------------------------------------------------------------

RELEASE_TARGET = "x86_64-unknown-linux-gnu"

# Binary produced by cargo for the server crate
SERVER_BINARY_NAME = "server"

# Names inside the dist directory
DIST_BINARY_NAME = "rashitelemetryserver"
DIST_CONFIG_NAME = "config.yaml"

# Build driver + cross-compilation helper, both needed for build-dist
REQUIRED_TOOLS: tuple[str, ...] = ("cargo", "cross")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when telemetry.toml cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Paths relative to the workspace root."""

    server: str = "rust-server"
    dist: str = "dist"


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Environment given to the server by ``ts run``."""

    log_level: str = "debug"
    backtrace: bool = True

    def env_vars(self) -> dict[str, str]:
        return {
            "RUST_LOG": self.log_level,
            "RUST_BACKTRACE": "1" if self.backtrace else "0",
        }


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    paths: PathsConfig = field(default_factory=PathsConfig)
    run: RunConfig = field(default_factory=RunConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        paths: StrDict = get_table(data, "paths") or {}
        run: StrDict = get_table(data, "run") or {}

        backtrace = get_bool(run, "backtrace")
        return cls(
            paths=PathsConfig(
                server=get_str(paths, "server") or "rust-server",
                dist=get_str(paths, "dist") or "dist",
            ),
            run=RunConfig(
                log_level=get_str(run, "log_level") or "debug",
                backtrace=True if backtrace is None else backtrace,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse telemetry.toml.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))
