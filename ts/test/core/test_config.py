"""Tests for ts.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from ts.core.config import (
    DIST_BINARY_NAME,
    DIST_CONFIG_NAME,
    RELEASE_TARGET,
    REQUIRED_TOOLS,
    Config,
    ConfigError,
    PathsConfig,
    RunConfig,
    load_config,
)
from ts.core.result import Err, Ok


class TestReleaseConstants:
    def test_values(self) -> None:
        assert RELEASE_TARGET == "x86_64-unknown-linux-gnu"
        assert DIST_BINARY_NAME == "rashitelemetryserver"
        assert DIST_CONFIG_NAME == "config.yaml"
        assert REQUIRED_TOOLS == ("cargo", "cross")


class TestDefaults:
    def test_paths(self) -> None:
        assert PathsConfig() == PathsConfig(server="rust-server", dist="dist")

    def test_run_env(self) -> None:
        assert RunConfig().env_vars() == {"RUST_LOG": "debug", "RUST_BACKTRACE": "1"}

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.paths = PathsConfig()  # type: ignore[misc]


class TestFromDict:
    def test_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_overrides(self) -> None:
        config = Config.from_dict(
            {
                "paths": {"server": "server", "dist": "out/dist"},
                "run": {"log_level": "trace", "backtrace": False},
            }
        )
        assert config.paths.server == "server"
        assert config.paths.dist == "out/dist"
        assert config.run.env_vars() == {"RUST_LOG": "trace", "RUST_BACKTRACE": "0"}

    def test_wrong_types_fall_back_to_defaults(self) -> None:
        config = Config.from_dict({"paths": "nope", "run": {"log_level": 3, "backtrace": "yes"}})
        assert config == Config()


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "telemetry.toml"
        path.write_text('[paths]\nserver = "srv"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.paths.server == "srv"
        assert result.value.paths.dist == "dist"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "telemetry.toml")

        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "telemetry.toml"
        path.write_text("[paths\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
