"""Release packaging for the TelemetryServer binary.

Produces a self-contained, ready-to-deploy directory for one platform from
one config file. The pipeline is strictly linear and stops at the first
failure:

1. environment check (cargo + cross on PATH)
2. config path validation
3. clean release build through the injected ``Builder``
4. staging of the dist directory

Nothing under the dist directory is touched before step 4. Step 4 writes a
sibling staging directory and swaps it into place, so the dist directory is
either entirely the previous release or entirely the new one.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from ts.core.config import DIST_BINARY_NAME, DIST_CONFIG_NAME, RELEASE_TARGET
from ts.core.result import Err, Ok, Result
from ts.output.console import ConsoleProtocol, Style
from ts.platform.files import make_staging_dir, replace_dir
from ts.services.builder import Builder
from ts.services.config_file import resolve_config_file
from ts.services.environment import EnvironmentChecker
from ts.services.errors import PackageError, PackagingError

__all__ = ["ReleasePackager", "stage_dist"]

_STAGING_MODE = 0o755


def stage_dist(*, binary: Path, config: Path, dist_dir: Path) -> Result[Path, PackagingError]:
    """Replace ``dist_dir`` with a directory holding the binary and config.

    On failure the staging directory is removed. The previous ``dist_dir`` is
    only gone if the failure happened after the swap, which cannot leave
    partial contents behind.
    """
    try:
        staging = make_staging_dir(dist_dir)
    except OSError as e:
        return Err(PackagingError(path=dist_dir.parent, reason=str(e)))

    try:
        staging.chmod(_STAGING_MODE)
        shutil.copy2(binary, staging / DIST_BINARY_NAME)
        shutil.copyfile(config, staging / DIST_CONFIG_NAME)
        replace_dir(staging, dist_dir)
    except OSError as e:
        shutil.rmtree(staging, ignore_errors=True)
        failed_at = Path(e.filename) if e.filename else dist_dir
        return Err(PackagingError(path=failed_at, reason=e.strerror or str(e)))

    return Ok(dist_dir)


@dataclass(frozen=True, slots=True)
class ReleasePackager:
    """Build the server for a target and package it into ``dist_dir``.

    Attributes:
        builder: Produces the release binary
        environment: Verifies build tooling before anything else runs
        dist_dir: Output directory, recreated on every successful run
        console: Progress output
        dry_run: Validate inputs and echo commands, write nothing
    """

    builder: Builder
    environment: EnvironmentChecker
    dist_dir: Path
    console: ConsoleProtocol
    dry_run: bool = False

    def package(
        self, config_path: Path, target: str = RELEASE_TARGET
    ) -> Result[Path, PackageError]:
        """Run the full pipeline.

        Returns:
            Ok(dist_dir) on success, Err(PackageError) from the failing step.
        """
        tools = self.environment.require()
        if isinstance(tools, Err):
            return tools

        config = resolve_config_file(config_path)
        if isinstance(config, Err):
            return config

        self.console.header(f"Building {target}")
        binary = self.builder.build(target, tools.value)
        if isinstance(binary, Err):
            return binary

        self.console.header(f"Staging {self.dist_dir}")
        if self.dry_run:
            self.console.print(f"{binary.value} -> {self.dist_dir / DIST_BINARY_NAME}", Style.DIM)
            self.console.print(
                f"{config.value} -> {self.dist_dir / DIST_CONFIG_NAME}", Style.DIM
            )
            return Ok(self.dist_dir)

        return stage_dist(binary=binary.value, config=config.value, dist_dir=self.dist_dir)
