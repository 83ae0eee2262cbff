"""Build environment checker.

Validates that the tools ``build-dist`` shells out to are installed:
- cargo: the Rust build driver (also used by ``run`` and ``test``)
- cross: the cross-compilation helper
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ts.core.config import REQUIRED_TOOLS
from ts.core.result import Err, Ok, Result
from ts.platform.process import run
from ts.services.errors import EnvironmentCheckError

Which = Callable[[str], str | None]
VersionProbe = Callable[[Path], str | None]


@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of looking up a single tool.

    Attributes:
        name: Executable name searched on PATH
        path: Resolved location, None if not found
        version: First line of ``<tool> --version``, if it was probed
    """

    name: str
    path: Path | None
    version: str | None = None

    @property
    def ok(self) -> bool:
        return self.path is not None


def _first_line(text: str) -> str | None:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return None


def probe_version(path: Path) -> str | None:
    result = run([str(path), "--version"], cwd=path.parent, timeout=30.0)
    if isinstance(result, Err):
        return None
    return _first_line(result.value)


@dataclass(frozen=True, slots=True)
class EnvironmentChecker:
    """Check that required tools are reachable on PATH.

    Attributes:
        tools: Executable names that must be present
        which: PATH lookup, ``shutil.which`` unless replaced in tests
        version_probe: Used by ``report`` to describe found tools
    """

    tools: tuple[str, ...] = REQUIRED_TOOLS
    which: Which = field(default=shutil.which)
    version_probe: VersionProbe = field(default=probe_version)

    def lookup(self) -> list[ToolStatus]:
        """Locate every tool without running anything."""
        statuses: list[ToolStatus] = []
        for name in self.tools:
            found = self.which(name)
            statuses.append(ToolStatus(name=name, path=Path(found) if found else None))
        return statuses

    def report(self) -> list[ToolStatus]:
        """Locate every tool and probe the version of those found."""
        return [
            ToolStatus(name=s.name, path=s.path, version=self.version_probe(s.path))
            if s.path is not None
            else s
            for s in self.lookup()
        ]

    def require(self) -> Result[dict[str, Path], EnvironmentCheckError]:
        """Return tool paths by name, or an error naming every missing tool."""
        statuses = self.lookup()
        missing = tuple(s.name for s in statuses if s.path is None)
        if missing:
            return Err(EnvironmentCheckError(missing=missing))
        return Ok({s.name: s.path for s in statuses if s.path is not None})
