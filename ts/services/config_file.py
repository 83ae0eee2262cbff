"""Validation of the server config path given on the command line."""

from __future__ import annotations

import os
from pathlib import Path

from ts.core.result import Err, Ok, Result
from ts.services.errors import ConfigNotFoundError


def resolve_config_file(path: Path) -> Result[Path, ConfigNotFoundError]:
    """Resolve ``path`` to an absolute path of an existing, readable regular file.

    The file's contents are not inspected; its schema belongs to the server.
    """
    try:
        resolved = path.expanduser().resolve()
    except (OSError, RuntimeError):
        return Err(ConfigNotFoundError(path=path))

    if not resolved.is_file() or not os.access(resolved, os.R_OK):
        return Err(ConfigNotFoundError(path=resolved))
    return Ok(resolved)
