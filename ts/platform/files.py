"""Filesystem helpers for staging directories."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

__all__ = ["make_staging_dir", "replace_dir"]


def make_staging_dir(final: Path) -> Path:
    """Create an empty temporary directory next to ``final``.

    Staging on the same filesystem keeps the later rename atomic.
    """
    final.parent.mkdir(parents=True, exist_ok=True)
    return Path(tempfile.mkdtemp(prefix=f".{final.name}.", suffix=".staging", dir=final.parent))


def replace_dir(staging: Path, final: Path) -> None:
    """Move ``staging`` to ``final``, discarding whatever ``final`` held.

    The old directory is renamed aside first and only deleted once the new one
    is in place, so ``final`` never holds a mix of old and new files.

    Raises:
        OSError: If either rename fails. ``final`` is restored if it was moved.
    """
    backup: Path | None = None
    if final.exists() or final.is_symlink():
        backup = final.with_name(f".{final.name}.old-{os.getpid()}")
        if backup.exists():
            shutil.rmtree(backup)
        os.replace(final, backup)

    try:
        os.replace(staging, final)
    except OSError:
        if backup is not None:
            os.replace(backup, final)
        raise

    if backup is not None:
        if backup.is_dir() and not backup.is_symlink():
            shutil.rmtree(backup, ignore_errors=True)
        else:
            backup.unlink(missing_ok=True)
