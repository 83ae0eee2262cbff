"""Platform abstraction layer."""

from .files import make_staging_dir, replace_dir
from .process import ProcessError, format_command, run, run_silent

__all__ = [
    # files
    "make_staging_dir",
    "replace_dir",
    # process
    "ProcessError",
    "format_command",
    "run",
    "run_silent",
]
