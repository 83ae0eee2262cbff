"""Result type for explicit error handling.

Services in this package never raise across their public seams. They return
either ``Ok(value)`` or ``Err(error)``, and the CLI layer decides how a
failure is presented and which exit code it maps to.

Usage:
    match packager.package(config_path):
        case Ok(dist_dir):
            console.success(str(dist_dir))
        case Err(error):
            print_package_error(error, console)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result holding ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result holding ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]
