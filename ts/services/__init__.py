"""Application services for the TelemetryServer CLI.

Services implement the build, run and packaging workflows, coordinating
between the domain layer (core/) and the process/filesystem layer (platform/).
"""

from ts.services.builder import Builder, CargoCrossBuilder
from ts.services.environment import EnvironmentChecker, ToolStatus
from ts.services.errors import (
    BuildError,
    ConfigNotFoundError,
    EnvironmentCheckError,
    PackageError,
    PackagingError,
)
from ts.services.package import ReleasePackager
from ts.services.server import ServerService

__all__ = [
    # Errors
    "BuildError",
    "ConfigNotFoundError",
    "EnvironmentCheckError",
    "PackageError",
    "PackagingError",
    # Services
    "Builder",
    "CargoCrossBuilder",
    "EnvironmentChecker",
    "ToolStatus",
    "ReleasePackager",
    "ServerService",
]
