"""TelemetryServer development and release tooling."""

__version__ = "0.1.0"
