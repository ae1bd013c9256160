from __future__ import annotations


class SnapshotError(ValueError):
    """Raised when a snapshot would break its identifier uniqueness rules."""


class ConfigError(ValueError):
    """Raised for invalid values in the process environment."""
