"""LambdaPulse exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class PulseError(Exception):
    """Base exception for all LambdaPulse failures."""


class PulseConfigError(PulseError):
    """Raised for invalid runtime configuration."""


class PulseDecodeError(PulseError):
    """Raised when one stream record cannot be decoded into a metric event."""


class PulseSnapshotError(PulseError):
    """Raised when the key-value snapshot store rejects a write."""


class PulseSeriesError(PulseError):
    """Raised when the time-series store rejects a batch submission."""


class PulseQueryError(PulseError):
    """Raised when a time-series read query fails."""
