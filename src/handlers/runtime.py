"""Process-wide SDK client for Lambda handlers."""

from __future__ import annotations

from functools import lru_cache

from store.pulse_sdk import PulseClient


@lru_cache(maxsize=1)
def get_client() -> PulseClient:
    """Return the SDK client shared by every invocation of this process."""
    return PulseClient()
