"""Public SDK surface for LambdaPulse.

This module provides a stable import path for library users.
It re-exports the primary client and typed models.
"""

from __future__ import annotations

from core.config import PulseConfig
from core.errors import (
    PulseConfigError,
    PulseDecodeError,
    PulseError,
    PulseQueryError,
    PulseSeriesError,
    PulseSnapshotError,
)
from core.types import (
    EncodedRecord,
    MetricEvent,
    QueryRow,
    RecordAcknowledgment,
    SeriesPoint,
    TransformReport,
)
from ingest.record_decoder import decode_record
from serve.latest_points import build_latest_points_query, reshape_rows
from store.pulse_sdk import PulseClient

__all__ = [
    "EncodedRecord",
    "MetricEvent",
    "PulseClient",
    "PulseConfig",
    "PulseConfigError",
    "PulseDecodeError",
    "PulseError",
    "PulseQueryError",
    "PulseSeriesError",
    "PulseSnapshotError",
    "QueryRow",
    "RecordAcknowledgment",
    "SeriesPoint",
    "TransformReport",
    "build_latest_points_query",
    "decode_record",
    "reshape_rows",
]
