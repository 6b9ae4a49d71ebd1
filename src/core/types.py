"""Shared typed models.

This module defines immutable data models used by the ingest, store,
and serve layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from core.constants import (
    ACK_RESULT_OK,
    MEASURE_NAME,
    MEASURE_VALUE_TYPE,
    SERIES_TIME_UNIT,
)

QueryValue = Union[str, float, None]
QueryRow = dict[str, QueryValue]


@dataclass(frozen=True)
class EncodedRecord:
    """Raw record delivered by the stream before decoding.

    Attributes:
        record_id: Caller-assigned record identifier.
        data: Base64-encoded payload, passed back unchanged on acknowledgment.
    """

    record_id: str
    data: str


@dataclass(frozen=True)
class MetricEvent:
    """Validated metric observation decoded from one record.

    Attributes:
        ticker_symbol: Entity identifier used as the snapshot partition key.
        price: Observed price, kept as Decimal to preserve its textual value.
        observed_at: Epoch-millisecond string shared by the whole batch.
        change: Optional price change.
        sector: Optional sector label.
    """

    ticker_symbol: str
    price: Decimal
    observed_at: str
    change: Decimal | None = None
    sector: str | None = None


@dataclass(frozen=True)
class SeriesDimension:
    """One categorical attribute attached to a series point."""

    name: str
    value: str


@dataclass(frozen=True)
class SeriesPoint:
    """Single time-series measure ready for batch submission.

    Attributes:
        dimensions: Ordered dimension pairs.
        measure_value: Measure value in its string representation.
        time: Epoch-millisecond timestamp string.
        measure_name: Measure name, always ``price``.
        measure_value_type: Timestream value type.
        time_unit: Unit of ``time``.
    """

    dimensions: tuple[SeriesDimension, ...]
    measure_value: str
    time: str
    measure_name: str = MEASURE_NAME
    measure_value_type: str = MEASURE_VALUE_TYPE
    time_unit: str = SERIES_TIME_UNIT

    def to_record(self) -> dict[str, object]:
        """Render the point in the Timestream ``WriteRecords`` record shape."""
        return {
            "Dimensions": [
                {"Name": dimension.name, "Value": dimension.value}
                for dimension in self.dimensions
            ],
            "MeasureName": self.measure_name,
            "MeasureValue": self.measure_value,
            "MeasureValueType": self.measure_value_type,
            "Time": self.time,
            "TimeUnit": self.time_unit,
        }


@dataclass(frozen=True)
class RecordAcknowledgment:
    """Per-record outcome returned to the stream.

    Attributes:
        record_id: Identifier of the acknowledged input record.
        data: Original encoded payload, unchanged.
        result: Outcome marker reported to the stream.
    """

    record_id: str
    data: str
    result: str = ACK_RESULT_OK

    def to_payload(self) -> dict[str, str]:
        """Render the acknowledgment in the Firehose response shape."""
        return {"recordId": self.record_id, "result": self.result, "data": self.data}


@dataclass(frozen=True)
class TransformReport:
    """Outcome of one transform invocation.

    Attributes:
        acknowledgments: One acknowledgment per input record, in input order.
        decoded_count: Records decoded and written as snapshots.
        rejected_record_ids: Records that failed to decode, in input order.
        series_points_written: Points accepted by the time-series store.
        observed_at: Observation time shared by every decoded record.
    """

    acknowledgments: tuple[RecordAcknowledgment, ...]
    decoded_count: int
    rejected_record_ids: tuple[str, ...] = field(default_factory=tuple)
    series_points_written: int = 0
    observed_at: str = ""
