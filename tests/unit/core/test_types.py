"""Unit tests for shared typed models."""

from __future__ import annotations

from core.types import RecordAcknowledgment, SeriesDimension, SeriesPoint


def test_acknowledgment_payload_defaults_to_ok() -> None:
    """Acknowledgments should render the Firehose response entry shape."""
    ack = RecordAcknowledgment(record_id="r-1", data="e30=")

    assert ack.to_payload() == {"recordId": "r-1", "result": "Ok", "data": "e30="}


def test_series_point_renders_write_records_shape() -> None:
    """Series points should render the Timestream record fields."""
    point = SeriesPoint(
        dimensions=(SeriesDimension("ticker", "ACME"), SeriesDimension("sector", "TECH")),
        measure_value="125.34",
        time="1718000000123",
    )

    assert point.to_record() == {
        "Dimensions": [
            {"Name": "ticker", "Value": "ACME"},
            {"Name": "sector", "Value": "TECH"},
        ],
        "MeasureName": "price",
        "MeasureValue": "125.34",
        "MeasureValueType": "DOUBLE",
        "Time": "1718000000123",
        "TimeUnit": "MILLISECONDS",
    }
