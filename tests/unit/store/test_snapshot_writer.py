"""Unit tests for DynamoDB snapshot writes."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from core.errors import PulseSnapshotError
from core.types import MetricEvent
from store.snapshot_writer import SnapshotWriter, build_snapshot_item
from tests.aws_fakes import FakeDynamoDBClient


def _event() -> MetricEvent:
    return MetricEvent(
        ticker_symbol="ACME",
        price=Decimal("125.34"),
        observed_at="1718000000123",
        change=Decimal("-0.5"),
        sector="TECH",
    )


def test_build_snapshot_item_marshals_key_and_values() -> None:
    """Item should be keyed by ticker and observation time."""
    item = build_snapshot_item(_event())

    assert item == {
        "tickerSymbol": {"S": "ACME"},
        "timestamp": {"S": "1718000000123"},
        "price": {"N": "125.34"},
        "change": {"N": "-0.5"},
        "sector": {"S": "TECH"},
    }


def test_build_snapshot_item_omits_absent_optionals() -> None:
    """Absent change/sector should not be written as attributes."""
    item = build_snapshot_item(replace(_event(), change=None, sector=None))

    assert sorted(item) == ["price", "tickerSymbol", "timestamp"]


def test_write_puts_one_item_into_table() -> None:
    """Writer should issue exactly one put per event."""
    client = FakeDynamoDBClient()
    writer = SnapshotWriter(client, "Metrics")

    writer.write(_event())

    assert len(client.put_calls) == 1
    assert client.put_calls[0]["TableName"] == "Metrics"


def test_write_wraps_store_errors() -> None:
    """Store failures should surface as snapshot errors without retry."""
    client = FakeDynamoDBClient(fail_on_call=1)
    writer = SnapshotWriter(client, "Metrics")

    with pytest.raises(PulseSnapshotError, match="ACME@1718000000123"):
        writer.write(_event())

    assert len(client.put_calls) == 1
