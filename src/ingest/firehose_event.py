"""Firehose transformation event adapter.

This module converts the delivery stream's invocation event into
encoded records and renders the transformation response.
"""

from __future__ import annotations

from typing import Any, Mapping

from core.errors import PulseDecodeError
from core.types import EncodedRecord, TransformReport


def records_from_event(event: Mapping[str, Any]) -> list[EncodedRecord]:
    """Extract encoded records from a Firehose transformation event.

    Args:
        event: Event with a ``records`` list of ``recordId``/``data`` items.

    Returns:
        Records in delivery order.

    Raises:
        PulseDecodeError: If the event envelope itself is malformed.
    """
    raw_records = event.get("records")
    if not isinstance(raw_records, list):
        raise PulseDecodeError(
            "Invalid transformation event: expected a 'records' list. "
            "Invoke the handler with a Firehose data transformation event."
        )
    records: list[EncodedRecord] = []
    for index, raw_record in enumerate(raw_records):
        record_id = raw_record.get("recordId") if isinstance(raw_record, dict) else None
        data = raw_record.get("data") if isinstance(raw_record, dict) else None
        if not isinstance(record_id, str) or not isinstance(data, str):
            raise PulseDecodeError(
                f"Invalid transformation event record at index {index}: "
                "expected string fields 'recordId' and 'data'."
            )
        records.append(EncodedRecord(record_id=record_id, data=data))
    return records


def build_transformation_response(report: TransformReport) -> dict[str, list[dict[str, str]]]:
    """Render the Firehose transformation response for a report."""
    return {"records": [ack.to_payload() for ack in report.acknowledgments]}
