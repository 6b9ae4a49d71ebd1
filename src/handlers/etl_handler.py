"""Firehose data transformation Lambda handler."""

from __future__ import annotations

from typing import Any

from core.errors import PulseError
from core.logging_config import get_logger
from handlers.runtime import get_client
from ingest.firehose_event import build_transformation_response, records_from_event

_LOGGER = get_logger(__name__)


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Transform one Firehose batch and acknowledge every record.

    Args:
        event: Firehose transformation event.
        context: Lambda context, unused.

    Returns:
        Transformation response with one ``Ok`` entry per record.

    Raises:
        PulseError: If configuration, snapshot writes, or the series
            submission fail; Firehose then retries the whole batch.
    """
    records = records_from_event(event)
    try:
        report = get_client().transform(records)
    except PulseError as error:
        _LOGGER.error(
            "transform_failed",
            record_count=len(records),
            error_type=type(error).__name__,
            error=str(error),
        )
        raise
    return build_transformation_response(report)
