"""Time-series batch submission.

This module submits one accumulated batch of series points to
Timestream in a single ``WriteRecords`` call.
"""

from __future__ import annotations

from typing import Any, Sequence

from botocore.exceptions import BotoCoreError, ClientError

from core.errors import PulseSeriesError
from core.logging_config import get_logger
from core.types import SeriesPoint

_LOGGER = get_logger(__name__)


class SeriesWriter:
    """Timestream-backed batch writer bound to one database/table."""

    def __init__(self, write_client: Any, database: str, table: str) -> None:
        """Initialize the writer.

        Args:
            write_client: Boto3 ``timestream-write`` client.
            database: Destination database name.
            table: Destination table name.
        """
        self._client = write_client
        self._database = database
        self._table = table

    def write(self, points: Sequence[SeriesPoint]) -> int:
        """Submit all points in one call.

        Args:
            points: Ordered batch of series points.

        Returns:
            Number of records ingested; zero when the batch is empty.

        Raises:
            PulseSeriesError: If the store rejects the batch or is unreachable.
        """
        if not points:
            return 0
        try:
            response = self._client.write_records(
                DatabaseName=self._database,
                TableName=self._table,
                Records=[point.to_record() for point in points],
            )
        except ClientError as error:
            raise PulseSeriesError(
                f"Time-series store rejected batch of {len(points)} points for "
                f"{self._database}.{self._table}: {_describe_client_error(error)}. "
                "No point of this batch is guaranteed persisted."
            ) from error
        except BotoCoreError as error:
            raise PulseSeriesError(
                f"Failed to submit batch of {len(points)} points to "
                f"{self._database}.{self._table}: {error}. "
                "No point of this batch is guaranteed persisted."
            ) from error
        ingested = _read_ingested_total(response, len(points))
        _LOGGER.info(
            "series_batch_written",
            database=self._database,
            table=self._table,
            submitted=len(points),
            ingested=ingested,
        )
        return ingested


def _describe_client_error(error: ClientError) -> str:
    """Render a client error including per-record rejection reasons."""
    details = error.response.get("Error", {})
    message = f"{details.get('Code', 'Unknown')}: {details.get('Message', '')}".rstrip(": ")
    rejected = error.response.get("RejectedRecords") or []
    reasons = [
        f"record {item.get('RecordIndex')}: {item.get('Reason')}"
        for item in rejected
    ]
    if reasons:
        message = f"{message} ({'; '.join(reasons)})"
    return message


def _read_ingested_total(response: Any, submitted: int) -> int:
    """Read the ingested-record total, defaulting to the submitted count."""
    if isinstance(response, dict):
        total = response.get("RecordsIngested", {}).get("Total")
        if isinstance(total, int):
            return total
    return submitted
