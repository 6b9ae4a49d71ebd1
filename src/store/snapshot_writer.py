"""Key-value snapshot persistence.

This module writes one point-in-time row per decoded metric event
into DynamoDB, keyed by ticker symbol and observation time.
"""

from __future__ import annotations

from typing import Any

from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError

from core.constants import SNAPSHOT_PARTITION_KEY, SNAPSHOT_SORT_KEY
from core.errors import PulseSnapshotError
from core.logging_config import get_logger
from core.types import MetricEvent

_LOGGER = get_logger(__name__)
_SERIALIZER = TypeSerializer()


class SnapshotWriter:
    """DynamoDB-backed snapshot writer.

    The client is injected and owned by the caller; one writer is
    reused across invocations of the same process.
    """

    def __init__(self, dynamodb_client: Any, table_name: str) -> None:
        """Initialize the writer.

        Args:
            dynamodb_client: Boto3 DynamoDB client.
            table_name: Destination table name.
        """
        self._client = dynamodb_client
        self._table_name = table_name

    @property
    def table_name(self) -> str:
        """Destination table name."""
        return self._table_name

    def write(self, event: MetricEvent) -> None:
        """Put one snapshot row for a metric event.

        Args:
            event: Decoded metric event with its observation time.

        Raises:
            PulseSnapshotError: If DynamoDB rejects the write or is unreachable.
        """
        item = build_snapshot_item(event)
        try:
            self._client.put_item(TableName=self._table_name, Item=item)
        except (ClientError, BotoCoreError) as error:
            raise PulseSnapshotError(
                f"Failed to write snapshot for {event.ticker_symbol}@{event.observed_at} "
                f"to table {self._table_name}: {error}. "
                "Check table permissions and availability; the stream will redeliver the batch."
            ) from error
        _LOGGER.debug(
            "snapshot_written",
            table_name=self._table_name,
            ticker_symbol=event.ticker_symbol,
            observed_at=event.observed_at,
        )


def build_snapshot_item(event: MetricEvent) -> dict[str, dict[str, Any]]:
    """Build the DynamoDB attribute-value item for one event.

    Args:
        event: Decoded metric event.

    Returns:
        Marshalled item; absent optional attributes are omitted.
    """
    attributes: dict[str, object] = {
        SNAPSHOT_PARTITION_KEY: event.ticker_symbol,
        SNAPSHOT_SORT_KEY: event.observed_at,
        "price": event.price,
        "change": event.change,
        "sector": event.sector,
    }
    return {
        name: _SERIALIZER.serialize(value)
        for name, value in attributes.items()
        if value is not None
    }
