"""Python SDK for the LambdaPulse write and read paths.

This module exposes one client that owns store clients for a process
and reuses them across transform and query invocations.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from core.aws_clients import (
    create_dynamodb_client,
    create_session,
    create_timestream_query_client,
    create_timestream_write_client,
)
from core.config import PulseConfig
from core.types import EncodedRecord, QueryRow, TransformReport
from ingest.pipeline import TransformOrchestrator, epoch_millis
from serve.latest_points import LatestPointsQuery
from store.series_writer import SeriesWriter
from store.snapshot_writer import SnapshotWriter


class PulseClient:
    """Primary SDK entry point for transform and query workflows.

    Store clients are built lazily on first use and then shared by
    reference; callers may inject their own clients instead.
    """

    def __init__(
        self,
        config: PulseConfig | None = None,
        *,
        dynamodb_client: Any = None,
        timestream_write_client: Any = None,
        timestream_query_client: Any = None,
        clock: Callable[[], int] = epoch_millis,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            dynamodb_client: Optional DynamoDB client for snapshot writes.
            timestream_write_client: Optional client for series writes.
            timestream_query_client: Optional client for latest-points reads.
            clock: Epoch-millisecond clock for observation times.
        """
        self._config = config or PulseConfig.from_env()
        self._dynamodb_client = dynamodb_client
        self._write_client = timestream_write_client
        self._query_client = timestream_query_client
        self._clock = clock
        self._session: Any = None
        self._orchestrator: TransformOrchestrator | None = None
        self._latest_query: LatestPointsQuery | None = None

    @property
    def config(self) -> PulseConfig:
        """Runtime configuration of this client."""
        return self._config

    def transform(self, records: Sequence[EncodedRecord]) -> TransformReport:
        """Transform one batch of stream records.

        Args:
            records: Encoded records in delivery order.

        Returns:
            Report with one ``Ok`` acknowledgment per record.

        Raises:
            PulseConfigError: If METRICS_TABLE is not configured.
            PulseSnapshotError: If a snapshot write fails.
            PulseSeriesError: If the series batch is rejected.
        """
        return self._transform_orchestrator().run(records)

    def latest_points(self) -> list[QueryRow]:
        """Return the most recent ``price`` points, newest first.

        Raises:
            PulseQueryError: If the query fails.
        """
        return self._latest_points_query().fetch()

    def _transform_orchestrator(self) -> TransformOrchestrator:
        if self._orchestrator is None:
            table_name = self._config.require_metrics_table()
            if self._dynamodb_client is None:
                self._dynamodb_client = create_dynamodb_client(self._boto_session())
            if self._write_client is None:
                self._write_client = create_timestream_write_client(self._boto_session())
            self._orchestrator = TransformOrchestrator(
                SnapshotWriter(self._dynamodb_client, table_name),
                SeriesWriter(self._write_client, self._config.ts_database, self._config.ts_table),
                clock=self._clock,
            )
        return self._orchestrator

    def _latest_points_query(self) -> LatestPointsQuery:
        if self._latest_query is None:
            if self._query_client is None:
                self._query_client = create_timestream_query_client(self._boto_session())
            self._latest_query = LatestPointsQuery(
                self._query_client,
                self._config.ts_database,
                self._config.ts_table,
            )
        return self._latest_query

    def _boto_session(self) -> Any:
        if self._session is None:
            self._session = create_session(self._config)
        return self._session
