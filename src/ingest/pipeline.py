"""Transform orchestration for stream record batches.

This module coordinates decoding, snapshot writes, and the single
time-series batch submission for one delivery-stream invocation.
"""

from __future__ import annotations

import time
from typing import Callable, Sequence

from core.errors import PulseDecodeError
from core.logging_config import get_logger
from core.types import EncodedRecord, RecordAcknowledgment, TransformReport
from ingest.record_decoder import decode_record
from store.series_writer import SeriesWriter
from store.snapshot_writer import SnapshotWriter
from transforms.series_batch import SeriesBatchBuilder

_LOGGER = get_logger(__name__)


def epoch_millis() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


class TransformOrchestrator:
    """Sequential decode, snapshot, and series pipeline.

    One orchestrator is reused across invocations. Each ``run`` owns its
    own batch accumulator, so no mutable state crosses invocations.
    """

    def __init__(
        self,
        snapshot_writer: SnapshotWriter,
        series_writer: SeriesWriter,
        clock: Callable[[], int] = epoch_millis,
    ) -> None:
        self._snapshot_writer = snapshot_writer
        self._series_writer = series_writer
        self._clock = clock

    def run(self, records: Sequence[EncodedRecord]) -> TransformReport:
        """Transform one batch and acknowledge every record.

        Decode failures are isolated to their record. Every record is
        acknowledged ``Ok`` with its original payload whatever the decode
        outcome, so raw archival by the stream is never blocked.

        Args:
            records: Input batch in delivery order.

        Returns:
            Report with one acknowledgment per input record.

        Raises:
            PulseSnapshotError: If a snapshot write fails; later records
                are not processed and no series batch is submitted.
            PulseSeriesError: If the series batch submission fails.
        """
        observed_at = str(self._clock())
        batch = SeriesBatchBuilder()
        rejected_record_ids: list[str] = []
        for record in records:
            try:
                event = decode_record(record.data, observed_at)
            except PulseDecodeError as error:
                rejected_record_ids.append(record.record_id)
                _LOGGER.warning(
                    "record_decode_failed",
                    record_id=record.record_id,
                    reason=str(error),
                )
                continue
            self._snapshot_writer.write(event)
            batch.add(event)
        points_written = self._series_writer.write(batch.points)
        report = TransformReport(
            acknowledgments=_build_acknowledgments(records),
            decoded_count=len(batch),
            rejected_record_ids=tuple(rejected_record_ids),
            series_points_written=points_written,
            observed_at=observed_at,
        )
        _log_transform_completion(report)
        return report


def _build_acknowledgments(
    records: Sequence[EncodedRecord],
) -> tuple[RecordAcknowledgment, ...]:
    """Acknowledge every input record in order with its original payload."""
    return tuple(
        RecordAcknowledgment(record_id=record.record_id, data=record.data)
        for record in records
    )


def _log_transform_completion(report: TransformReport) -> None:
    """Log invocation completion with batch counts."""
    _LOGGER.info(
        "transform_completed",
        input_count=len(report.acknowledgments),
        decoded_count=report.decoded_count,
        rejected_count=len(report.rejected_record_ids),
        series_points_written=report.series_points_written,
        observed_at=report.observed_at,
    )
