"""Latest-points query for the read path.

This module issues the fixed most-recent-N ``price`` query against
Timestream and reshapes its columnar result into row objects.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Sequence

from botocore.exceptions import BotoCoreError, ClientError

from core.constants import LATEST_POINTS_LIMIT, MEASURE_NAME, MEASURE_VALUE_COLUMN_PREFIX
from core.errors import PulseQueryError
from core.logging_config import get_logger
from core.types import QueryRow, QueryValue

_LOGGER = get_logger(__name__)


class LatestPointsQuery:
    """Read-side query bound to one database/table destination."""

    def __init__(
        self,
        query_client: Any,
        database: str,
        table: str,
        limit: int = LATEST_POINTS_LIMIT,
    ) -> None:
        """Initialize the query.

        Args:
            query_client: Boto3 ``timestream-query`` client.
            database: Validated Timestream database name.
            table: Validated Timestream table name.
            limit: Number of most recent rows to return.
        """
        self._client = query_client
        self._query_string = build_latest_points_query(database, table, limit)

    @property
    def query_string(self) -> str:
        """Rendered query string."""
        return self._query_string

    def fetch(self) -> list[QueryRow]:
        """Execute the query once and reshape its rows.

        Returns:
            Rows ordered by time descending; empty when no points exist.

        Raises:
            PulseQueryError: If the store rejects the query or is unreachable.
        """
        try:
            response = self._client.query(QueryString=self._query_string)
        except (ClientError, BotoCoreError) as error:
            raise PulseQueryError(
                f"Latest-points query failed: {error}. "
                "Check the Timestream database/table configuration and permissions."
            ) from error
        rows = reshape_rows(response.get("ColumnInfo", []), response.get("Rows", []))
        _LOGGER.info("latest_points_fetched", row_count=len(rows))
        return rows


def build_latest_points_query(database: str, table: str, limit: int = LATEST_POINTS_LIMIT) -> str:
    """Render the fixed latest-points query.

    Args:
        database: Timestream database name, validated by configuration.
        table: Timestream table name, validated by configuration.
        limit: Number of most recent rows.

    Returns:
        Query string selecting every column of the ``price`` measure.
    """
    return (
        "SELECT *\n"
        f'FROM "{database}"."{table}"\n'
        f"WHERE measure_name = '{MEASURE_NAME}'\n"
        "ORDER BY time DESC\n"
        f"LIMIT {int(limit)}"
    )


def reshape_rows(
    column_info: Sequence[Mapping[str, Any]],
    rows: Iterable[Mapping[str, Any]],
) -> list[QueryRow]:
    """Reshape a columnar query result into row mappings.

    Args:
        column_info: Ordered column metadata with a ``Name`` per column.
        rows: Result rows, each with positional ``Data`` values.

    Returns:
        One mapping per row, in result order. The measure-value column is
        coerced to a number under ``price``; other columns pass through.
    """
    column_names = [column.get("Name") for column in column_info]
    reshaped: list[QueryRow] = []
    skipped_positions: set[int] = set()
    for row in rows:
        reshaped.append(_reshape_row(row.get("Data", []), column_names, skipped_positions))
    if skipped_positions:
        _LOGGER.warning(
            "query_columns_skipped",
            positions=sorted(skipped_positions),
            column_count=len(column_names),
        )
    return reshaped


def _reshape_row(
    data: Sequence[Mapping[str, Any]],
    column_names: Sequence[str | None],
    skipped_positions: set[int],
) -> QueryRow:
    """Reshape one row, recording positions without column metadata."""
    row: QueryRow = {}
    for position, datum in enumerate(data):
        name = column_names[position] if position < len(column_names) else None
        if not name:
            skipped_positions.add(position)
            continue
        raw_value = datum.get("ScalarValue") or ""
        if name.startswith(MEASURE_VALUE_COLUMN_PREFIX):
            row[MEASURE_NAME] = _coerce_measure_value(raw_value)
        else:
            row[name] = raw_value
    return row


def _coerce_measure_value(raw_value: str) -> QueryValue:
    """Convert a measure-value scalar to a finite number, or None otherwise."""
    try:
        value = float(raw_value)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        _LOGGER.warning("measure_value_not_numeric", raw_value=raw_value)
        return None
    return value
