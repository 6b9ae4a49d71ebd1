"""Time-series batch accumulation.

This module converts decoded metric events into series points and
collects them into the single write batch of one invocation.
"""

from __future__ import annotations

from core.constants import SECTOR_DIMENSION, TICKER_DIMENSION
from core.types import MetricEvent, SeriesDimension, SeriesPoint


class SeriesBatchBuilder:
    """Ordered in-memory accumulator scoped to one invocation."""

    def __init__(self) -> None:
        self._points: list[SeriesPoint] = []

    def add(self, event: MetricEvent) -> SeriesPoint:
        """Append the series point for one decoded event and return it."""
        point = build_series_point(event)
        self._points.append(point)
        return point

    @property
    def points(self) -> tuple[SeriesPoint, ...]:
        """Accumulated points in decode order."""
        return tuple(self._points)

    def is_empty(self) -> bool:
        """Return whether no point has been accumulated."""
        return not self._points

    def __len__(self) -> int:
        return len(self._points)


def build_series_point(event: MetricEvent) -> SeriesPoint:
    """Build the ``price`` series point for one metric event.

    Args:
        event: Decoded metric event.

    Returns:
        Series point with ticker and sector dimensions. The sector
        dimension is omitted when the event carries no sector.
    """
    dimensions = [SeriesDimension(name=TICKER_DIMENSION, value=event.ticker_symbol)]
    if event.sector is not None:
        dimensions.append(SeriesDimension(name=SECTOR_DIMENSION, value=event.sector))
    return SeriesPoint(
        dimensions=tuple(dimensions),
        measure_value=str(event.price),
        time=event.observed_at,
    )
