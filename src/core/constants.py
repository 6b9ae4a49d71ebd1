"""Core constants used across LambdaPulse modules.

This module centralizes store names, payload field names, and
time-series conventions. Keeping values here avoids magic literals.
"""

from __future__ import annotations

DEFAULT_TS_DATABASE = "LambdaPulseDB"
DEFAULT_TS_TABLE = "LambdaPulseMetrics"
TIMESTREAM_NAME_PATTERN = r"^[A-Za-z0-9_.\-]{3,256}$"
DYNAMODB_TABLE_NAME_PATTERN = r"^[A-Za-z0-9_.\-]{3,255}$"

PAYLOAD_TICKER_FIELD = "TICKER_SYMBOL"
PAYLOAD_PRICE_FIELD = "PRICE"
PAYLOAD_CHANGE_FIELD = "CHANGE"
PAYLOAD_SECTOR_FIELD = "SECTOR"

SNAPSHOT_PARTITION_KEY = "tickerSymbol"
SNAPSHOT_SORT_KEY = "timestamp"

MEASURE_NAME = "price"
MEASURE_VALUE_TYPE = "DOUBLE"
MEASURE_VALUE_COLUMN_PREFIX = "measure_value"
SERIES_TIME_UNIT = "MILLISECONDS"
TICKER_DIMENSION = "ticker"
SECTOR_DIMENSION = "sector"

LATEST_POINTS_LIMIT = 10
ACK_RESULT_OK = "Ok"
JSON_CONTENT_TYPE = "application/json"
