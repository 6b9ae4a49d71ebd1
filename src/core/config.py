"""Runtime configuration model for LambdaPulse.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
import re

from core.constants import (
    DEFAULT_TS_DATABASE,
    DEFAULT_TS_TABLE,
    DYNAMODB_TABLE_NAME_PATTERN,
    TIMESTREAM_NAME_PATTERN,
)
from core.errors import PulseConfigError


@dataclass(frozen=True)
class PulseConfig:
    """Validated runtime configuration.

    Attributes:
        metrics_table: DynamoDB table receiving snapshot rows, if configured.
        ts_database: Timestream database for series writes and queries.
        ts_table: Timestream table for series writes and queries.
        aws_region: Optional AWS region for boto3 session initialization.
        aws_profile: Optional AWS profile for boto3 session initialization.
    """

    metrics_table: str | None
    ts_database: str
    ts_table: str
    aws_region: str | None
    aws_profile: str | None

    @classmethod
    def from_env(cls) -> "PulseConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            PulseConfigError: If environment values are invalid.
        """
        metrics_table = os.getenv("METRICS_TABLE") or None
        if metrics_table is not None:
            _validate_name("METRICS_TABLE", metrics_table, DYNAMODB_TABLE_NAME_PATTERN)
        ts_database = os.getenv("TS_DATABASE") or DEFAULT_TS_DATABASE
        ts_table = os.getenv("TS_TABLE") or DEFAULT_TS_TABLE
        _validate_name("TS_DATABASE", ts_database, TIMESTREAM_NAME_PATTERN)
        _validate_name("TS_TABLE", ts_table, TIMESTREAM_NAME_PATTERN)
        return cls(
            metrics_table=metrics_table,
            ts_database=ts_database,
            ts_table=ts_table,
            aws_region=os.getenv("PULSE_AWS_REGION") or os.getenv("AWS_REGION") or None,
            aws_profile=os.getenv("PULSE_AWS_PROFILE") or None,
        )

    def require_metrics_table(self) -> str:
        """Return the snapshot table name required by the write path.

        Raises:
            PulseConfigError: If METRICS_TABLE was not configured.
        """
        if self.metrics_table is None:
            raise PulseConfigError(
                "Snapshot table is not configured. "
                "Set METRICS_TABLE to the DynamoDB table receiving metric snapshots."
            )
        return self.metrics_table


def _validate_name(variable: str, value: str, pattern: str) -> None:
    """Validate a store resource name from the environment.

    Args:
        variable: Environment variable name for error context.
        value: Raw value read from the environment.
        pattern: Regular expression the value must fully match.

    Raises:
        PulseConfigError: If the value does not match the naming rules.
    """
    if re.fullmatch(pattern, value) is None:
        raise PulseConfigError(
            f"Invalid {variable} value '{value}': expected 3+ characters "
            "from letters, digits, '_', '.', or '-'. "
            f"Set {variable} to a valid resource name."
        )
