"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import PulseConfig
from core.errors import PulseConfigError


def _clear_pulse_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "METRICS_TABLE",
        "TS_DATABASE",
        "TS_TABLE",
        "PULSE_AWS_REGION",
        "AWS_REGION",
        "PULSE_AWS_PROFILE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_uses_store_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fall back to the provisioned Timestream names."""
    _clear_pulse_env(monkeypatch)

    config = PulseConfig.from_env()

    assert (config.ts_database, config.ts_table, config.metrics_table) == (
        "LambdaPulseDB",
        "LambdaPulseMetrics",
        None,
    )


def test_from_env_reads_store_names_and_region(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should read table names and prefer the pulse-specific region."""
    _clear_pulse_env(monkeypatch)
    monkeypatch.setenv("METRICS_TABLE", "InfraStack-MetricsTable-1X2Y")
    monkeypatch.setenv("TS_DATABASE", "PulseDB")
    monkeypatch.setenv("TS_TABLE", "PulseMetrics")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("PULSE_AWS_REGION", "eu-west-1")

    config = PulseConfig.from_env()

    assert config.metrics_table == "InfraStack-MetricsTable-1X2Y"
    assert config.aws_region == "eu-west-1"


def test_from_env_raises_for_quoted_table_name(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject names that could break out of the query quoting."""
    _clear_pulse_env(monkeypatch)
    monkeypatch.setenv("TS_TABLE", 'metrics" OR 1=1 --')

    with pytest.raises(PulseConfigError):
        PulseConfig.from_env()


def test_require_metrics_table_raises_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Write path should fail fast without a snapshot table."""
    _clear_pulse_env(monkeypatch)
    config = PulseConfig.from_env()

    with pytest.raises(PulseConfigError, match="METRICS_TABLE"):
        config.require_metrics_table()
