"""Unit tests for AWS client construction helpers."""

from __future__ import annotations

import pytest

from core import aws_clients
from core.config import PulseConfig


class _FakeSession:
    def __init__(self, **kwargs: str) -> None:
        self.kwargs = kwargs
        self.services: list[str] = []

    def client(self, service_name: str) -> str:
        self.services.append(service_name)
        return f"client:{service_name}"


def _config(region: str | None, profile: str | None) -> PulseConfig:
    return PulseConfig(
        metrics_table="Metrics",
        ts_database="LambdaPulseDB",
        ts_table="LambdaPulseMetrics",
        aws_region=region,
        aws_profile=profile,
    )


def test_create_session_passes_profile_and_region(monkeypatch: pytest.MonkeyPatch) -> None:
    """Session should receive only the configured overrides."""
    monkeypatch.setattr(aws_clients.boto3.session, "Session", _FakeSession)

    session = aws_clients.create_session(_config("eu-west-1", None))

    assert session.kwargs == {"region_name": "eu-west-1"}


def test_store_clients_use_expected_services(monkeypatch: pytest.MonkeyPatch) -> None:
    """Each store helper should request its boto3 service."""
    monkeypatch.setattr(aws_clients.boto3.session, "Session", _FakeSession)
    session = aws_clients.create_session(_config(None, "ops"))

    aws_clients.create_dynamodb_client(session)
    aws_clients.create_timestream_write_client(session)
    aws_clients.create_timestream_query_client(session)

    assert session.services == ["dynamodb", "timestream-write", "timestream-query"]
    assert session.kwargs == {"profile_name": "ops"}
