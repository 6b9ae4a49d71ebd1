"""AWS client construction helpers.

This module encapsulates boto3 session and client creation so the
write and read paths receive ready clients instead of building them.
"""

from __future__ import annotations

from typing import Any

import boto3

from core.config import PulseConfig


def create_session(config: PulseConfig) -> boto3.session.Session:
    """Create a boto3 session from runtime config.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 session shared by every client of one process.
    """
    return boto3.session.Session(**_build_session_kwargs(config))


def create_dynamodb_client(session: boto3.session.Session) -> Any:
    """Create the DynamoDB client used for snapshot writes."""
    return session.client("dynamodb")


def create_timestream_write_client(session: boto3.session.Session) -> Any:
    """Create the Timestream write client used for batch submissions."""
    return session.client("timestream-write")


def create_timestream_query_client(session: boto3.session.Session) -> Any:
    """Create the Timestream query client used by the read path."""
    return session.client("timestream-query")


def _build_session_kwargs(config: PulseConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config.

    Args:
        config: Runtime config.

    Returns:
        Session keyword arguments.
    """
    kwargs: dict[str, str] = {}
    if config.aws_profile:
        kwargs["profile_name"] = config.aws_profile
    if config.aws_region:
        kwargs["region_name"] = config.aws_region
    return kwargs
