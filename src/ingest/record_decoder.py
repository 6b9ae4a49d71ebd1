"""Stream record decoding.

This module turns one opaque base64 stream record into a typed
metric event. Untyped payload access is confined to this boundary.
"""

from __future__ import annotations

import base64
import binascii
import json
from decimal import Decimal, DecimalException
from typing import Any

from boto3.dynamodb.types import DYNAMODB_CONTEXT

from core.constants import (
    PAYLOAD_CHANGE_FIELD,
    PAYLOAD_PRICE_FIELD,
    PAYLOAD_SECTOR_FIELD,
    PAYLOAD_TICKER_FIELD,
)
from core.errors import PulseDecodeError
from core.types import MetricEvent


def decode_record(data: str, observed_at: str) -> MetricEvent:
    """Decode and validate one encoded stream record.

    Args:
        data: Base64-encoded UTF-8 JSON payload.
        observed_at: Observation time shared by the current batch.

    Returns:
        Validated metric event stamped with ``observed_at``.

    Raises:
        PulseDecodeError: If encoding, JSON, or required fields are invalid.
    """
    payload = _parse_payload(_decode_transport(data))
    ticker_symbol = payload.get(PAYLOAD_TICKER_FIELD)
    if not isinstance(ticker_symbol, str) or not ticker_symbol.strip():
        raise PulseDecodeError(
            f"Invalid record payload: expected non-empty string field '{PAYLOAD_TICKER_FIELD}'."
        )
    price = _read_number(payload, PAYLOAD_PRICE_FIELD)
    if price is None:
        raise PulseDecodeError(
            f"Invalid record payload: missing required numeric field '{PAYLOAD_PRICE_FIELD}'."
        )
    return MetricEvent(
        ticker_symbol=ticker_symbol,
        price=price,
        observed_at=observed_at,
        change=_read_number(payload, PAYLOAD_CHANGE_FIELD),
        sector=_read_optional_string(payload, PAYLOAD_SECTOR_FIELD),
    )


def _decode_transport(data: str) -> str:
    """Decode base64 transport encoding into UTF-8 text.

    Raises:
        PulseDecodeError: If data is not valid base64 or UTF-8.
    """
    try:
        raw_bytes = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError, TypeError) as error:
        raise PulseDecodeError(f"Invalid record encoding: {error}.") from error
    try:
        return raw_bytes.decode("utf-8")
    except UnicodeDecodeError as error:
        raise PulseDecodeError(
            f"Invalid record encoding: payload is not UTF-8 ({error.reason})."
        ) from error


def _parse_payload(text: str) -> dict[str, Any]:
    """Parse decoded text as a JSON object with exact decimal numbers.

    Raises:
        PulseDecodeError: If text is not a JSON object.
    """
    try:
        payload = json.loads(text, parse_float=Decimal, parse_int=Decimal)
    except json.JSONDecodeError as error:
        raise PulseDecodeError(f"Invalid record payload: {error.msg}.") from error
    if not isinstance(payload, dict):
        raise PulseDecodeError("Invalid record payload: expected JSON object.")
    return payload


def _read_number(payload: dict[str, Any], field_name: str) -> Decimal | None:
    """Read an optional finite numeric field storable as a DynamoDB number.

    Returns:
        Decimal value, or None when the field is absent or null.

    Raises:
        PulseDecodeError: If the field is present but not a finite number,
            or needs more than 38 digits or an out-of-range exponent.
    """
    value = payload.get(field_name)
    if value is None:
        return None
    if not isinstance(value, Decimal) or not value.is_finite():
        raise PulseDecodeError(
            f"Invalid record payload: field '{field_name}' must be a finite number."
        )
    try:
        return DYNAMODB_CONTEXT.create_decimal(value)
    except DecimalException as error:
        raise PulseDecodeError(
            f"Invalid record payload: field '{field_name}' is outside the storable "
            f"numeric range ({type(error).__name__})."
        ) from error


def _read_optional_string(payload: dict[str, Any], field_name: str) -> str | None:
    """Read an optional string field, treating empty strings as absent."""
    value = payload.get(field_name)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise PulseDecodeError(f"Invalid record payload: field '{field_name}' must be a string.")
    return value
