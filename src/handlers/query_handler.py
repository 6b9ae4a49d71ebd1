"""API Gateway proxy handler for the latest-points read path."""

from __future__ import annotations

import json
from typing import Any

from core.constants import JSON_CONTENT_TYPE
from core.errors import PulseQueryError
from core.logging_config import get_logger
from handlers.runtime import get_client

_LOGGER = get_logger(__name__)


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Return the most recent price points as a JSON array.

    A failed query yields a 502 error body, distinct from the 200
    response with an empty array returned when no points exist.
    """
    try:
        rows = get_client().latest_points()
    except PulseQueryError as error:
        _LOGGER.error("latest_points_failed", error=str(error))
        return _json_response(502, {"error": str(error)})
    return _json_response(200, rows)


def _json_response(status_code: int, payload: object) -> dict[str, Any]:
    """Build an API Gateway proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": JSON_CONTENT_TYPE},
        "body": json.dumps(payload),
    }
