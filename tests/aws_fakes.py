"""Hand-written AWS client fakes and payload helpers for tests."""

from __future__ import annotations

import base64
import json

from botocore.exceptions import ClientError


def encode_payload(payload: object) -> str:
    """Encode a JSON payload the way the delivery stream does."""
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


def client_error(code: str, operation: str, **extra: object) -> ClientError:
    """Build a botocore client error with optional response fields."""
    response: dict[str, object] = {"Error": {"Code": code, "Message": f"{code} raised"}}
    response.update(extra)
    return ClientError(response, operation)


class FakeDynamoDBClient:
    """Records ``put_item`` calls; optionally fails on the n-th call."""

    def __init__(self, fail_on_call: int | None = None) -> None:
        self.put_calls: list[dict[str, object]] = []
        self._fail_on_call = fail_on_call

    def put_item(self, **kwargs: object) -> dict[str, object]:
        self.put_calls.append(kwargs)
        if self._fail_on_call == len(self.put_calls):
            raise client_error("ProvisionedThroughputExceededException", "PutItem")
        return {}


class FakeTimestreamWriteClient:
    """Records ``write_records`` calls; optionally raises a given error."""

    def __init__(self, error: Exception | None = None) -> None:
        self.write_calls: list[dict[str, object]] = []
        self._error = error

    def write_records(self, **kwargs: object) -> dict[str, object]:
        self.write_calls.append(kwargs)
        if self._error is not None:
            raise self._error
        records = kwargs["Records"]
        assert isinstance(records, list)
        return {"RecordsIngested": {"Total": len(records), "MemoryStore": len(records)}}


class FakeTimestreamQueryClient:
    """Returns a canned query response; optionally raises a given error."""

    def __init__(
        self,
        response: dict[str, object] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.queries: list[str] = []
        self._response = response if response is not None else {"ColumnInfo": [], "Rows": []}
        self._error = error

    def query(self, QueryString: str) -> dict[str, object]:
        self.queries.append(QueryString)
        if self._error is not None:
            raise self._error
        return self._response


def price_query_response() -> dict[str, object]:
    """Build a two-row Timestream response for the latest-points query."""
    columns = ["ticker", "sector", "measure_name", "time", "measure_value::double"]
    return {
        "ColumnInfo": [{"Name": name, "Type": {"ScalarType": "VARCHAR"}} for name in columns],
        "Rows": [
            {
                "Data": [
                    {"ScalarValue": "ACME"},
                    {"ScalarValue": "TECH"},
                    {"ScalarValue": "price"},
                    {"ScalarValue": "2024-01-01 00:00:01.000000000"},
                    {"ScalarValue": "125.34"},
                ]
            },
            {
                "Data": [
                    {"ScalarValue": "GLOBEX"},
                    {"ScalarValue": "ENERGY"},
                    {"ScalarValue": "price"},
                    {"ScalarValue": "2024-01-01 00:00:00.000000000"},
                    {"ScalarValue": "88"},
                ]
            },
        ],
    }
