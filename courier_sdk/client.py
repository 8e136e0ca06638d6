"""Payload-level entry point for the Courier SDK.

CourierClient sits where an inbound API endpoint would: it takes a decoded
request payload, runs it through a RequestExecutor and hands back a status
code plus a JSON-ready response payload.

Example usage:
    from courier_sdk import CourierClient

    client = CourierClient()
    status, payload = client.handle({
        "url": "https://api.example.com/items",
        "method": "POST",
        "headers": {"Content-Type": "application/json"},
        "body": {"name": "widget"},
    })
"""

from collections.abc import Mapping
from typing import Any

from courier_sdk._internal.execution.client import RequestExecutor
from courier_sdk._internal.execution.models import ResponseDescriptor
from courier_sdk.exceptions import (
    CourierError,
    CourierTimeoutError,
    CourierTransportError,
)

FAILURE_MESSAGE_PREFIX = "Failed to execute request: "

STATUS_OK = 200
STATUS_BAD_REQUEST = 400
STATUS_BAD_GATEWAY = 502
STATUS_GATEWAY_TIMEOUT = 504


class CourierClient:
    """User-facing client that executes request payloads."""

    def __init__(self, executor: RequestExecutor | None = None) -> None:
        """Initialize the client.

        Args:
            executor: Executor to run requests with. Defaults to one
                configured from environment variables.
        """
        self._executor = executor or RequestExecutor.from_env()

    def execute(self, payload: Mapping[str, Any]) -> ResponseDescriptor:
        """Execute a request payload, raising on dispatch failure."""
        return self._executor.execute(payload)

    def handle(self, payload: Mapping[str, Any]) -> tuple[int, dict[str, Any]]:
        """Execute a request payload and encode the outcome.

        Remote error statuses are part of a successful outcome: the call
        returns 200 with the remote status inside the payload. Dispatch
        failures return a fixed-shape failure payload instead.

        Args:
            payload: Decoded request payload (url, method, headers, body).

        Returns:
            Tuple of (status code, JSON-ready response payload).
        """
        try:
            response = self._executor.execute(payload)
        except CourierError as e:
            status = failure_status(e)
            return status, failure_payload(status, e)
        return STATUS_OK, response.model_dump(mode="json", by_alias=True)


def failure_status(error: CourierError) -> int:
    """Map a dispatch failure to the status code reported for it."""
    if isinstance(error, CourierTimeoutError):
        return STATUS_GATEWAY_TIMEOUT
    if isinstance(error, CourierTransportError):
        return STATUS_BAD_GATEWAY
    return STATUS_BAD_REQUEST


def failure_payload(status: int, error: Exception) -> dict[str, Any]:
    """Build the fixed-shape failure payload for a dispatch error."""
    failure = ResponseDescriptor(status_code=status, body=f"{FAILURE_MESSAGE_PREFIX}{error}")
    return failure.model_dump(mode="json", by_alias=True)
