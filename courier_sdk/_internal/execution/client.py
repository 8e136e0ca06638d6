"""Request executors for arbitrary outbound HTTP calls."""

import os
import sys
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from courier_sdk._internal.execution.models import (
    RequestDescriptor,
    ResponseDescriptor,
    resolve_method,
    should_attach_body,
)
from courier_sdk._internal.execution.normalization import normalize_body, normalize_headers
from courier_sdk._internal.execution.redaction import redact_headers
from courier_sdk._internal.execution.transport import (
    TransportResult,
    asend,
    encode_body,
    send,
)
from courier_sdk._internal.http import (
    DEFAULT_TIMEOUT_MS,
    create_async_http_client,
    create_http_client,
)
from courier_sdk.exceptions import CourierConfigError, CourierTransportError, CourierValidationError


class _BaseExecutor:
    """Configuration and request/response shaping shared by both executors."""

    def __init__(
        self,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        follow_redirects: bool = False,
        body_requires_headers: bool = True,
        debug: bool = False,
    ) -> None:
        self._timeout_ms = timeout_ms
        self._follow_redirects = follow_redirects
        self._body_requires_headers = body_requires_headers
        self._debug = debug

    @classmethod
    def _env_settings(cls) -> dict[str, Any]:
        """Read executor settings from environment variables.

        Optional environment variables:
            COURIER_TIMEOUT_MS: Request timeout in milliseconds.
            COURIER_FOLLOW_REDIRECTS: Set to "1" to follow redirects.
            COURIER_BODY_REQUIRES_HEADERS: Set to "0" to send bodies without headers.
            COURIER_DEBUG: Set to "1" to enable debug logging.

        Raises:
            CourierConfigError: If COURIER_TIMEOUT_MS is not a positive integer.
        """
        raw_timeout = os.environ.get("COURIER_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))
        try:
            timeout_ms = int(raw_timeout)
        except ValueError:
            raise CourierConfigError(
                f"COURIER_TIMEOUT_MS must be an integer, got {raw_timeout!r}"
            ) from None
        if timeout_ms <= 0:
            raise CourierConfigError(f"COURIER_TIMEOUT_MS must be positive, got {timeout_ms}")

        return {
            "timeout_ms": timeout_ms,
            "follow_redirects": os.environ.get("COURIER_FOLLOW_REDIRECTS", "") == "1",
            "body_requires_headers": os.environ.get("COURIER_BODY_REQUIRES_HEADERS", "1") != "0",
            "debug": os.environ.get("COURIER_DEBUG", "") == "1",
        }

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[courier-sdk] {message}", file=sys.stderr)

    def _prepare(
        self, descriptor: RequestDescriptor | Mapping[str, Any]
    ) -> tuple[str, str, dict[str, Any]]:
        """Validate the descriptor and build the httpx request arguments.

        Runs before any network access, so an unknown method never
        reaches the transport.
        """
        if not isinstance(descriptor, RequestDescriptor):
            try:
                descriptor = RequestDescriptor.model_validate(descriptor)
            except ValidationError as e:
                raise CourierValidationError(f"Invalid request descriptor: {e}") from e

        method = resolve_method(descriptor.method)
        kwargs: dict[str, Any] = {}
        if descriptor.headers:
            kwargs["headers"] = dict(descriptor.headers)

        attach = should_attach_body(
            method,
            descriptor.headers,
            body_requires_headers=self._body_requires_headers,
        )
        if attach:
            kwargs.update(encode_body(descriptor.body))
        elif descriptor.body is not None:
            self._log_debug(f"Ignoring body for {method} request")

        self._log_debug(
            f"Sending {method} {descriptor.url} "
            f"headers={redact_headers(descriptor.headers)} body_attached={attach}"
        )
        return method.value, descriptor.url, kwargs

    def _finish(self, result: TransportResult) -> ResponseDescriptor:
        """Normalize a captured round trip into a response descriptor."""
        self._log_debug(f"Received status {result.status_code}")
        return ResponseDescriptor(
            status_code=result.status_code,
            body=normalize_body(result.text),
            headers=normalize_headers(result.headers),
        )


class RequestExecutor(_BaseExecutor):
    """Synchronous executor for runtime-shaped HTTP requests.

    Every call that completes a round trip returns a ResponseDescriptor,
    whatever the status code. Only an unknown method, an unusable URL or a
    transport failure (connection refused, DNS, timeout) raises.

    Use `RequestExecutor.from_env()` to configure the executor from
    environment variables.
    """

    def __init__(
        self,
        *,
        http_client: httpx.Client | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        follow_redirects: bool = False,
        body_requires_headers: bool = True,
        debug: bool = False,
    ) -> None:
        """Initialize the executor.

        Args:
            http_client: Client to send requests with. Never closed by the
                executor. When omitted a fresh client is used per call.
            timeout_ms: Request timeout in milliseconds (own clients only).
            follow_redirects: Follow 3xx responses (own clients only).
            body_requires_headers: Only send a body when headers were supplied.
            debug: Enable debug logging to stderr.
        """
        super().__init__(
            timeout_ms=timeout_ms,
            follow_redirects=follow_redirects,
            body_requires_headers=body_requires_headers,
            debug=debug,
        )
        self._http_client = http_client

    @classmethod
    def from_env(cls, *, http_client: httpx.Client | None = None) -> "RequestExecutor":
        """Create an executor from environment variables.

        See `_BaseExecutor._env_settings` for the variables read.
        """
        return cls(http_client=http_client, **cls._env_settings())

    def execute(self, descriptor: RequestDescriptor | Mapping[str, Any]) -> ResponseDescriptor:
        """Perform the described HTTP call.

        Args:
            descriptor: A RequestDescriptor or a mapping with the same fields.

        Returns:
            The normalized response, for 2xx and error statuses alike.

        Raises:
            CourierValidationError: Invalid descriptor, unknown method or URL.
            CourierTransportError: The round trip did not complete.
        """
        method, url, kwargs = self._prepare(descriptor)
        try:
            if self._http_client is not None:
                result = send(self._http_client, method, url, **kwargs)
            else:
                with create_http_client(
                    timeout_ms=self._timeout_ms,
                    follow_redirects=self._follow_redirects,
                ) as client:
                    result = send(client, method, url, **kwargs)
        except CourierTransportError as e:
            self._log_debug(f"Transport error: {e}")
            raise
        return self._finish(result)


class AsyncRequestExecutor(_BaseExecutor):
    """Asynchronous executor for runtime-shaped HTTP requests.

    Same contract as RequestExecutor. Cancelling the awaiting task cancels
    the in-flight request.
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        follow_redirects: bool = False,
        body_requires_headers: bool = True,
        debug: bool = False,
    ) -> None:
        super().__init__(
            timeout_ms=timeout_ms,
            follow_redirects=follow_redirects,
            body_requires_headers=body_requires_headers,
            debug=debug,
        )
        self._http_client = http_client

    @classmethod
    def from_env(
        cls, *, http_client: httpx.AsyncClient | None = None
    ) -> "AsyncRequestExecutor":
        """Create an async executor from environment variables."""
        return cls(http_client=http_client, **cls._env_settings())

    async def execute(
        self, descriptor: RequestDescriptor | Mapping[str, Any]
    ) -> ResponseDescriptor:
        """Perform the described HTTP call without blocking the event loop."""
        method, url, kwargs = self._prepare(descriptor)
        try:
            if self._http_client is not None:
                result = await asend(self._http_client, method, url, **kwargs)
            else:
                async with create_async_http_client(
                    timeout_ms=self._timeout_ms,
                    follow_redirects=self._follow_redirects,
                ) as client:
                    result = await asend(client, method, url, **kwargs)
        except CourierTransportError as e:
            self._log_debug(f"Transport error: {e}")
            raise
        return self._finish(result)


def get_request_executor() -> RequestExecutor:
    """Get a request executor configured from environment variables.

    Returns:
        A configured RequestExecutor instance.
    """
    return RequestExecutor.from_env()
