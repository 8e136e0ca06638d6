"""Transport adapter over httpx.

Some clients return 4xx/5xx responses as values, others raise them as
``httpx.HTTPStatusError`` (e.g. through a ``raise_for_status`` event hook).
Both conventions are collapsed here into one ``TransportResult`` so the
executor never needs to know which one the injected client follows.
"""

from typing import Any

import httpx
from pydantic import BaseModel, Field

from courier_sdk.exceptions import (
    CourierTimeoutError,
    CourierTransportError,
    CourierValidationError,
)


class TransportResult(BaseModel):
    """Status, text and headers of a completed round trip."""

    status_code: int
    text: str | None = None
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}


def encode_body(body: Any) -> dict[str, Any]:
    """Map a descriptor body onto httpx request arguments.

    Text and bytes go out verbatim; any other value is JSON-encoded.
    A caller-supplied Content-Type header takes precedence over the
    ``application/json`` default httpx adds for JSON bodies.
    """
    if body is None:
        return {}
    if isinstance(body, (str, bytes)):
        return {"content": body}
    return {"json": body}


def send(client: httpx.Client, method: str, url: str, **kwargs: Any) -> TransportResult:
    """Perform one request and capture its outcome.

    Raises:
        CourierTimeoutError: The request timed out.
        CourierTransportError: The round trip did not complete.
        CourierValidationError: The URL or headers could not be encoded.
    """
    try:
        response = client.request(method, url, **kwargs)
    except httpx.HTTPStatusError as exc:
        response = exc.response
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
        raise _translate(exc, url) from exc
    return _capture(response, _read_text(response))


async def asend(
    client: httpx.AsyncClient, method: str, url: str, **kwargs: Any
) -> TransportResult:
    """Async counterpart of ``send``."""
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.HTTPStatusError as exc:
        response = exc.response
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
        raise _translate(exc, url) from exc
    return _capture(response, await _aread_text(response))


def _translate(exc: Exception, url: str) -> Exception:
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return CourierValidationError(f"Invalid URL {url!r}: {exc}")
    if isinstance(exc, UnicodeEncodeError):
        return CourierValidationError(f"Request to {url} could not be encoded: {exc}")
    if isinstance(exc, httpx.TimeoutException):
        return CourierTimeoutError(f"Request to {url} timed out: {exc}", url=url)
    return CourierTransportError(f"Request to {url} failed: {exc}", url=url)


def _capture(response: httpx.Response, text: str | None) -> TransportResult:
    return TransportResult(
        status_code=response.status_code,
        text=text,
        headers=dict(response.headers),
    )


def _read_text(response: httpx.Response) -> str | None:
    """Body text of the response; one closed before it was read has none."""
    try:
        response.read()
    except httpx.StreamError:
        return None
    return response.text


async def _aread_text(response: httpx.Response) -> str | None:
    try:
        await response.aread()
    except httpx.StreamError:
        return None
    return response.text
