"""Shared HTTP client configuration."""

import httpx

from courier_sdk._version import __version__

DEFAULT_TIMEOUT_MS = 30000
USER_AGENT = f"courier-sdk/{__version__}"


def _timeout_seconds(timeout_ms: int) -> float:
    return timeout_ms / 1000


def create_http_client(
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    follow_redirects: bool = False,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout_ms: Request timeout in milliseconds.
        follow_redirects: Whether 3xx responses are followed.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=_timeout_seconds(timeout_ms),
        follow_redirects=follow_redirects,
        headers={"User-Agent": USER_AGENT},
    )


def create_async_http_client(
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    follow_redirects: bool = False,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout_ms: Request timeout in milliseconds.
        follow_redirects: Whether 3xx responses are followed.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=_timeout_seconds(timeout_ms),
        follow_redirects=follow_redirects,
        headers={"User-Agent": USER_AGENT},
    )
