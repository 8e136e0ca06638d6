"""Redaction of sensitive header values in debug output."""

from collections.abc import Mapping

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
    "api-key",
    "x-auth-token",
    "x-access-token",
})

REDACT_MARKERS: tuple[str, ...] = ("token", "secret", "password", "api_key", "apikey")

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    """Return a copy of headers with sensitive values masked.

    The original mapping is never mutated.

    Args:
        headers: Header name to value mapping (may be None).

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    if not headers:
        return {}
    return {
        name: REDACTED_VALUE if _is_sensitive(name) else value
        for name, value in headers.items()
    }


def _is_sensitive(name: str) -> bool:
    lowered = name.lower()
    if lowered in REDACT_HEADERS:
        return True
    compact = lowered.replace("-", "_")
    return any(marker in compact for marker in REDACT_MARKERS)
