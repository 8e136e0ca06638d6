"""Response body and header normalization."""

import datetime
import json
from collections.abc import Mapping
from email.message import Message
from email.utils import parsedate_to_datetime
from typing import Any

from courier_sdk._internal.execution.models import ResponseHeaders


def normalize_body(raw: str | None) -> Any:
    """Turn a raw response payload into the normalized body.

    Blank payloads become None. Anything that parses as JSON becomes the
    parsed tree; everything else is returned unchanged.

    Args:
        raw: The decoded response text, or None.

    Returns:
        None, a JSON tree (dict, list, str, int, float, bool), or the raw string.
    """
    if raw is None or not raw.strip():
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return raw


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"invalid JSON constant: {name}")


def normalize_headers(headers: Mapping[str, str] | None) -> ResponseHeaders:
    """Derive the fixed header fields from a response header mapping.

    Header names are matched case-insensitively. Missing or unparseable
    values leave the corresponding field empty.
    """
    if not headers:
        return ResponseHeaders()
    lowered = {name.lower(): value for name, value in headers.items()}
    return ResponseHeaders(
        content_type=_parse_charset(lowered.get("content-type")),
        date=_parse_local_date(lowered.get("date")),
        connection=_parse_tokens(lowered.get("connection")),
    )


def _parse_charset(content_type: str | None) -> str | None:
    """Extract the charset parameter of a Content-Type value."""
    if not content_type:
        return None
    message = Message()
    message["content-type"] = content_type
    charset = message.get_param("charset")
    if isinstance(charset, str) and charset:
        return charset
    return None


def _parse_local_date(value: str | None) -> datetime.date | None:
    """Convert an HTTP-date to a calendar date in the local time zone."""
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.UTC)
    return parsed.astimezone().date()


def _parse_tokens(value: str | None) -> list[str]:
    if not value:
        return []
    return [token.strip() for token in value.split(",") if token.strip()]
