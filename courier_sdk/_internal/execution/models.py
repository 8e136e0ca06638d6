"""Pydantic models for request and response descriptors.

Attributes are snake_case in Python and camelCase on the wire
(e.g. ``status_code`` <-> ``statusCode``).
"""

import datetime
from collections.abc import Mapping
from http import HTTPMethod
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from courier_sdk.exceptions import CourierValidationError

# =============================================================================
# Constants
# =============================================================================

PAYLOAD_METHODS: frozenset[HTTPMethod] = frozenset({
    HTTPMethod.POST,
    HTTPMethod.PUT,
    HTTPMethod.PATCH,
})

_DESCRIPTOR_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "frozen": True,
}

# =============================================================================
# Method Resolution
# =============================================================================


def resolve_method(token: str) -> HTTPMethod:
    """Resolve a case-insensitive method token to a standard HTTP method.

    Args:
        token: Method token such as "get" or "POST".

    Returns:
        The matching HTTPMethod member.

    Raises:
        CourierValidationError: If the token is not a standard HTTP method.
    """
    try:
        return HTTPMethod[token.upper()]
    except KeyError:
        raise CourierValidationError(f"Unsupported HTTP method: {token!r}") from None


def should_attach_body(
    method: HTTPMethod,
    headers: Mapping[str, str] | None,
    *,
    body_requires_headers: bool = True,
) -> bool:
    """Decide whether the request body goes on the wire.

    Only POST, PUT and PATCH carry a body. With ``body_requires_headers`` the
    caller must also have supplied at least one header.
    """
    if method not in PAYLOAD_METHODS:
        return False
    if body_requires_headers:
        return bool(headers)
    return True


# =============================================================================
# Request Descriptor
# =============================================================================


class RequestDescriptor(BaseModel):
    """Caller-supplied description of an HTTP call.

    Required fields:
        url: Absolute URI of the target
        method: Case-insensitive HTTP method token

    Optional fields:
        headers: Header name to single value; absent means no headers
        body: Arbitrary payload, only sent for payload-carrying methods
    """

    url: str = Field(min_length=1)
    method: str
    headers: dict[str, str] | None = None
    body: Any = None

    model_config = _DESCRIPTOR_CONFIG

    @field_validator("method")
    @classmethod
    def method_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("method must not be empty")
        return v

    @field_validator("headers")
    @classmethod
    def headers_ascii(cls, v: dict[str, str] | None) -> dict[str, str] | None:
        for name, value in (v or {}).items():
            if not (name.isascii() and value.isascii()):
                raise ValueError(f"header {name!r} must contain only ASCII characters")
        return v


# =============================================================================
# Response Descriptor
# =============================================================================


class ResponseHeaders(BaseModel):
    """Fixed set of fields derived from the response headers.

    content_type: Charset from the Content-Type header, if declared
    date: Date header as a calendar date in the local time zone
    connection: Tokens of the Connection header
    """

    content_type: str | None = None
    date: datetime.date | None = None
    connection: list[str] = Field(default_factory=list)

    model_config = _DESCRIPTOR_CONFIG


class ResponseDescriptor(BaseModel):
    """Normalized result of an HTTP call, identical for 2xx and error statuses."""

    status_code: int
    body: Any = None
    headers: ResponseHeaders | None = None

    model_config = _DESCRIPTOR_CONFIG
