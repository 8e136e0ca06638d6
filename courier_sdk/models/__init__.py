"""Public models for the Courier SDK.

    from courier_sdk.models import RequestDescriptor

    descriptor = RequestDescriptor(
        url="https://api.example.com/items",
        method="post",
        headers={"Content-Type": "application/json"},
        body={"name": "widget"},
    )
"""

from courier_sdk._internal.execution.models import (
    RequestDescriptor,
    ResponseDescriptor,
    ResponseHeaders,
)

__all__ = ["RequestDescriptor", "ResponseDescriptor", "ResponseHeaders"]
