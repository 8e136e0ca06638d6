"""Request execution for Courier SDK.

WARNING: This is a system-level module.
Use courier_sdk.CourierClient or the executors re-exported from courier_sdk.
"""

from courier_sdk._internal.execution.client import (
    AsyncRequestExecutor,
    RequestExecutor,
    get_request_executor,
)
from courier_sdk._internal.execution.models import (
    PAYLOAD_METHODS,
    RequestDescriptor,
    ResponseDescriptor,
    ResponseHeaders,
    resolve_method,
    should_attach_body,
)

__all__ = [
    "RequestExecutor",
    "AsyncRequestExecutor",
    "get_request_executor",
    "RequestDescriptor",
    "ResponseDescriptor",
    "ResponseHeaders",
    "PAYLOAD_METHODS",
    "resolve_method",
    "should_attach_body",
]
