"""Courier SDK for Python.

Executes arbitrary, runtime-shaped HTTP requests and returns one normalized
response shape for both successful and error responses.

Public API:
    CourierClient - Payload-level entry point (decode, execute, encode)
    RequestExecutor / AsyncRequestExecutor - Descriptor-level executors

Internal (system-level, not for direct use):
    _internal.execution - Request dispatch and response normalization
"""

from courier_sdk._internal.execution import AsyncRequestExecutor, RequestExecutor
from courier_sdk._version import __version__
from courier_sdk.client import CourierClient
from courier_sdk.models import RequestDescriptor, ResponseDescriptor, ResponseHeaders

__all__ = [
    "__version__",
    "CourierClient",
    "RequestExecutor",
    "AsyncRequestExecutor",
    "RequestDescriptor",
    "ResponseDescriptor",
    "ResponseHeaders",
]
