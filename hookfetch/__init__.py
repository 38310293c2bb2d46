"""
hookfetch: an HTTP request helper with lifecycle hooks and safe results.
"""

from .callbacks import (
    ErrorResponse,
    FetchCallbacks,
    FetchResponse,
    SuccessResponse,
    fetch_with_callbacks,
)
from .safe import SafeFailure, SafeResult, SafeSuccess, safe
from .transport import HTTPTransport, RequestOptions, fetch

__all__ = [
    "ErrorResponse",
    "FetchCallbacks",
    "FetchResponse",
    "HTTPTransport",
    "RequestOptions",
    "SafeFailure",
    "SafeResult",
    "SafeSuccess",
    "SuccessResponse",
    "fetch",
    "fetch_with_callbacks",
    "safe",
]
