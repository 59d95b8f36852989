"""Transport package."""

from feedcore.transport.base import HeaderProvider
from feedcore.transport.headers import ResponseHeaders
from feedcore.transport.http import FetchResponse, HttpTransport

__all__ = [
    "FetchResponse",
    "HeaderProvider",
    "HttpTransport",
    "ResponseHeaders",
]
