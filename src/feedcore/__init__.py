"""feedcore - conditional fetching and normalized parsing of RSS and Atom feeds."""

from feedcore.exceptions import (
    DecodeError,
    EncodingError,
    FeedError,
    FormatDetectionError,
    MalformedDocumentError,
    TransportError,
)
from feedcore.lifecycle import init, is_initialized, shutdown
from feedcore.models import CacheTokens, Feed, FeedFormat, FetchOptions, Item, ProxyType
from feedcore.services import FeedService, FetchResult
from feedcore.transport import HeaderProvider, HttpTransport

__version__ = "0.1.0"

__all__ = [
    "CacheTokens",
    "DecodeError",
    "EncodingError",
    "Feed",
    "FeedError",
    "FeedFormat",
    "FeedService",
    "FetchOptions",
    "FetchResult",
    "FormatDetectionError",
    "HeaderProvider",
    "HttpTransport",
    "Item",
    "MalformedDocumentError",
    "ProxyType",
    "TransportError",
    "init",
    "is_initialized",
    "shutdown",
]
