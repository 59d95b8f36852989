"""Custom exceptions for feedcore.

Every failure of the fetch/parse pipeline surfaces as a FeedError subclass
carrying a human-readable message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from feedcore.models.cache import CacheTokens


class FeedError(Exception):
    """Base exception class for all feedcore errors."""

    pass


class TransportError(FeedError):
    """Raised when the HTTP exchange fails.

    Covers connection, TLS, timeout and redirect-limit failures as well as
    HTTP error status codes.

    Attributes:
        url: The URL that was requested.
        status_code: HTTP status of the final response, if one was received.
        cache_tokens: Caching headers of the final response, if one was received.
    """

    def __init__(
        self,
        message: str,
        url: str = "",
        status_code: int | None = None,
        cache_tokens: CacheTokens | None = None,
    ):
        self.url = url
        self.status_code = status_code
        self.cache_tokens = cache_tokens
        super().__init__(message)


class EncodingError(FeedError):
    """Raised when the response body cannot be converted to UTF-8.

    Attributes:
        charset: The declared charset that failed.
    """

    def __init__(self, charset: str, message: str):
        self.charset = charset
        super().__init__(message)


class MalformedDocumentError(FeedError):
    """Raised when no XML tree or no root element could be built."""

    pass


class FormatDetectionError(FeedError):
    """Raised when the root node does not identify a supported feed format."""

    pass


class DecodeError(FeedError):
    """Raised by a feed decoder, or when no decoder exists for a format."""

    pass
