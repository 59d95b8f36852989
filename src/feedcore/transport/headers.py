"""Capture of caching-relevant response headers.

One HTTP exchange can contain several responses when redirects are
followed. Header state is reset on every status line, so only the final
response's values survive.
"""

from dataclasses import dataclass
from datetime import timezone
from email.utils import parsedate_to_datetime

import httpx
import structlog

from feedcore.models.cache import CacheTokens

logger = structlog.get_logger()

DEFAULT_CHARSET = "utf-8"


@dataclass
class ResponseHeaders:
    """Accumulated Last-Modified, ETag and charset of an exchange."""

    last_modified: int = 0
    etag: str = ""
    charset: str = DEFAULT_CHARSET

    def reset(self) -> None:
        self.last_modified = 0
        self.etag = ""
        self.charset = DEFAULT_CHARSET

    def feed_line(self, line: str) -> None:
        """Process one raw header line, status lines included."""
        line = line.rstrip("\r\n")
        if line.startswith("HTTP/"):
            self.reset()
            return

        name, sep, value = line.partition(":")
        if not sep:
            return
        name = name.strip().lower()
        value = value.strip()

        if name == "last-modified":
            timestamp = parse_http_date(value)
            if timestamp is None:
                logger.debug("Ignoring unparsable Last-Modified", value=value)
            else:
                self.last_modified = timestamp
                logger.debug("Got Last-Modified", value=value, timestamp=timestamp)
        elif name == "etag":
            self.etag = value
            logger.debug("Got ETag", etag=value)
        elif name == "content-type":
            charset = _extract_charset(value)
            if charset:
                self.charset = charset

    def observe(self, response: httpx.Response) -> None:
        """Replay a response's status line and headers."""
        self.feed_line(f"{response.http_version} {response.status_code} {response.reason_phrase}")
        for name, value in response.headers.multi_items():
            self.feed_line(f"{name}: {value}")

    @property
    def cache_tokens(self) -> CacheTokens:
        return CacheTokens(last_modified=self.last_modified, etag=self.etag)


def parse_http_date(value: str) -> int | None:
    """Parse an HTTP date into epoch seconds, or None if invalid."""
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    timestamp = int(parsed.timestamp())
    return timestamp if timestamp > 0 else None


def _extract_charset(content_type: str) -> str:
    """Return the charset parameter of a Content-Type value, unquoted."""
    lowered = content_type.lower()
    index = lowered.find("charset=")
    if index == -1:
        return ""
    charset = content_type[index + len("charset=") :].split(";", 1)[0].strip()
    if len(charset) >= 2 and charset[0] == '"' and charset[-1] == '"':
        charset = charset[1:-1]
    return charset.strip()
