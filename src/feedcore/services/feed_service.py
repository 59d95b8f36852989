"""Feed pipeline service - main orchestration layer.

Coordinates HTTP retrieval, encoding normalization, format detection and
decoding into a Feed.
"""

import codecs
import re
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog
from lxml import etree
from pydantic import BaseModel, Field

from feedcore.exceptions import MalformedDocumentError
from feedcore.models.cache import CacheTokens
from feedcore.models.feed import Feed
from feedcore.parsers.detector import classify
from feedcore.parsers.factory import DecoderFactory, get_decoder
from feedcore.transport.base import HeaderProvider
from feedcore.transport.http import HttpTransport
from feedcore.utils.encoding import CANONICAL_ENCODING, is_canonical, normalize_encoding

logger = structlog.get_logger()

_XML_DECLARATION_ENCODING = re.compile(
    rb"""^\s*<\?xml[^>]*?\sencoding\s*=\s*["']([A-Za-z][A-Za-z0-9._:-]*)["']"""
)


class FetchResult(BaseModel):
    """Outcome of one fetch: the feed and the tokens for the next fetch."""

    feed: Feed
    cache_tokens: CacheTokens = Field(default_factory=CacheTokens)
    status_code: int = 200
    url: str = ""


class FeedService:
    """Feed retrieval and parsing service.

    Reason: Acts as Facade pattern over transport, encoding normalization,
    format detection and decoding. Holds no per-call state, so one instance
    can serve concurrent fetches.
    """

    def __init__(
        self,
        transport: HttpTransport | None = None,
        decoder_factory: DecoderFactory = get_decoder,
    ):
        """Initialize feed service.

        Args:
            transport: HTTP transport. Defaults to HttpTransport().
            decoder_factory: Maps a detected format and document to a decoder.
        """
        self._transport = transport or HttpTransport()
        self._decoder_factory = decoder_factory

    async def fetch(
        self,
        url: str,
        cache_tokens: CacheTokens | None = None,
        header_provider: HeaderProvider | None = None,
        cookie_cache: str | Path | None = None,
    ) -> FetchResult:
        """Fetch and parse a feed.

        Args:
            url: Feed URL.
            cache_tokens: Tokens returned by the previous fetch of url.
            header_provider: Optional source of extra request headers.
            cookie_cache: Optional cookie jar file.

        Returns:
            FetchResult with the parsed feed (empty when nothing changed)
            and the cache tokens to use next time.

        Raises:
            TransportError: When the HTTP exchange fails.
            EncodingError: When the body cannot be converted to UTF-8.
            MalformedDocumentError: When no XML tree could be built.
            FormatDetectionError: When the format is not supported.
            DecodeError: When the decoder fails.
        """
        previous = cache_tokens or CacheTokens()
        log = logger.bind(url=url)

        response = await self._transport.fetch(url, previous, header_provider, cookie_cache)

        if not response.body:
            log.info("Empty response, nothing to parse", status=response.status_code)
            return FetchResult(
                feed=Feed(),
                # Servers may omit validators on 304; keep the ones we sent
                cache_tokens=response.cache_tokens.merged_with(previous),
                status_code=response.status_code,
                url=response.url,
            )

        charset = response.headers.charset
        converted = not is_canonical(charset)
        log.debug("Normalizing encoding", charset=charset, converted=converted)
        buffer = normalize_encoding(response.body, charset)

        feed = self._parse(
            buffer,
            url,
            "could not parse buffer",
            encoding=CANONICAL_ENCODING if converted else None,
        )
        return FetchResult(
            feed=feed,
            cache_tokens=response.cache_tokens,
            status_code=response.status_code,
            url=response.url,
        )

    def parse_buffer(self, buffer: bytes, base_url: str = "") -> Feed:
        """Parse a feed document held in memory.

        Args:
            buffer: Raw XML bytes.
            base_url: Logical document URL, used for diagnostics and
                relative link resolution.

        Raises:
            MalformedDocumentError: When no XML tree could be built.
            FormatDetectionError: When the format is not supported.
            DecodeError: When the decoder fails.
        """
        return self._parse(buffer, base_url, "could not parse buffer")

    def parse_file(self, path: str | Path) -> Feed:
        """Parse a feed document from a file.

        Raises:
            MalformedDocumentError: When the file is unreadable or not XML.
            FormatDetectionError: When the format is not supported.
            DecodeError: When the decoder fails.
        """
        try:
            buffer = Path(path).read_bytes()
        except OSError as e:
            logger.error("Could not read feed file", path=str(path), error=str(e))
            raise MalformedDocumentError("could not parse file") from e
        return self._parse(buffer, str(path), "could not parse file")

    def _parse(
        self,
        buffer: bytes,
        base_url: str,
        error_message: str,
        encoding: str | None = None,
    ) -> Feed:
        with self._open_document(buffer, base_url, error_message, encoding) as document:
            feed = self._decode(document)
            declared = _declared_encoding(buffer)
            if not declared and encoding is None:
                # UTF-16 and UTF-32 prologs are only visible to the parser
                declared = document.docinfo.encoding or ""

        if declared:
            feed.encoding = declared

        logger.info(
            "Feed parsed",
            url=base_url,
            format=feed.format.value,
            encoding=feed.encoding,
            items=len(feed.items),
        )
        return feed

    def _decode(self, document: etree._ElementTree) -> Feed:
        root = document.getroot()
        feed = Feed()
        feed.format = classify(root)
        decoder = self._decoder_factory(feed.format, document)
        decoder.decode(feed, root)
        return feed

    @contextmanager
    def _open_document(
        self,
        buffer: bytes,
        base_url: str,
        error_message: str,
        encoding: str | None = None,
    ) -> Iterator[etree._ElementTree]:
        """Build the document tree and release it on every exit path."""
        buffer = buffer.lstrip()
        if not buffer:
            logger.warning("Empty document", url=base_url)
            raise MalformedDocumentError(error_message)

        parser = etree.XMLParser(
            recover=True,
            resolve_entities=False,
            no_network=True,
            encoding=encoding,
        )
        try:
            root = etree.fromstring(buffer, parser=parser, base_url=base_url or None)
        except etree.XMLSyntaxError as e:
            logger.warning("XML parsing failed", url=base_url, error=str(e))
            raise MalformedDocumentError(error_message) from e

        if parser.error_log:
            logger.debug(
                "Recovered from malformed XML",
                url=base_url,
                errors=len(parser.error_log),
                first_error=str(parser.error_log[0]),
            )

        if root is None:
            logger.warning("XML document has no root element", url=base_url)
            raise MalformedDocumentError(error_message)

        document = root.getroottree()
        try:
            yield document
        finally:
            root.clear()
            logger.debug("Document released", url=base_url)


def _declared_encoding(buffer: bytes) -> str:
    """Encoding named in an ASCII-compatible XML declaration, or an empty string."""
    match = _XML_DECLARATION_ENCODING.match(buffer.removeprefix(codecs.BOM_UTF8))
    return match.group(1).decode("ascii") if match else ""
