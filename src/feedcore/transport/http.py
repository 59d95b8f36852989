"""Conditional HTTP retrieval of feed documents."""

import asyncio
from dataclasses import dataclass, field
from email.utils import formatdate
from http.cookiejar import LoadError, MozillaCookieJar
from pathlib import Path

import httpx
import structlog

from feedcore.exceptions import TransportError
from feedcore.models.cache import CacheTokens
from feedcore.models.options import FetchOptions
from feedcore.transport.base import HeaderProvider
from feedcore.transport.headers import ResponseHeaders
from feedcore.utils.http_client import create_http_client

logger = structlog.get_logger()


@dataclass
class FetchResponse:
    """Body and metadata of the final response of an exchange."""

    body: bytes
    status_code: int
    url: str
    headers: ResponseHeaders = field(default_factory=ResponseHeaders)

    @property
    def cache_tokens(self) -> CacheTokens:
        return self.headers.cache_tokens

    @property
    def not_modified(self) -> bool:
        return self.status_code == httpx.codes.NOT_MODIFIED or not self.body


class HttpTransport:
    """HTTP client performing one conditional GET per call.

    A new connection handle is opened for every fetch, so one transport
    can be shared by concurrent fetches.
    """

    def __init__(
        self,
        options: FetchOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize HTTP transport.

        Args:
            options: Connection options. Defaults to FetchOptions().
            transport: Custom httpx transport, mainly for tests.
        """
        self._options = options or FetchOptions()
        self._transport = transport

    @property
    def options(self) -> FetchOptions:
        return self._options

    async def fetch(
        self,
        url: str,
        cache_tokens: CacheTokens | None = None,
        header_provider: HeaderProvider | None = None,
        cookie_cache: str | Path | None = None,
    ) -> FetchResponse:
        """Fetch url, conditionally on cache tokens from a previous fetch.

        Args:
            url: Feed URL.
            cache_tokens: Tokens from the previous fetch of the same URL.
            header_provider: Optional source of extra request headers.
            cookie_cache: Optional cookie jar file, read before and written after.

        Returns:
            The final response. An empty body means there is nothing new.

        Raises:
            TransportError: On transport failure or HTTP error status.
        """
        tokens = cache_tokens or CacheTokens()
        log = logger.bind(url=url)

        request_headers = self._build_headers(tokens, header_provider)
        captured = ResponseHeaders()

        async def capture_headers(response: httpx.Response) -> None:
            captured.observe(response)

        jar = await asyncio.to_thread(_load_cookie_jar, cookie_cache) if cookie_cache else None

        try:
            async with create_http_client(
                self._options,
                cookies=jar,
                event_hooks={"response": [capture_headers]},
                transport=self._transport,
            ) as client:
                response = await client.get(url, headers=request_headers)
        except httpx.TooManyRedirects as e:
            log.error("Redirect limit reached", max_redirects=self._options.max_redirects)
            raise TransportError(f"Number of redirects hit maximum amount: {e}", url=url) from e
        except httpx.TimeoutException as e:
            log.error("Request timed out", error=str(e))
            raise TransportError(f"Timeout was reached: {e}", url=url) from e
        except httpx.HTTPError as e:
            log.error("Request failed", error=str(e))
            raise TransportError(str(e) or type(e).__name__, url=url) from e
        finally:
            if jar is not None:
                await asyncio.to_thread(_save_cookie_jar, jar)

        status = response.status_code
        log.debug("Response received", status=status, final_url=str(response.url))

        if response.is_error:
            log.error("HTTP error status", status=status)
            raise TransportError(
                f"HTTP response code said error {status}",
                url=url,
                status_code=status,
                cache_tokens=captured.cache_tokens,
            )

        body = response.content
        if self._time_condition_unmet(tokens, captured, status):
            log.info("Not modified since last fetch", last_modified=captured.last_modified)
            body = b""

        log.info("Retrieved feed data", status=status, size=len(body), charset=captured.charset)
        return FetchResponse(
            body=body,
            status_code=status,
            url=str(response.url),
            headers=captured,
        )

    def _build_headers(
        self, tokens: CacheTokens, header_provider: HeaderProvider | None
    ) -> dict[str, str]:
        headers: dict[str, str] = {}
        if header_provider is not None:
            header_provider.add_custom_headers(headers)

        if tokens.last_modified:
            headers["If-Modified-Since"] = formatdate(tokens.last_modified, usegmt=True)
        if tokens.etag:
            headers["If-None-Match"] = tokens.etag
        if tokens.has_tokens:
            # Advertise RFC 3229 feed deltas
            headers["A-IM"] = "feed"
        return headers

    @staticmethod
    def _time_condition_unmet(tokens: CacheTokens, captured: ResponseHeaders, status: int) -> bool:
        """Whether a full response is not newer than the If-Modified-Since time."""
        if not tokens.last_modified or not captured.last_modified:
            return False
        if status == httpx.codes.NOT_MODIFIED:
            return False
        return captured.last_modified <= tokens.last_modified


def _load_cookie_jar(path: str | Path) -> MozillaCookieJar:
    jar = MozillaCookieJar(str(path))
    try:
        jar.load(ignore_discard=True, ignore_expires=True)
    except FileNotFoundError:
        logger.debug("Cookie jar does not exist yet", path=str(path))
    except (LoadError, OSError) as e:
        logger.warning("Could not read cookie jar", path=str(path), error=str(e))
    return jar


def _save_cookie_jar(jar: MozillaCookieJar) -> None:
    try:
        jar.save(ignore_discard=True, ignore_expires=True)
    except OSError as e:
        logger.warning("Could not write cookie jar", path=jar.filename, error=str(e))
