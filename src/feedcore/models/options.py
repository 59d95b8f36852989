"""Connection options for the HTTP transport."""

from enum import Enum

from pydantic import BaseModel, Field

MAX_REDIRECTS = 10


class ProxyType(str, Enum):
    """Proxy protocols understood by the HTTP client."""

    HTTP = "http"
    HTTPS = "https"
    SOCKS5 = "socks5"
    SOCKS5H = "socks5h"


class FetchOptions(BaseModel):
    """Connection options applied to every fetch."""

    timeout: int = Field(default=0, ge=0, description="Seconds, 0 means unbounded")
    user_agent: str = ""
    proxy: str = Field(default="", description="Proxy address, with or without scheme")
    proxy_auth: str = Field(default="", description="Proxy credentials as user:password")
    proxy_type: ProxyType = ProxyType.HTTP
    ssl_verify: bool = True
    max_redirects: int = Field(default=MAX_REDIRECTS, ge=0)
