"""Utils package."""

from feedcore.utils.encoding import CANONICAL_ENCODING, is_canonical, normalize_encoding
from feedcore.utils.http_client import create_http_client
from feedcore.utils.logger import configure_logging, get_logger

__all__ = [
    "CANONICAL_ENCODING",
    "configure_logging",
    "create_http_client",
    "get_logger",
    "is_canonical",
    "normalize_encoding",
]
