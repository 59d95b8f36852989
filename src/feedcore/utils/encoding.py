"""Conversion of response bodies to the canonical UTF-8 encoding."""

import codecs

import structlog

from feedcore.exceptions import EncodingError

logger = structlog.get_logger()

CANONICAL_ENCODING = "utf-8"


def is_canonical(charset: str) -> bool:
    """Whether bytes in this charset are already canonical.

    Raises:
        EncodingError: When the charset is unknown.
    """
    return _lookup(charset).name == CANONICAL_ENCODING


def normalize_encoding(body: bytes, charset: str = CANONICAL_ENCODING) -> bytes:
    """Convert body from charset to UTF-8.

    Args:
        body: Raw response body.
        charset: Declared charset of the body.

    Returns:
        UTF-8 encoded bytes (body itself if already UTF-8).

    Raises:
        EncodingError: When the charset is unknown or body is invalid for it.
    """
    codec = _lookup(charset)
    try:
        text = body.decode(codec.name)
    except UnicodeDecodeError as e:
        raise EncodingError(charset, f"invalid {charset} byte sequence: {e.reason}") from e

    if codec.name == CANONICAL_ENCODING:
        return body

    logger.debug("Converted body to utf-8", charset=charset, size=len(body))
    return text.encode(CANONICAL_ENCODING)


def _lookup(charset: str) -> codecs.CodecInfo:
    try:
        return codecs.lookup(charset or CANONICAL_ENCODING)
    except LookupError as e:
        raise EncodingError(charset, f"unsupported charset {charset}") from e
