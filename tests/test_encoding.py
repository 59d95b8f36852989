"""Tests for body encoding normalization."""

import pytest

from feedcore.exceptions import EncodingError
from feedcore.utils.encoding import is_canonical, normalize_encoding


def test_utf8_body_is_returned_unchanged():
    body = "Grüße".encode()
    assert normalize_encoding(body, "UTF-8") is body
    assert normalize_encoding(body, "utf8") is body


def test_latin1_body_is_converted():
    body = "Café crème".encode("iso-8859-1")
    assert normalize_encoding(body, "ISO-8859-1") == "Café crème".encode("utf-8")


def test_empty_charset_defaults_to_utf8():
    assert normalize_encoding(b"plain", "") == b"plain"


def test_unknown_charset_fails():
    with pytest.raises(EncodingError, match="unsupported charset x-no-such-charset") as excinfo:
        normalize_encoding(b"data", "x-no-such-charset")
    assert excinfo.value.charset == "x-no-such-charset"


def test_invalid_bytes_fail_instead_of_being_replaced():
    with pytest.raises(EncodingError, match="invalid ascii byte sequence"):
        normalize_encoding(b"caf\xe9", "ascii")


def test_is_canonical():
    assert is_canonical("utf-8")
    assert is_canonical("UTF8")
    assert not is_canonical("windows-1252")


@pytest.mark.parametrize("charset", ["utf-8", "UTF8", ""])
def test_invalid_utf8_fails_instead_of_being_replaced(charset):
    with pytest.raises(EncodingError, match="byte sequence") as excinfo:
        normalize_encoding(b"<title>caf\xe9 ok</title>", charset)
    assert excinfo.value.charset == charset
