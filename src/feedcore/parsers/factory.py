"""Decoder factory mapping feed formats to decoders."""

from collections.abc import Callable

from lxml import etree

from feedcore.exceptions import DecodeError
from feedcore.models.feed import FeedFormat
from feedcore.parsers.atom import Atom03Decoder, Atom10Decoder
from feedcore.parsers.base import FeedDecoder
from feedcore.parsers.rdf import RdfDecoder
from feedcore.parsers.rss import RssDecoder

DecoderFactory = Callable[[FeedFormat, etree._ElementTree], FeedDecoder]

_DECODERS: dict[FeedFormat, Callable[[etree._ElementTree], FeedDecoder]] = {
    FeedFormat.RSS_0_91: RssDecoder,
    FeedFormat.RSS_0_92: RssDecoder,
    FeedFormat.RSS_0_94: RssDecoder,
    FeedFormat.RSS_2_0: RssDecoder,
    FeedFormat.RSS_1_0: RdfDecoder,
    FeedFormat.ATOM_0_3: Atom03Decoder,
    FeedFormat.ATOM_0_3_NONS: Atom03Decoder,
    FeedFormat.ATOM_1_0: Atom10Decoder,
}


def get_decoder(feed_format: FeedFormat, document: etree._ElementTree) -> FeedDecoder:
    """Create the decoder for a detected format.

    Args:
        feed_format: Format returned by the detector.
        document: Tree the decoded root element belongs to.

    Returns:
        A decoder bound to document.

    Raises:
        DecodeError: If no decoder is registered for the format.
    """
    try:
        decoder_class = _DECODERS[feed_format]
    except KeyError:
        raise DecodeError(f"unsupported feed format: {feed_format.value}") from None
    return decoder_class(document)
