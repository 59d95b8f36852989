"""Parsers package."""

from feedcore.parsers.atom import Atom03Decoder, Atom10Decoder
from feedcore.parsers.base import FeedDecoder
from feedcore.parsers.detector import ATOM_0_3_URI, ATOM_1_0_URI, classify
from feedcore.parsers.factory import DecoderFactory, get_decoder
from feedcore.parsers.rdf import RdfDecoder
from feedcore.parsers.rss import RssDecoder

__all__ = [
    "ATOM_0_3_URI",
    "ATOM_1_0_URI",
    "Atom03Decoder",
    "Atom10Decoder",
    "DecoderFactory",
    "FeedDecoder",
    "RdfDecoder",
    "RssDecoder",
    "classify",
    "get_decoder",
]
