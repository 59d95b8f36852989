"""Canonical feed data models shared by all decoders."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class FeedFormat(str, Enum):
    """Supported syndication wire formats."""

    UNKNOWN = "unknown"
    RSS_0_91 = "rss-0.91"
    RSS_0_92 = "rss-0.92"
    RSS_0_94 = "rss-0.94"
    RSS_1_0 = "rss-1.0"
    RSS_2_0 = "rss-2.0"
    ATOM_0_3 = "atom-0.3"
    ATOM_0_3_NONS = "atom-0.3-nons"
    ATOM_1_0 = "atom-1.0"


class Item(BaseModel):
    """A single feed item (RSS item or Atom entry)."""

    title: str = ""
    link: str = ""
    description: str = ""
    content: str = Field(default="", description="Full content, e.g. content:encoded")
    author: str = ""
    guid: str = ""
    guid_is_permalink: bool = False
    published: datetime | None = Field(default=None, description="Publication time (UTC)")
    categories: list[str] = Field(default_factory=list)
    enclosure_url: str = ""
    enclosure_type: str = ""


class Feed(BaseModel):
    """Format-agnostic parse result.

    Constructed empty by the pipeline for every parse call and filled in
    place by exactly one decoder.
    """

    format: FeedFormat = Field(default=FeedFormat.UNKNOWN, description="Detected wire format")
    encoding: str = Field(default="utf-8", description="Document encoding label")
    title: str = ""
    link: str = ""
    description: str = ""
    language: str = ""
    published: datetime | None = None
    items: list[Item] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True for the feed returned when there was nothing to parse."""
        return self.format is FeedFormat.UNKNOWN and not self.items
