"""Decoder for RSS 0.91, 0.92, 0.94 and 2.0 documents."""

import structlog
from lxml import etree

from feedcore.exceptions import DecodeError
from feedcore.models.feed import Feed, Item
from feedcore.parsers.helpers import (
    CONTENT_NS,
    DC_NS,
    child_text,
    clean_text,
    find_child,
    parse_date,
    raw_child_text,
    resolve_link,
)

logger = structlog.get_logger()


class RssDecoder:
    """Decoder for the <rss> family of formats.

    The 0.9x and 2.0 versions share one element vocabulary; elements a
    version does not define are simply absent.
    """

    def __init__(self, document: etree._ElementTree):
        self._document = document

    def decode(self, feed: Feed, root: etree._Element) -> None:
        channel = root.find("channel")
        if channel is None:
            raise DecodeError("no RSS channel found")

        feed.title = child_text(channel, None, "title")
        feed.link = resolve_link(channel, child_text(channel, None, "link"))
        feed.description = child_text(channel, None, "description")
        feed.language = child_text(channel, None, "language") or child_text(
            channel, DC_NS, "language"
        )
        feed.published = (
            parse_date(child_text(channel, None, "pubDate"))
            or parse_date(child_text(channel, None, "lastBuildDate"))
            or parse_date(child_text(channel, DC_NS, "date"))
        )

        # Some 0.9x feeds put their items next to the channel
        elements = channel.findall("item") or root.findall("item")
        feed.items.extend(self._parse_item(element) for element in elements)
        logger.debug("Decoded RSS channel", url=self._document.docinfo.URL, items=len(feed.items))

    def _parse_item(self, element: etree._Element) -> Item:
        item = Item(
            title=child_text(element, None, "title"),
            link=resolve_link(element, child_text(element, None, "link")),
            description=raw_child_text(element, None, "description"),
            content=raw_child_text(element, CONTENT_NS, "encoded"),
            author=child_text(element, None, "author") or child_text(element, DC_NS, "creator"),
            published=parse_date(child_text(element, None, "pubDate"))
            or parse_date(child_text(element, DC_NS, "date")),
            categories=[
                clean_text(category.text or "")
                for category in element.findall("category")
                if (category.text or "").strip()
            ],
        )

        guid = find_child(element, None, "guid")
        if guid is not None:
            item.guid = clean_text(guid.text or "")
            item.guid_is_permalink = guid.get("isPermaLink", "true").lower() != "false"
            # A permalink guid stands in for a missing link
            if item.guid_is_permalink and not item.link:
                item.link = resolve_link(element, item.guid)

        enclosure = find_child(element, None, "enclosure")
        if enclosure is not None:
            item.enclosure_url = resolve_link(element, enclosure.get("url", ""))
            item.enclosure_type = enclosure.get("type", "")

        return item
