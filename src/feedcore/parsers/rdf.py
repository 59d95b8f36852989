"""Decoder for RSS 1.0 (RDF) documents."""

import structlog
from lxml import etree

from feedcore.exceptions import DecodeError
from feedcore.models.feed import Feed, Item
from feedcore.parsers.helpers import (
    CONTENT_NS,
    DC_NS,
    RDF_NS,
    RSS_1_0_NS,
    child_text,
    clean_text,
    parse_date,
    qualify,
    raw_child_text,
    resolve_link,
)

logger = structlog.get_logger()

_ABOUT = qualify(RDF_NS, "about")
_RESOURCE = qualify(RDF_NS, "resource")


class RdfDecoder:
    """Decoder for RSS 1.0.

    Items are siblings of the channel. When the channel carries an
    rdf:Seq table of contents, items are returned in that order.
    """

    def __init__(self, document: etree._ElementTree):
        self._document = document

    def decode(self, feed: Feed, root: etree._Element) -> None:
        namespace = self._rss_namespace(root)
        channel = root.find(qualify(namespace, "channel"))
        if channel is None:
            raise DecodeError("no RSS 1.0 channel found")

        feed.title = child_text(channel, namespace, "title")
        feed.link = resolve_link(channel, child_text(channel, namespace, "link"))
        feed.description = child_text(channel, namespace, "description")
        feed.language = child_text(channel, DC_NS, "language")
        feed.published = parse_date(child_text(channel, DC_NS, "date"))

        elements = self._ordered_items(root, channel, namespace)
        feed.items.extend(self._parse_item(element, namespace) for element in elements)
        logger.debug("Decoded RDF channel", url=self._document.docinfo.URL, items=len(feed.items))

    def _rss_namespace(self, root: etree._Element) -> str | None:
        """RSS 1.0 elements normally live in the RSS 1.0 namespace; tolerate none."""
        if root.find(qualify(RSS_1_0_NS, "channel")) is not None:
            return RSS_1_0_NS
        return None

    def _ordered_items(
        self, root: etree._Element, channel: etree._Element, namespace: str | None
    ) -> list[etree._Element]:
        items = root.findall(qualify(namespace, "item"))
        toc = [
            li.get(_RESOURCE)
            for li in channel.iterfind(f"{qualify(namespace, 'items')}/{{{RDF_NS}}}Seq/{{{RDF_NS}}}li")
            if li.get(_RESOURCE)
        ]
        if not toc:
            return items

        by_about = {item.get(_ABOUT): item for item in items if item.get(_ABOUT)}
        ordered = [by_about.pop(resource) for resource in toc if resource in by_about]
        listed = set(ordered)
        # Items missing from the table of contents keep document order
        ordered.extend(item for item in items if item not in listed)
        return ordered

    def _parse_item(self, element: etree._Element, namespace: str | None) -> Item:
        link = child_text(element, namespace, "link")
        return Item(
            title=child_text(element, namespace, "title"),
            link=resolve_link(element, link),
            description=raw_child_text(element, namespace, "description"),
            content=raw_child_text(element, CONTENT_NS, "encoded"),
            author=child_text(element, DC_NS, "creator"),
            guid=element.get(_ABOUT, "") or link,
            guid_is_permalink=False,
            published=parse_date(child_text(element, DC_NS, "date")),
            categories=[
                clean_text(subject.text or "")
                for subject in element.findall(qualify(DC_NS, "subject"))
                if (subject.text or "").strip()
            ],
        )
