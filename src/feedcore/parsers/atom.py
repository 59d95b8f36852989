"""Decoders for Atom 0.3 and Atom 1.0 documents."""

import base64
import binascii
from datetime import datetime

import structlog
from lxml import etree

from feedcore.models.feed import Feed, Item
from feedcore.parsers.helpers import (
    child_text,
    clean_text,
    find_child,
    parse_date,
    qualify,
    resolve_link,
)

logger = structlog.get_logger()

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"


class AtomDecoder:
    """Shared Atom decoding.

    Elements are looked up in the root's own namespace, so documents using
    an unexpected namespace URI decode the same way as namespaced ones.
    Subclasses name the version-specific elements.
    """

    subtitle_element = "subtitle"
    updated_element = "updated"
    published_elements: tuple[str, ...] = ("published",)

    def __init__(self, document: etree._ElementTree):
        self._document = document
        self._ns: str | None = None

    def decode(self, feed: Feed, root: etree._Element) -> None:
        self._ns = etree.QName(root).namespace

        feed.title = child_text(root, self._ns, "title")
        feed.link = self._alternate_link(root)
        feed.description = child_text(root, self._ns, self.subtitle_element)
        feed.language = root.get(XML_LANG, "")
        feed.published = parse_date(child_text(root, self._ns, self.updated_element))

        entries = root.findall(qualify(self._ns, "entry"))
        feed.items.extend(self._parse_entry(entry) for entry in entries)
        logger.debug("Decoded Atom feed", url=self._document.docinfo.URL, items=len(feed.items))

    def _parse_entry(self, entry: etree._Element) -> Item:
        item = Item(
            title=child_text(entry, self._ns, "title"),
            link=self._alternate_link(entry),
            description=self._text_construct(find_child(entry, self._ns, "summary")),
            content=self._text_construct(find_child(entry, self._ns, "content")),
            author=self._author(entry),
            guid=child_text(entry, self._ns, "id"),
            published=self._entry_date(entry),
            categories=self._categories(entry),
        )

        enclosure = self._link(entry, "enclosure")
        if enclosure is not None:
            item.enclosure_url = resolve_link(enclosure, enclosure.get("href", ""))
            item.enclosure_type = enclosure.get("type", "")

        return item

    def _entry_date(self, entry: etree._Element) -> datetime | None:
        for name in (*self.published_elements, self.updated_element):
            parsed = parse_date(child_text(entry, self._ns, name))
            if parsed is not None:
                return parsed
        return None

    def _categories(self, entry: etree._Element) -> list[str]:
        terms = []
        for category in entry.findall(qualify(self._ns, "category")):
            term = category.get("term") or clean_text(category.text or "")
            if term:
                terms.append(term)
        return terms

    def _author(self, parent: etree._Element) -> str:
        author = find_child(parent, self._ns, "author")
        if author is None:
            return ""
        return child_text(author, self._ns, "name") or clean_text("".join(author.itertext()))

    def _link(self, parent: etree._Element, rel: str) -> etree._Element | None:
        for link in parent.findall(qualify(self._ns, "link")):
            if link.get("rel", "alternate") == rel:
                return link
        return None

    def _alternate_link(self, parent: etree._Element) -> str:
        link = self._link(parent, "alternate")
        if link is None:
            return ""
        return resolve_link(link, link.get("href", ""))

    def _is_markup(self, element: etree._Element) -> bool:
        """Whether a text construct carries inline XML markup."""
        return element.get("type") == "xhtml"

    def _text_construct(self, element: etree._Element | None) -> str:
        """Value of a text construct; inline markup is serialized."""
        if element is None:
            return ""
        if self._is_markup(element):
            parts = [element.text or ""]
            parts.extend(etree.tostring(child, encoding="unicode") for child in element)
            return "".join(parts).strip()
        return "".join(element.itertext()).strip()


class Atom10Decoder(AtomDecoder):
    """Decoder for Atom 1.0 (RFC 4287)."""


class Atom03Decoder(AtomDecoder):
    """Decoder for Atom 0.3, namespaced or not."""

    subtitle_element = "tagline"
    updated_element = "modified"
    published_elements = ("issued", "created")

    def _is_markup(self, element: etree._Element) -> bool:
        return element.get("mode") == "xml"

    def _text_construct(self, element: etree._Element | None) -> str:
        if element is not None and element.get("mode") == "base64":
            try:
                return base64.b64decode("".join(element.itertext())).decode("utf-8").strip()
            except (binascii.Error, UnicodeDecodeError):
                logger.debug("Ignoring undecodable base64 content")
                return ""
        return super()._text_construct(element)
