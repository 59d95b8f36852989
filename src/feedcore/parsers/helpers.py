"""Element helpers shared by the feed decoders."""

import re
from datetime import datetime, timezone
from urllib.parse import urljoin

from feedparser.datetimes import _parse_date
from lxml import etree

DC_NS = "http://purl.org/dc/elements/1.1/"
CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"
RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RSS_1_0_NS = "http://purl.org/rss/1.0/"


def qualify(namespace: str | None, name: str) -> str:
    """Return the Clark-notation tag for name in namespace."""
    return f"{{{namespace}}}{name}" if namespace else name


def find_child(parent: etree._Element, namespace: str | None, name: str) -> etree._Element | None:
    return parent.find(qualify(namespace, name))


def child_text(parent: etree._Element, namespace: str | None, name: str) -> str:
    """Text content of the first matching child, whitespace-normalized."""
    child = find_child(parent, namespace, name)
    if child is None:
        return ""
    return element_text(child)


def element_text(element: etree._Element) -> str:
    return clean_text("".join(element.itertext()))


def clean_text(text: str) -> str:
    """Clean text by normalizing whitespace."""
    return re.sub(r"\s+", " ", text).strip()


def resolve_link(element: etree._Element, href: str) -> str:
    """Resolve href against xml:base or the document URL."""
    href = href.strip()
    if not href:
        return ""
    base = element.base
    if base and "://" in base:
        return urljoin(base, href)
    return href


def parse_date(value: str) -> datetime | None:
    """Parse an RSS/Atom date string into an aware UTC datetime."""
    if not value:
        return None
    parsed = _parse_date(value)
    if not parsed:
        return None
    try:
        return datetime(*parsed[:6], tzinfo=timezone.utc)
    except (TypeError, ValueError):
        return None


def raw_child_text(parent: etree._Element, namespace: str | None, name: str) -> str:
    """Text of a child that may carry escaped markup, inner whitespace kept."""
    child = find_child(parent, namespace, name)
    if child is None:
        return ""
    return "".join(child.itertext()).strip()
