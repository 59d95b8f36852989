"""Feed format detection from the document's root node."""

from lxml import etree

from feedcore.exceptions import FormatDetectionError, MalformedDocumentError
from feedcore.models.feed import FeedFormat

ATOM_0_3_URI = "http://purl.org/atom/ns#"
ATOM_1_0_URI = "http://www.w3.org/2005/Atom"

_RSS_VERSIONS = {
    "0.91": FeedFormat.RSS_0_91,
    "0.92": FeedFormat.RSS_0_92,
    "0.94": FeedFormat.RSS_0_94,
    "2.0": FeedFormat.RSS_2_0,
    "2": FeedFormat.RSS_2_0,
    # Legacy mapping: <rss version="1.0"> is treated as 0.91, not as RDF
    "1.0": FeedFormat.RSS_0_91,
}

_ATOM_NAMESPACES = {
    ATOM_0_3_URI: FeedFormat.ATOM_0_3,
    ATOM_1_0_URI: FeedFormat.ATOM_1_0,
}


def classify(root: etree._Element | None) -> FeedFormat:
    """Classify a document by its root element.

    Only the root's local name, namespace URI and version attribute are read.

    Args:
        root: Root element, or None when the document has none.

    Returns:
        The detected format.

    Raises:
        MalformedDocumentError: When root is None.
        FormatDetectionError: When the root does not identify a supported format.
    """
    if root is None:
        raise MalformedDocumentError("XML root node is NULL")

    qname = etree.QName(root)
    name = qname.localname

    if name == "rss":
        version = root.get("version")
        if version is None:
            raise FormatDetectionError("no RSS version")
        try:
            return _RSS_VERSIONS[version]
        except KeyError:
            raise FormatDetectionError("invalid RSS version") from None

    if name == "RDF":
        return FeedFormat.RSS_1_0

    if name == "feed":
        namespace = qname.namespace
        if not namespace:
            raise FormatDetectionError("no Atom version")
        if namespace in _ATOM_NAMESPACES:
            return _ATOM_NAMESPACES[namespace]
        if root.get("version") == "0.3":
            return FeedFormat.ATOM_0_3_NONS
        raise FormatDetectionError("invalid Atom version")

    raise FormatDetectionError(f"unsupported feed format: {name}")
