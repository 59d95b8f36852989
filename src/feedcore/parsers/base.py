"""Abstract feed decoder interface using Protocol."""

from typing import Protocol

from lxml import etree

from feedcore.models.feed import Feed


class FeedDecoder(Protocol):
    """Per-format decoder abstraction protocol.

    A decoder is created for one document and fills a Feed from its root node.
    """

    def decode(self, feed: Feed, root: etree._Element) -> None:
        """Populate feed in place from the document's root element.

        Args:
            feed: Empty feed with its format already set.
            root: Root element of the document the decoder was created for.

        Raises:
            DecodeError: When the document cannot be decoded.
        """
        ...
