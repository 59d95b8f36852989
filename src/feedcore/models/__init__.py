"""Models package."""

from feedcore.models.cache import CacheTokens
from feedcore.models.feed import Feed, FeedFormat, Item
from feedcore.models.options import FetchOptions, ProxyType

__all__ = [
    "CacheTokens",
    "Feed",
    "FeedFormat",
    "FetchOptions",
    "Item",
    "ProxyType",
]
