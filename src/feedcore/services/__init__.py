"""Services package."""

from feedcore.services.feed_service import FeedService, FetchResult

__all__ = [
    "FeedService",
    "FetchResult",
]
