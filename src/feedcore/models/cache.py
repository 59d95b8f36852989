"""HTTP caching state carried between fetches of the same resource."""

from pydantic import BaseModel, Field


class CacheTokens(BaseModel):
    """Conditional-GET tokens from a previous fetch.

    Passed into a fetch and returned, updated, with its result.
    """

    model_config = {"frozen": True}

    last_modified: int = Field(default=0, ge=0, description="Epoch seconds, 0 means unknown")
    etag: str = Field(default="", description="Opaque server-assigned entity tag")

    @property
    def has_tokens(self) -> bool:
        """Whether a conditional request can be made with these tokens."""
        return self.last_modified != 0 or bool(self.etag)

    def merged_with(self, previous: "CacheTokens") -> "CacheTokens":
        """Fill values missing here from previous tokens."""
        return CacheTokens(
            last_modified=self.last_modified or previous.last_modified,
            etag=self.etag or previous.etag,
        )
