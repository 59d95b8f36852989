"""Abstract header provider interface using Protocol."""

from typing import Protocol


class HeaderProvider(Protocol):
    """Source of extra request headers, e.g. authentication for a remote API.

    Reason: Using Protocol instead of ABC allows more flexible implementations
    while maintaining strict type checking.
    """

    def add_custom_headers(self, headers: dict[str, str]) -> None:
        """Add headers to the outgoing request.

        Args:
            headers: Mutable request header mapping.
        """
        ...
