"""Process-wide setup and teardown.

The embedding application calls init() once at startup and shutdown()
once before exit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from lxml import etree

from feedcore.utils.logger import configure_logging

if TYPE_CHECKING:
    from feedcore.config.settings import Settings

logger = structlog.get_logger()

_initialized = False


def init(app_settings: Settings | None = None) -> None:
    """Configure logging and check the XML library.

    Args:
        app_settings: Settings to use. Defaults to the global settings.
    """
    global _initialized
    if _initialized:
        return

    if app_settings is None:
        from feedcore.config.settings import settings as app_settings

    configure_logging(
        log_level=app_settings.log_level,
        json_format=app_settings.log_json,
    )

    if etree.LIBXML_VERSION != etree.LIBXML_COMPILED_VERSION:
        logger.warning(
            "libxml2 runtime differs from the version lxml was built against",
            runtime=".".join(map(str, etree.LIBXML_VERSION)),
            compiled=".".join(map(str, etree.LIBXML_COMPILED_VERSION)),
        )

    _initialized = True
    logger.debug("feedcore initialized", lxml=".".join(map(str, etree.LXML_VERSION)))


def shutdown() -> None:
    """Release process-wide parser state."""
    global _initialized
    if not _initialized:
        return

    etree.clear_error_log()
    _initialized = False
    logger.debug("feedcore shut down")


def is_initialized() -> bool:
    return _initialized
