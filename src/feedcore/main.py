"""Command line entry point.

Fetches a feed URL or parses a local file and prints the result as JSON.
"""

import argparse
import asyncio
import json
import sys

from feedcore.config.settings import settings
from feedcore.exceptions import FeedError
from feedcore.lifecycle import init, shutdown
from feedcore.models.cache import CacheTokens
from feedcore.services.feed_service import FeedService
from feedcore.transport.http import HttpTransport
from feedcore.utils.logger import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="feedcore", description="Fetch and parse RSS/Atom feeds")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch = subparsers.add_parser("fetch", help="Fetch a feed over HTTP")
    fetch.add_argument("url", help="Feed URL")
    fetch.add_argument("--etag", default="", help="ETag from the previous fetch")
    fetch.add_argument(
        "--last-modified",
        type=int,
        default=0,
        help="Last-Modified epoch seconds from the previous fetch",
    )
    fetch.add_argument(
        "--cookie-cache",
        default=str(settings.cookie_cache) if settings.cookie_cache else None,
        help="Cookie jar file (default: COOKIE_CACHE setting)",
    )

    parse = subparsers.add_parser("parse", help="Parse a local feed file")
    parse.add_argument("path", help="Feed file path")

    return parser


async def run_fetch(service: FeedService, args: argparse.Namespace) -> dict:
    tokens = CacheTokens(last_modified=args.last_modified, etag=args.etag)
    result = await service.fetch(args.url, tokens, cookie_cache=args.cookie_cache)
    return result.model_dump(mode="json")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    init(settings)
    logger = get_logger("cli")

    service = FeedService(HttpTransport(settings.fetch_options()))
    try:
        if args.command == "fetch":
            output = asyncio.run(run_fetch(service, args))
        else:
            output = service.parse_file(args.path).model_dump(mode="json")
    except FeedError as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        shutdown()

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
