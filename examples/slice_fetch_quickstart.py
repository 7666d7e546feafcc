#!/usr/bin/env python3
"""Fetch an in-memory or HTTP dataset in concurrent slices."""

from __future__ import annotations

import argparse
import asyncio
import logging

from laakhay.slicing import (
    DEFAULT_SLICE_SIZE,
    HTTPClient,
    HTTPPageRetriever,
    SequencePageRetriever,
    SliceDataFetcher,
    SlicePolicy,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Quickstart for sliced offset fetching")
    p.add_argument("--url", help="Base URL of an offset-paginated endpoint (omit for in-memory demo)")
    p.add_argument("--path", default="/items", help="Endpoint path")
    p.add_argument("--slice-size", type=int, default=DEFAULT_SLICE_SIZE)
    p.add_argument("--max-concurrency", type=int, default=None)
    p.add_argument("--size", type=int, default=1234, help="In-memory dataset size")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    fetcher = SliceDataFetcher(policy=SlicePolicy(max_concurrency=args.max_concurrency))

    if args.url is None:
        data = list(range(args.size))
        result = await fetcher.fetch(args.slice_size, SequencePageRetriever(data))
    else:
        async with HTTPClient(base_url=args.url) as client:
            result = await fetcher.fetch(args.slice_size, HTTPPageRetriever(client, args.path))

    logger.info("Fetched %d items", len(result))


if __name__ == "__main__":
    asyncio.run(main())
