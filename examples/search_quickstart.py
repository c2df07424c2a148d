#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json

from searchbase import Query, SearchbaseClient, SortDirection, query


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a Searchbase query (needs SEARCHBASE_API_TOKEN)")
    p.add_argument("index")
    p.add_argument("--where", nargs=3, action="append", metavar=("FIELD", "OP", "VALUE"))
    p.add_argument("--order-by", default=None)
    p.add_argument("--desc", action="store_true")
    p.add_argument("--limit", type=int, default=10)
    p.add_argument("--all", action="store_true", help="page through the whole result set")
    return p.parse_args()


def build_query(args: argparse.Namespace) -> Query:
    builder = query(args.index)
    for field, op, value in args.where or []:
        builder.where(field, op, value)
    if args.order_by:
        direction = SortDirection.DESCENDING if args.desc else SortDirection.ASCENDING
        builder.order_by(args.order_by, direction)
    return builder.build()


async def main() -> None:
    args = parse_args()
    q = build_query(args)

    async with SearchbaseClient.from_env() as client:
        if not args.all:
            page = await client.search(q.model_copy(update={"limit": args.limit}))
            print(f"total={page.total} range={page.range.start}..{page.range.end}")
            for record in page.records:
                print(json.dumps(record))
            return

        batches = client.search_all(q)
        async for batch in batches:
            print(f"-- page {batches.pages_fetched}: {len(batch)} records")
            for record in batch:
                print(json.dumps(record))
        print(f"fetched {batches.records_fetched} of {batches.total}")


if __name__ == "__main__":
    asyncio.run(main())
