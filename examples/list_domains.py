#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from alidns_slim import AliDNSClient, Domain, ListTarget, get_domains, page_size


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List all domains via DescribeDomains")
    p.add_argument("page_size", nargs="?", type=int, default=20)
    p.add_argument("--verbose", "-v", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    domains = ListTarget(Domain)
    async with AliDNSClient.from_env() as client:
        result = await client.get_all(
            get_domains(page_size(args.page_size)), domains, "Domains.Domain.*"
        )
    print(f"{len(domains)} domains ({result.pages_fetched} pages)")
    for d in domains:
        print(f"  {d.domain_name:<30} {d.record_count or 0:>5} records")


if __name__ == "__main__":
    asyncio.run(main())
