#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from alidns_slim import AliDNSClient, DomainRecord, ListTarget, get_domain_records, page_size

FORMAT = "  {:<20}  {:<30}  {:<5}  {}"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List DNS records of a domain")
    p.add_argument("domain")
    p.add_argument("page_size", nargs="?", type=int, default=50)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    records = ListTarget(DomainRecord)
    async with AliDNSClient.from_env() as client:
        await client.get_all(
            get_domain_records(args.domain, page_size(args.page_size)),
            records,
            "DomainRecords.Record.*",
        )
    print(f"{args.domain} has {len(records)} records")
    print(FORMAT.format("ID", "NAME", "TYPE", "VALUE"))
    for r in records:
        print(FORMAT.format(r.record_id, r.fqdn, r.type, r.value))


if __name__ == "__main__":
    asyncio.run(main())
