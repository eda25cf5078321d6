"""Unit tests for the pagination orchestrator.

A fake fetch serves pages of a listing and binds through the real
extraction engine, so counters travel the same path as caller data.
"""

from __future__ import annotations

import asyncio
import logging

import pytest

from alidns_slim.extraction import ListTarget, extract
from alidns_slim.runtime.pagination import CounterPaths, PageState, Paginator


class FakeListing:
    """Serves ``total`` items ``size`` per page in the API's envelope."""

    def __init__(self, total: int, size: int, *, counters: bool = True, fail_on: int | None = None):
        self.total = total
        self.size = size
        self.counters = counters
        self.fail_on = fail_on
        self.requested: list[int] = []

    def document(self, number: int) -> dict:
        start = (number - 1) * self.size
        items = [{"Id": i} for i in range(start, min(start + self.size, self.total))]
        doc: dict = {"Items": {"Item": items}}
        if self.counters:
            doc.update({"PageNumber": number, "TotalCount": self.total, "PageSize": self.size})
        return doc

    async def fetch(self, number, bindings):
        self.requested.append(number)
        if number == self.fail_on:
            raise RuntimeError("boom")
        doc = self.document(number)
        for target, path in bindings:
            extract(doc, target, path)


class TestPageState:
    def test_total_pages_rounds_up(self):
        assert PageState(1, 7, 3).total_pages == 3
        assert PageState(1, 6, 3).total_pages == 2

    def test_missing_counters(self):
        assert not PageState(1, 0, 3).has_counters
        assert not PageState(1, 7, 0).has_counters
        assert PageState(1, 0, 3).total_pages == 0


class TestPaginator:
    @pytest.mark.asyncio
    async def test_seven_items_three_per_page_fetches_three_pages(self):
        listing = FakeListing(total=7, size=3)
        ids = ListTarget(int)

        result = await Paginator().run(listing.fetch, [(ids, "Items.Item.*.Id")])

        assert listing.requested == [1, 2, 3]
        assert result.pages_fetched == 3
        assert result.reason == "all_pages"
        assert ids.items == list(range(7))

    @pytest.mark.asyncio
    async def test_zero_total_fetches_one_page(self):
        listing = FakeListing(total=0, size=3)

        result = await Paginator().run(listing.fetch, [])

        assert listing.requested == [1]
        assert result.reason == "no_counters"

    @pytest.mark.asyncio
    async def test_zero_page_size_fetches_one_page(self):
        listing = FakeListing(total=5, size=0)

        await Paginator().run(listing.fetch, [])

        assert listing.requested == [1]

    @pytest.mark.asyncio
    async def test_missing_counters_stop_after_first_page(self):
        listing = FakeListing(total=10, size=2, counters=False)
        ids = ListTarget(int)

        result = await Paginator().run(listing.fetch, [(ids, "Items.Item.*.Id")])

        assert listing.requested == [1]
        assert ids.items == [0, 1]
        assert result.reason == "no_counters"

    @pytest.mark.asyncio
    async def test_page_number_not_advancing_stops(self):
        """Test a server echoing page 1 forever does not loop."""
        listing = FakeListing(total=10, size=2)
        original = listing.document
        listing.document = lambda number: {**original(number), "PageNumber": 1}

        result = await Paginator().run(listing.fetch, [])

        assert listing.requested == [1, 2]
        assert result.reason == "page_not_advancing"

    @pytest.mark.asyncio
    async def test_exact_multiple(self):
        listing = FakeListing(total=6, size=3)
        await Paginator().run(listing.fetch, [])
        assert listing.requested == [1, 2]

    @pytest.mark.asyncio
    async def test_error_aborts_and_keeps_earlier_pages(self, caplog):
        listing = FakeListing(total=9, size=3, fail_on=2)
        ids = ListTarget(int)

        with caplog.at_level(logging.ERROR), pytest.raises(RuntimeError):
            await Paginator(endpoint_id="DescribeThings").run(
                listing.fetch, [(ids, "Items.Item.*.Id")]
            )

        assert listing.requested == [1, 2]
        assert ids.items == [0, 1, 2]
        assert any(r.getMessage() == "pagination_error" for r in caplog.records)

    @pytest.mark.asyncio
    async def test_cancellation_stops_further_pages(self):
        listing = FakeListing(total=9, size=3)
        ids = ListTarget(int)
        started = asyncio.Event()

        async def slow_fetch(number, bindings):
            if number == 2:
                started.set()
                await asyncio.sleep(10)
            await listing.fetch(number, bindings)

        task = asyncio.create_task(Paginator().run(slow_fetch, [(ids, "Items.Item.*.Id")]))
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert listing.requested == [1]
        assert ids.items == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_custom_counter_paths(self):
        paths = CounterPaths(page_number="Meta.Page", total_count="Meta.Total", page_size="Meta.Size")
        requested: list[int] = []

        async def fetch(number, bindings):
            requested.append(number)
            doc = {"Meta": {"Page": number, "Total": 4, "Size": 2}}
            for target, path in bindings:
                extract(doc, target, path)

        await Paginator(paths).run(fetch, [])

        assert requested == [1, 2]

    @pytest.mark.asyncio
    async def test_logs_completion(self, caplog):
        listing = FakeListing(total=2, size=2)
        with caplog.at_level(logging.INFO):
            await Paginator().run(listing.fetch, [])
        done = [r for r in caplog.records if r.getMessage() == "pagination_complete"]
        assert len(done) == 1
        assert done[0].pages_fetched == 1
