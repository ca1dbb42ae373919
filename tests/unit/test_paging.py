"""Tests for paged listings and the sync/async item pagers."""

from __future__ import annotations

import asyncio
import json

import pytest

from aml_models.core.errors import MalformedPayloadError, PagingError
from aml_models.core.paging import AsyncItemPager, ItemPager
from aml_models.models.compute import (
    AmlCompute,
    AmlComputeNodesInformation,
    ComputeResource,
    PaginatedComputeResourcesList,
)


class _Service:
    """Serves saved pages by continuation token and records every request."""

    def __init__(self, pages: list[dict]):
        self.pages = pages
        self.requests: list[str | None] = []

    def _index(self, token: str | None) -> int:
        if token is None:
            return 0
        for index, page in enumerate(self.pages):
            if page.get("nextLink") == token:
                return index + 1
        raise AssertionError(f"unexpected token {token}")

    def __call__(self, token: str | None) -> dict:
        self.requests.append(token)
        return self.pages[self._index(token)]


class TestContinuable:
    def test_next_link(self, compute_pages):
        page = PaginatedComputeResourcesList.from_wire(compute_pages[0])
        assert page.has_next_page
        assert page.continuation_token() == "https://management.azure.com/computes?page=2"
        assert len(page.page_items()) == 1
        assert isinstance(page.value[0], ComputeResource)

    @pytest.mark.parametrize("link", [None, ""])
    def test_last_page(self, link):
        payload = {"value": []} if link is None else {"value": [], "nextLink": link}
        page = PaginatedComputeResourcesList.from_wire(payload)
        assert page.has_next_page is False
        assert page.continuation_token() is None

    def test_empty_page_serializes_to_empty_object(self):
        assert PaginatedComputeResourcesList().to_wire() == {}

    def test_null_value_reads_as_empty(self):
        page = PaginatedComputeResourcesList.from_wire({"value": None})
        assert page.page_items() == []

    def test_link_is_kept_verbatim(self):
        link = "https://management.azure.com/x?$skipToken=a%2Fb&api-version=2024-04-01"
        page = PaginatedComputeResourcesList.from_wire({"value": [], "nextLink": link})
        assert page.next_link == link
        assert page.to_wire() == {"nextLink": link}

    def test_custom_items_field(self):
        page = AmlComputeNodesInformation.from_wire(
            {"nodes": [{"nodeId": "tvm-1", "nodeState": "idle"}], "nextLink": "next"}
        )
        assert [node.node_id for node in page.page_items()] == ["tvm-1"]
        assert page.has_next_page

    def test_items_decode_through_union(self, compute_pages):
        page = PaginatedComputeResourcesList.from_wire(compute_pages[0])
        assert isinstance(page.value[0].properties, AmlCompute)


class TestItemPager:
    def test_yields_every_item_in_order(self, compute_pages):
        service = _Service(compute_pages)
        pager = ItemPager(service, PaginatedComputeResourcesList)
        assert [item.name for item in pager] == ["gpu", "cpu", "spark"]
        assert service.requests == [
            None,
            "https://management.azure.com/computes?page=2",
            "https://management.azure.com/computes?page=3",
        ]

    def test_lazy(self, compute_pages):
        service = _Service(compute_pages)
        pager = ItemPager(service, PaginatedComputeResourcesList)
        assert service.requests == []
        iterator = iter(pager)
        assert service.requests == []
        assert next(iterator).name == "gpu"
        assert service.requests == [None]

    def test_restartable(self, compute_pages):
        service = _Service(compute_pages)
        pager = ItemPager(service, PaginatedComputeResourcesList)
        first = [item.name for item in pager]
        second = [item.name for item in pager]
        assert first == second
        assert service.requests.count(None) == 2

    def test_by_page(self, compute_pages):
        pager = ItemPager(_Service(compute_pages), PaginatedComputeResourcesList)
        pages = list(pager.by_page())
        assert len(pages) == 3
        assert pages[-1].has_next_page is False

    def test_resume_from_token(self, compute_pages):
        service = _Service(compute_pages)
        pager = ItemPager(service, PaginatedComputeResourcesList)
        pages = list(pager.by_page("https://management.azure.com/computes?page=2"))
        assert [page.value[0].name for page in pages] == ["cpu", "spark"]
        assert None not in service.requests

    def test_single_page(self, compute_resource_payload):
        pager = ItemPager(lambda token: {"value": [compute_resource_payload]}, PaginatedComputeResourcesList)
        assert len(list(pager)) == 1

    def test_empty_pages_are_followed(self, compute_resource_payload):
        pages = [
            {"value": [], "nextLink": "p2"},
            {"value": [compute_resource_payload], "nextLink": None},
        ]
        pager = ItemPager(_Service(pages), PaginatedComputeResourcesList)
        assert [item.name for item in pager] == ["gpu"]

    def test_accepts_raw_json_and_decoded_pages(self, compute_pages):
        decoded = PaginatedComputeResourcesList.from_wire(compute_pages[1])
        responses = {
            None: json.dumps(compute_pages[0]),
            "https://management.azure.com/computes?page=2": decoded,
            "https://management.azure.com/computes?page=3": compute_pages[2],
        }
        pager = ItemPager(responses.__getitem__, PaginatedComputeResourcesList)
        assert [item.name for item in pager] == ["gpu", "cpu", "spark"]

    def test_self_referencing_link(self):
        pages = {None: {"value": [], "nextLink": "loop"}, "loop": {"value": [], "nextLink": "loop"}}
        pager = ItemPager(pages.__getitem__, PaginatedComputeResourcesList)
        with pytest.raises(PagingError, match="loop"):
            list(pager)

    def test_malformed_page(self):
        pager = ItemPager(lambda token: {"value": [{"properties": {"description": "x"}}]}, PaginatedComputeResourcesList)
        with pytest.raises(MalformedPayloadError):
            list(pager)

    def test_fetch_errors_propagate(self):
        def fetch(token):
            raise ConnectionError("offline")

        with pytest.raises(ConnectionError):
            list(ItemPager(fetch, PaginatedComputeResourcesList))


class TestAsyncItemPager:
    def test_yields_every_item(self, compute_pages):
        service = _Service(compute_pages)

        async def fetch(token):
            return service(token)

        async def collect():
            return [item.name async for item in AsyncItemPager(fetch, PaginatedComputeResourcesList)]

        assert asyncio.run(collect()) == ["gpu", "cpu", "spark"]
        assert len(service.requests) == 3

    def test_by_page_resume(self, compute_pages):
        service = _Service(compute_pages)

        async def fetch(token):
            return service(token)

        async def collect():
            pager = AsyncItemPager(fetch, PaginatedComputeResourcesList)
            return [page async for page in pager.by_page("https://management.azure.com/computes?page=3")]

        pages = asyncio.run(collect())
        assert len(pages) == 1
        assert pages[0].value[0].name == "spark"

    def test_self_referencing_link(self):
        async def fetch(token):
            return {"value": [], "nextLink": "loop"}

        async def collect():
            return [page async for page in AsyncItemPager(fetch, PaginatedComputeResourcesList).by_page("loop")]

        with pytest.raises(PagingError):
            asyncio.run(collect())

    def test_cancellation_stops_fetching(self, compute_pages):
        service = _Service(compute_pages)
        started = []

        async def fetch(token):
            started.append(token)
            if token is not None:
                await asyncio.sleep(10)
            return service(token)

        async def consume():
            async for _ in AsyncItemPager(fetch, PaginatedComputeResourcesList):
                pass

        async def run():
            task = asyncio.create_task(consume())
            while len(started) < 2:
                await asyncio.sleep(0)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(run())
        assert service.requests == [None]
