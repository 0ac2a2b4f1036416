"""Unit tests for the PageCache domain service."""
import asyncio

import pytest

from pageselect.domain.entities.item import Item
from pageselect.domain.exceptions import FetchError, MalformedPageError
from pageselect.domain.repositories.collection_source import RemoteCollectionSource, SourcePage
from pageselect.domain.services.page_cache import PageCache

pytestmark = pytest.mark.anyio


class _StaticSource(RemoteCollectionSource):
    def __init__(self, result=None, error=None):
        self._result = result
        self._error = error

    async def fetch_page(self, page_index, page_size):
        if self._error is not None:
            raise self._error
        return self._result


class TestPageCacheLoad:
    async def test_load_installs_page_and_pagination(self, source):
        cache = PageCache(source, page_size=10, page_ceiling=1000)

        page = await cache.load(3)

        assert cache.current() is page
        assert page.keys() == tuple(range(21, 31))
        assert cache.pagination.current_page == 3
        assert cache.pagination.reported_total == 100
        assert cache.pagination.total_pages == 10

    async def test_current_is_none_before_first_load(self, source):
        cache = PageCache(source, page_size=10, page_ceiling=5)

        assert cache.current() is None
        assert cache.cached(1) is None
        assert cache.pagination.total_records == 50

    async def test_cached_only_matches_held_index(self, source):
        cache = PageCache(source, page_size=10, page_ceiling=1000)
        page = await cache.load(2)

        assert cache.cached(2) is page
        assert cache.cached(3) is None

    async def test_failed_load_keeps_previous_page(self, make_source):
        source = make_source(total_items=100, fail_on={4})
        cache = PageCache(source, page_size=10, page_ceiling=1000)
        page = await cache.load(2)

        with pytest.raises(FetchError) as exc_info:
            await cache.load(4)

        assert exc_info.value.page_index == 4
        assert cache.current() is page
        assert cache.pagination.current_page == 2

    async def test_stale_load_is_not_installed(self, source):
        cache = PageCache(source, page_size=10, page_ceiling=1000)
        gate = source.gate(2)
        slow = asyncio.create_task(cache.load(2))
        while 2 not in source.requested_pages:
            await asyncio.sleep(0)

        newer = await cache.load(3)
        gate.set()
        stale = await slow

        assert stale.index == 2
        assert cache.current() is newer
        assert cache.pagination.current_page == 3

    async def test_failed_newer_load_discards_older_one(self, make_source):
        source = make_source(total_items=100, fail_on={3})
        cache = PageCache(source, page_size=10, page_ceiling=1000)
        shown = await cache.load(1)
        gate = source.gate(2)
        slow = asyncio.create_task(cache.load(2))
        while 2 not in source.requested_pages:
            await asyncio.sleep(0)

        with pytest.raises(FetchError):
            await cache.load(3)
        gate.set()
        stale = await slow

        assert stale.index == 2
        assert cache.current() is shown
        assert cache.pagination.current_page == 1

    async def test_earlier_request_shows_until_later_one_resolves(self, source):
        cache = PageCache(source, page_size=10, page_ceiling=1000)
        gate = source.gate(3)
        earlier = asyncio.create_task(cache.load(2))
        later = asyncio.create_task(cache.load(3))

        await earlier
        assert cache.current().index == 2
        gate.set()
        await later

        assert cache.current().index == 3
        assert cache.pagination.current_page == 3


class TestPageCacheFetch:
    async def test_fetch_does_not_install(self, source):
        cache = PageCache(source, page_size=10, page_ceiling=1000)
        displayed = await cache.load(1)

        fetched = await cache.fetch(5)

        assert fetched.index == 5
        assert cache.current() is displayed

    async def test_unexpected_source_exception_becomes_fetch_error(self):
        cache = PageCache(_StaticSource(error=ConnectionResetError("reset")), page_size=10, page_ceiling=10)

        with pytest.raises(FetchError) as exc_info:
            await cache.fetch(1)

        assert exc_info.value.page_index == 1
        assert isinstance(exc_info.value.cause, ConnectionResetError)

    async def test_wrong_result_type_is_malformed(self):
        cache = PageCache(_StaticSource(result={"data": []}), page_size=10, page_ceiling=10)

        with pytest.raises(MalformedPageError):
            await cache.fetch(1)

    async def test_oversized_page_is_malformed(self):
        items = tuple(Item(key=key) for key in range(1, 13))
        cache = PageCache(_StaticSource(result=SourcePage(items=items)), page_size=10, page_ceiling=10)

        with pytest.raises(MalformedPageError):
            await cache.load(1)

        assert cache.current() is None

    async def test_fetch_error_without_page_gets_page_index(self):
        cache = PageCache(_StaticSource(error=FetchError("down")), page_size=10, page_ceiling=10)

        with pytest.raises(FetchError) as exc_info:
            await cache.fetch(7)

        assert exc_info.value.page_index == 7
