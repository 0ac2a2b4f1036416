"""Pytest configuration for pageselect tests.

Ensures the project root is on sys.path so ``pageselect.*`` imports resolve
during collection, runs async tests on asyncio through anyio's plugin, and
provides an in-memory remote collection with controllable failures and
gated fetches.
"""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pytest

# Add repository root to sys.path for module resolution.
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pageselect.domain.entities.item import Item  # noqa: E402
from pageselect.domain.exceptions import FetchError  # noqa: E402
from pageselect.domain.repositories.collection_source import (  # noqa: E402
    RemoteCollectionSource,
    SourcePage,
)


class FakeCollectionSource(RemoteCollectionSource):
    """Collection of ``total_items`` artworks keyed 1..N in collection order."""

    def __init__(
        self,
        total_items: int = 100,
        *,
        reported_total: Optional[int] = None,
        report_total: bool = True,
        fail_on: Iterable[int] = (),
    ) -> None:
        self.total_items = total_items
        self.reported_total = reported_total
        self.report_total = report_total
        self.fail_on = set(fail_on)
        self.requests: List[Tuple[int, int]] = []
        self.gates: Dict[int, asyncio.Event] = {}
        self.closed = False

    def gate(self, page_index: int) -> asyncio.Event:
        """Hold fetches of ``page_index`` until the returned event is set."""
        event = asyncio.Event()
        self.gates[page_index] = event
        return event

    @property
    def requested_pages(self) -> List[int]:
        return [page for page, _ in self.requests]

    async def fetch_page(self, page_index: int, page_size: int) -> SourcePage:
        self.requests.append((page_index, page_size))
        gate = self.gates.get(page_index)
        if gate is not None:
            await gate.wait()
        else:
            await asyncio.sleep(0)

        if page_index in self.fail_on:
            raise FetchError(f"Simulated failure for page {page_index}", page_index=page_index)

        start = (page_index - 1) * page_size
        end = min(start + page_size, self.total_items)
        items = tuple(make_item(key) for key in range(start + 1, end + 1))
        total = None
        if self.report_total:
            total = self.reported_total if self.reported_total is not None else self.total_items
        return SourcePage(items=items, total_count=total)

    async def aclose(self) -> None:
        self.closed = True


def make_item(key: int) -> Item:
    return Item(
        key=key,
        fields={
            "id": key,
            "title": f"Artwork {key}",
            "artist_display": f"Artist {key % 7}",
        },
    )


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def make_source() -> Callable[..., FakeCollectionSource]:
    """Factory for in-memory collections."""
    return FakeCollectionSource


@pytest.fixture
def item_factory() -> Callable[[int], Item]:
    return make_item


@pytest.fixture
def source() -> FakeCollectionSource:
    """One hundred items, page totals reported."""
    return FakeCollectionSource(total_items=100)
