"""
PageNavigator domain service.

Turns page-change requests into cache loads. Navigation never reads or writes
the selection; it only moves the displayed page and its pagination state.
"""
from __future__ import annotations

import logging
from typing import Optional

from pageselect.domain.entities.page import Page
from pageselect.domain.exceptions import FetchError, InvalidArgument
from pageselect.domain.services.page_cache import PageCache
from pageselect.domain.value_objects.pagination_state import PaginationState

logger = logging.getLogger(__name__)


class PageNavigator:
    """Drive page navigation against the remote collection."""

    def __init__(self, page_cache: PageCache):
        self._cache = page_cache

    @property
    def pagination(self) -> PaginationState:
        return self._cache.pagination

    def current_page(self) -> Optional[Page]:
        return self._cache.current()

    async def go_to(self, page_index: int) -> Page:
        """
        Display ``page_index``.

        Args:
            page_index: 1-based page, at most the page ceiling

        Returns:
            The fetched page

        Raises:
            InvalidArgument: If the index is out of range
            FetchError: If the fetch fails; the prior page stays displayed
        """
        if isinstance(page_index, bool) or not isinstance(page_index, int):
            raise InvalidArgument(f"Page index must be an integer, got {page_index!r}")
        if page_index < 1 or page_index > self._cache.page_ceiling:
            raise InvalidArgument(
                f"Page index {page_index} outside 1..{self._cache.page_ceiling}"
            )

        try:
            page = await self._cache.load(page_index)
        except FetchError as exc:
            logger.warning(
                "Navigation to page %s failed; staying on page %s: %s",
                page_index,
                self._cache.pagination.current_page,
                exc,
            )
            raise
        return page

    async def first_page(self) -> Page:
        return await self.go_to(1)

    async def next_page(self) -> Page:
        state = self.pagination
        if self._cache.current() is not None and not state.has_next:
            raise InvalidArgument(f"Page {state.current_page} is the last page")
        target = state.current_page + 1 if self._cache.current() is not None else 1
        return await self.go_to(target)

    async def previous_page(self) -> Page:
        state = self.pagination
        if not state.has_previous:
            raise InvalidArgument("Already on the first page")
        return await self.go_to(state.current_page - 1)

    async def refresh(self) -> Page:
        """Reload the displayed page (page 1 if nothing is displayed yet)."""
        return await self.go_to(self.pagination.current_page)
