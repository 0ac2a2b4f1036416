"""
PageCache domain service.

Holds exactly one page of the remote collection together with the pagination
state that goes with it. Bulk walks use ``fetch`` so they can read any page
without replacing the one on display; navigation uses ``load``.
"""
from __future__ import annotations

import logging
from typing import Optional

from pageselect.domain.entities.page import Page
from pageselect.domain.exceptions import FetchError, MalformedPageError
from pageselect.domain.repositories.collection_source import RemoteCollectionSource, SourcePage
from pageselect.domain.value_objects.pagination_state import PaginationState

logger = logging.getLogger(__name__)


class PageCache:
    """
    Single-slot cache for the displayed page.

    Loads are sequenced: when two loads overlap and the newer one is installed
    first, the older result is returned to its caller but never installed, so a
    stale page cannot replace a newer one.
    """

    def __init__(self, source: RemoteCollectionSource, page_size: int, page_ceiling: int):
        """
        Initialize cache with its source.

        Args:
            source: Remote paginated collection
            page_size: Items per page requested from the source
            page_ceiling: Highest page index any walk or navigation may reach
        """
        self._source = source
        self._page: Optional[Page] = None
        self._pagination = PaginationState.initial(page_size, page_ceiling)
        self._requested = 0
        self._installed = 0

    @property
    def page_size(self) -> int:
        return self._pagination.page_size

    @property
    def page_ceiling(self) -> int:
        return self._pagination.page_ceiling

    @property
    def pagination(self) -> PaginationState:
        return self._pagination

    def current(self) -> Optional[Page]:
        """Return the held page without fetching."""
        return self._page

    def cached(self, page_index: int) -> Optional[Page]:
        """Return the held page if it is ``page_index``."""
        if self._page is not None and self._page.index == page_index:
            return self._page
        return None

    async def fetch(self, page_index: int) -> Page:
        """
        Fetch and validate a page without installing it.

        Args:
            page_index: 1-based page to request

        Returns:
            Validated Page

        Raises:
            FetchError: If the source fails or returns malformed data
        """
        try:
            result = await self._source.fetch_page(page_index, self.page_size)
        except FetchError as exc:
            if exc.page_index is None:
                exc.page_index = page_index
            raise
        except Exception as exc:
            raise FetchError(
                f"Fetching page {page_index} failed: {exc}", page_index=page_index, cause=exc
            ) from exc

        if not isinstance(result, SourcePage):
            raise MalformedPageError(
                f"Source returned {type(result).__name__} for page {page_index}", page_index=page_index
            )
        return Page.create(
            index=page_index,
            page_size=self.page_size,
            items=result.items,
            total_count=result.total_count,
        )

    async def load(self, page_index: int) -> Page:
        """
        Fetch ``page_index`` and make it the held page.

        On failure the previously held page and pagination are left intact, and
        any older load still in flight is discarded when it resolves.
        """
        self._requested += 1
        ticket = self._requested

        try:
            page = await self.fetch(page_index)
        except FetchError:
            self._installed = max(self._installed, ticket)
            raise

        if ticket < self._installed:
            logger.debug(
                "Discarding stale page %s; a newer load was already installed", page_index
            )
            return page

        self._page = page
        self._installed = ticket
        self._pagination = self._pagination.with_page(page_index, page.total_count)
        logger.debug("Installed page %s (%s items)", page_index, len(page))
        return page
