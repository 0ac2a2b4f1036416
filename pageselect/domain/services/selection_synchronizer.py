"""
SelectionSynchronizer domain service.

Owns the selection set of one session: a mapping from item key to item that
spans every page of the remote collection, not only the displayed one. The
table's own notion of "selected rows" is always derived from it by
intersecting with the loaded page.

Bulk operations (select first N, select all, clear all) are serialized: while
one is running any other bulk request is rejected with ``OperationInProgress``.
Walks are not transactional; a fetch failure or a cancellation keeps whatever
was inserted before it.
"""
from __future__ import annotations

import asyncio
import logging
import math
from typing import Dict, Hashable, Iterable, List, Optional, Set

from pageselect.domain.entities.item import Item
from pageselect.domain.entities.page import Page
from pageselect.domain.exceptions import FetchError, InvalidArgument, OperationInProgress
from pageselect.domain.services.page_cache import PageCache
from pageselect.domain.value_objects.bulk_status import BulkOperationKind, BulkOutcome, BulkState
from pageselect.domain.value_objects.checkbox_state import CheckboxState

logger = logging.getLogger(__name__)


class SelectionSynchronizer:
    """
    Keeps the session's selection consistent with a lazily paged collection.

    The selection dict is only ever written by methods of this class. Methods
    without suspension points (toggles, queries) are atomic with respect to
    every other call on the event loop.
    """

    def __init__(self, page_cache: PageCache):
        """
        Initialize with the cache used to read pages.

        Args:
            page_cache: Cache of the displayed page; walks reuse its page when
                the index matches and otherwise fetch through it without
                replacing what is displayed
        """
        self._cache = page_cache
        self._selection: Dict[Hashable, Item] = {}
        self._state = BulkState.IDLE
        self._active: Optional[BulkOperationKind] = None
        self._cancel_requested = False
        self._last_outcome: Optional[BulkOutcome] = None

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------
    @property
    def state(self) -> BulkState:
        return self._state

    @property
    def active_operation(self) -> Optional[BulkOperationKind]:
        return self._active

    @property
    def is_busy(self) -> bool:
        return self._state is BulkState.FETCHING

    @property
    def last_outcome(self) -> Optional[BulkOutcome]:
        return self._last_outcome

    # ------------------------------------------------------------------
    # Per-page reconciliation and derived views
    # ------------------------------------------------------------------
    def toggle_on_current_page(self, page: Page, chosen: Iterable[Hashable]) -> None:
        """
        Replace the selection state of ``page`` with ``chosen``.

        ``chosen`` is the complete set of keys the UI reports as selected on
        the page after an interaction. Keys of the page outside ``chosen`` are
        deselected, keys in ``chosen`` are (re)selected with the page's item.
        Keys that belong to other pages are never touched; chosen keys that
        are not on the page are ignored.
        """
        chosen_keys = set(chosen)
        stray = chosen_keys - page.key_set()
        if stray:
            logger.debug("Ignoring %d key(s) not on page %s", len(stray), page.index)

        for item in page.items:
            if item.key in chosen_keys:
                self._selection[item.key] = item
            else:
                self._selection.pop(item.key, None)

    def visible_selection(self, page: Page) -> Set[Hashable]:
        """Keys of ``page`` that are currently selected."""
        return {key for key in page.keys() if key in self._selection}

    def header_checkbox_state(self, page: Page) -> CheckboxState:
        return CheckboxState.from_counts(len(self.visible_selection(page)), len(page))

    def selected_count(self) -> int:
        return len(self._selection)

    def is_selected(self, key: Hashable) -> bool:
        return key in self._selection

    def selected_keys(self) -> List[Hashable]:
        """Selected keys in insertion order."""
        return list(self._selection)

    def selected_items(self) -> List[Item]:
        """Selected items in insertion order."""
        return list(self._selection.values())

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------
    async def select_first_n(self, n: int) -> BulkOutcome:
        """
        Ensure the first ``n`` items of the collection are selected.

        "First" means page order, then in-page order, starting at page 1. The
        walk stops as soon as ``n`` items were covered, so no page past the
        one holding item ``n`` is fetched. Existing selections are kept.

        Args:
            n: Number of leading items to select, must be > 0

        Returns:
            BulkOutcome describing the walk

        Raises:
            InvalidArgument: If n is not a positive integer
            OperationInProgress: If another bulk operation is running
            FetchError: If a page fetch fails (partial progress is kept)
        """
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise InvalidArgument(f"n must be a positive integer, got {n!r}")
        return await self._walk(BulkOperationKind.SELECT_FIRST_N, limit=n)

    async def select_all(self) -> BulkOutcome:
        """Select every item on every page up to the page ceiling."""
        return await self._walk(BulkOperationKind.SELECT_ALL, limit=None)

    async def clear_all(self) -> BulkOutcome:
        """
        Reset the selection to empty.

        The selection dict is discarded and recreated, which also drops keys
        from pages that were never walked. No page is fetched.
        """
        self._begin(BulkOperationKind.CLEAR_ALL)
        try:
            removed = len(self._selection)
            self._selection = {}
            outcome = BulkOutcome(kind=BulkOperationKind.CLEAR_ALL, removed=removed, selected_count=0)
            self._last_outcome = outcome
            logger.info("Cleared selection (%d item(s) removed)", removed)
            return outcome
        finally:
            self._finish()

    def request_cancel(self) -> bool:
        """
        Ask the running walk to stop before its next page fetch.

        Returns:
            True if a walk was running and will observe the request
        """
        if self._state is not BulkState.FETCHING:
            return False
        self._cancel_requested = True
        logger.info("Cancellation requested for %s", self._active.value)
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _begin(self, kind: BulkOperationKind) -> None:
        if self._state is BulkState.FETCHING:
            raise OperationInProgress(self._active.value)
        self._state = BulkState.FETCHING
        self._active = kind
        self._cancel_requested = False

    def _finish(self) -> None:
        self._state = BulkState.IDLE
        self._active = None
        self._cancel_requested = False

    async def _walk(self, kind: BulkOperationKind, limit: Optional[int]) -> BulkOutcome:
        self._begin(kind)
        outcome = BulkOutcome.started(kind, selected_count=len(self._selection))
        logger.info("Starting %s (limit=%s, ceiling=%s)", kind.value, limit, self._cache.page_ceiling)

        page_index = 1
        last_page = self._cache.page_ceiling
        try:
            while page_index <= last_page:
                if self._cancel_requested:
                    outcome = outcome.mark_cancelled()
                    logger.info("%s cancelled before page %s", kind.value, page_index)
                    break

                page = self._cache.cached(page_index)
                if page is None:
                    page = await self._cache.fetch(page_index)

                batch = page.items
                if limit is not None:
                    batch = batch[: limit - outcome.items_walked]
                added = self._insert(batch)
                outcome = outcome.record_page(len(batch), added, len(self._selection))
                logger.debug(
                    "%s walked page %s: %d item(s), %d new", kind.value, page_index, len(batch), added
                )

                if limit is not None and outcome.items_walked >= limit:
                    break
                if not page.is_full:
                    break
                if page.total_count is not None:
                    last_page = min(last_page, math.ceil(page.total_count / page.page_size))
                page_index += 1
        except FetchError as exc:
            failed_page = exc.page_index if exc.page_index is not None else page_index
            outcome = outcome.mark_failed(failed_page, str(exc))
            self._last_outcome = outcome
            logger.warning(
                "%s aborted at page %s; keeping %d selected item(s): %s",
                kind.value,
                failed_page,
                len(self._selection),
                exc,
                extra={"operation": kind.value, "page_index": failed_page},
            )
            raise
        except asyncio.CancelledError:
            outcome = outcome.mark_cancelled()
            self._last_outcome = outcome
            logger.info(
                "%s task cancelled at page %s; keeping %d selected item(s)",
                kind.value,
                page_index,
                len(self._selection),
                extra={"operation": kind.value, "page_index": page_index},
            )
            raise
        finally:
            self._finish()

        self._last_outcome = outcome
        logger.info(
            "Finished %s: %s",
            kind.value,
            outcome,
            extra={"operation": kind.value, "pages_walked": outcome.pages_walked},
        )
        return outcome

    def _insert(self, items: Iterable[Item]) -> int:
        added = 0
        for item in items:
            if item.key not in self._selection:
                added += 1
            self._selection[item.key] = item
        return added
