"""Shared FastAPI dependencies for v1 API routers.

The process hosts a single selection session: one remote source, one page
cache, one navigator and one synchronizer, created lazily and cached here so
every router works on the same selection. Handlers are thin and cached the
same way.
"""
from __future__ import annotations

from functools import lru_cache

from pageselect.application.commands.bulk_selection import (
    CancelBulkOperationHandler,
    ClearAllHandler,
    SelectAllHandler,
)
from pageselect.application.commands.navigate_page import NavigatePageHandler
from pageselect.application.commands.select_first_n import SelectFirstNHandler
from pageselect.application.commands.toggle_page_selection import TogglePageSelectionHandler
from pageselect.application.queries.get_current_page import GetCurrentPageHandler
from pageselect.application.queries.get_selection_summary import GetSelectionSummaryHandler
from pageselect.application.queries.list_selected_items import ListSelectedItemsHandler
from pageselect.config import get_settings
from pageselect.domain.repositories.collection_source import RemoteCollectionSource
from pageselect.domain.services.page_cache import PageCache
from pageselect.domain.services.page_navigator import PageNavigator
from pageselect.domain.services.selection_synchronizer import SelectionSynchronizer
from pageselect.infrastructure.remote.artic_collection_source import ArticCollectionSource


@lru_cache()
def _collection_source() -> RemoteCollectionSource:
    return ArticCollectionSource()


def get_collection_source() -> RemoteCollectionSource:
    """Provide the session's remote collection source."""
    return _collection_source()


@lru_cache()
def _page_cache() -> PageCache:
    settings = get_settings()
    return PageCache(
        _collection_source(),
        page_size=settings.page_size,
        page_ceiling=settings.page_ceiling,
    )


def get_page_cache() -> PageCache:
    """Provide the session's page cache."""
    return _page_cache()


@lru_cache()
def _page_navigator() -> PageNavigator:
    return PageNavigator(_page_cache())


def get_page_navigator() -> PageNavigator:
    """Provide the session's page navigator."""
    return _page_navigator()


@lru_cache()
def _selection_synchronizer() -> SelectionSynchronizer:
    return SelectionSynchronizer(_page_cache())


def get_selection_synchronizer() -> SelectionSynchronizer:
    """Provide the session's selection synchronizer."""
    return _selection_synchronizer()


@lru_cache()
def _get_current_page_handler() -> GetCurrentPageHandler:
    return GetCurrentPageHandler(_page_navigator(), _selection_synchronizer())


def get_current_page_handler() -> GetCurrentPageHandler:
    """Provide a cached GetCurrentPage handler."""
    return _get_current_page_handler()


@lru_cache()
def _navigate_page_handler() -> NavigatePageHandler:
    return NavigatePageHandler(_page_navigator(), _selection_synchronizer())


def get_navigate_page_handler() -> NavigatePageHandler:
    """Provide a cached navigation handler."""
    return _navigate_page_handler()


@lru_cache()
def _toggle_page_selection_handler() -> TogglePageSelectionHandler:
    return TogglePageSelectionHandler(_page_cache(), _selection_synchronizer())


def get_toggle_page_selection_handler() -> TogglePageSelectionHandler:
    """Provide a cached per-page toggle handler."""
    return _toggle_page_selection_handler()


@lru_cache()
def _select_first_n_handler() -> SelectFirstNHandler:
    return SelectFirstNHandler(_selection_synchronizer())


def get_select_first_n_handler() -> SelectFirstNHandler:
    """Provide a cached SelectFirstN handler."""
    return _select_first_n_handler()


@lru_cache()
def _select_all_handler() -> SelectAllHandler:
    return SelectAllHandler(_selection_synchronizer())


def get_select_all_handler() -> SelectAllHandler:
    """Provide a cached SelectAll handler."""
    return _select_all_handler()


@lru_cache()
def _clear_all_handler() -> ClearAllHandler:
    return ClearAllHandler(_selection_synchronizer())


def get_clear_all_handler() -> ClearAllHandler:
    """Provide a cached ClearAll handler."""
    return _clear_all_handler()


@lru_cache()
def _cancel_bulk_operation_handler() -> CancelBulkOperationHandler:
    return CancelBulkOperationHandler(_selection_synchronizer())


def get_cancel_bulk_operation_handler() -> CancelBulkOperationHandler:
    """Provide a cached cancellation handler."""
    return _cancel_bulk_operation_handler()


@lru_cache()
def _get_selection_summary_handler() -> GetSelectionSummaryHandler:
    return GetSelectionSummaryHandler(_selection_synchronizer())


def get_selection_summary_handler() -> GetSelectionSummaryHandler:
    """Provide a cached selection summary handler."""
    return _get_selection_summary_handler()


@lru_cache()
def _list_selected_items_handler() -> ListSelectedItemsHandler:
    return ListSelectedItemsHandler(_selection_synchronizer())


def get_list_selected_items_handler() -> ListSelectedItemsHandler:
    """Provide a cached selected-items listing handler."""
    return _list_selected_items_handler()


async def close_session() -> None:
    """Release the remote source if it was ever created."""
    if _collection_source.cache_info().currsize:
        await _collection_source().aclose()
