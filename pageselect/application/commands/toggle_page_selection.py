"""TogglePageSelection Command - Reconciles the displayed page's checkboxes.

The UI reports the complete set of keys checked on the displayed page after an
interaction; the selection is brought in line with it for that page only.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Hashable

from pageselect.application.dto.page_dto import PageViewDTO
from pageselect.domain.exceptions import PageNotLoadedError
from pageselect.domain.services.page_cache import PageCache
from pageselect.domain.services.selection_synchronizer import SelectionSynchronizer


@dataclass(frozen=True)
class TogglePageSelectionCommand:
    page_index: int
    keys: FrozenSet[Hashable] = field(default_factory=frozenset)


class TogglePageSelectionHandler:
    """Handles TogglePageSelection commands."""

    def __init__(self, page_cache: PageCache, synchronizer: SelectionSynchronizer):
        self._cache = page_cache
        self._synchronizer = synchronizer

    def handle(self, command: TogglePageSelectionCommand) -> PageViewDTO:
        """Apply the reported checkbox state to the displayed page.

        Raises:
            PageNotLoadedError: If ``page_index`` is not the displayed page
        """
        page = self._cache.cached(command.page_index)
        if page is None:
            current = self._cache.current()
            raise PageNotLoadedError(command.page_index, current.index if current else None)

        self._synchronizer.toggle_on_current_page(page, command.keys)
        return PageViewDTO.build(page, self._cache.pagination, self._synchronizer)
