"""
GetCurrentPage Query - Returns the view of the displayed page.

When nothing has been displayed yet the first page is loaded.
"""
from dataclasses import dataclass

from pageselect.application.dto.page_dto import PageViewDTO
from pageselect.domain.services.page_navigator import PageNavigator
from pageselect.domain.services.selection_synchronizer import SelectionSynchronizer


@dataclass(frozen=True)
class GetCurrentPageQuery:
    """Query for the displayed page."""
    pass


class GetCurrentPageHandler:
    """Handles GetCurrentPage queries."""

    def __init__(self, navigator: PageNavigator, synchronizer: SelectionSynchronizer):
        """
        Initialize handler with session services.

        Args:
            navigator: Navigator owning the displayed page
            synchronizer: Session selection used to derive checkbox state
        """
        self._navigator = navigator
        self._synchronizer = synchronizer

    async def handle(self, query: GetCurrentPageQuery) -> PageViewDTO:
        """
        Execute the query and return the page view.

        Raises:
            FetchError: If the first page has to be loaded and the fetch fails
        """
        page = self._navigator.current_page()
        if page is None:
            page = await self._navigator.first_page()
        return PageViewDTO.build(page, self._navigator.pagination, self._synchronizer)
