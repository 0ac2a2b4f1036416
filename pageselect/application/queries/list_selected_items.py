"""
ListSelectedItems Query - Lists selected items across every page.

Items are returned in the order they were selected, independent of which
page is displayed.
"""
from dataclasses import dataclass
from typing import Optional

from pageselect.application.dto.selection_dto import SelectedItemDTO, SelectedItemsDTO
from pageselect.domain.exceptions import InvalidArgument
from pageselect.domain.services.selection_synchronizer import SelectionSynchronizer


@dataclass(frozen=True)
class ListSelectedItemsQuery:
    """Query to list selected items with optional windowing."""

    offset: int = 0
    limit: Optional[int] = None


class ListSelectedItemsHandler:
    """Handles ListSelectedItems queries."""

    def __init__(self, synchronizer: SelectionSynchronizer):
        self._synchronizer = synchronizer

    def handle(self, query: ListSelectedItemsQuery) -> SelectedItemsDTO:
        """
        Execute the query.

        Raises:
            InvalidArgument: If offset is negative or limit is not positive
        """
        if query.offset < 0:
            raise InvalidArgument(f"offset must be >= 0, got {query.offset}")
        if query.limit is not None and query.limit < 1:
            raise InvalidArgument(f"limit must be >= 1, got {query.limit}")

        items = self._synchronizer.selected_items()
        end = None if query.limit is None else query.offset + query.limit
        window = items[query.offset:end]
        return SelectedItemsDTO(
            items=[SelectedItemDTO.from_item(item) for item in window],
            total=len(items),
            offset=query.offset,
            limit=query.limit,
        )
