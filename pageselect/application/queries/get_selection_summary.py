"""
GetSelectionSummary Query - Reports selection size and bulk operation status.
"""
from dataclasses import dataclass

from pageselect.application.dto.selection_dto import BulkOutcomeDTO, SelectionSummaryDTO
from pageselect.domain.services.selection_synchronizer import SelectionSynchronizer


@dataclass(frozen=True)
class GetSelectionSummaryQuery:
    """Query for the session selection status."""
    pass


class GetSelectionSummaryHandler:
    """Handles GetSelectionSummary queries."""

    def __init__(self, synchronizer: SelectionSynchronizer):
        self._synchronizer = synchronizer

    def handle(self, query: GetSelectionSummaryQuery) -> SelectionSummaryDTO:
        active = self._synchronizer.active_operation
        last = self._synchronizer.last_outcome
        return SelectionSummaryDTO(
            selected_count=self._synchronizer.selected_count(),
            state=self._synchronizer.state.value,
            busy=self._synchronizer.is_busy,
            active_operation=active.value if active else None,
            last_outcome=BulkOutcomeDTO.from_outcome(last) if last else None,
        )
