"""SelectFirstN Command - Selects the leading N items of the collection."""
from dataclasses import dataclass

from pageselect.application.dto.selection_dto import BulkOutcomeDTO
from pageselect.domain.services.selection_synchronizer import SelectionSynchronizer


@dataclass(frozen=True)
class SelectFirstNCommand:
    count: int


class SelectFirstNHandler:
    """Handles SelectFirstN commands."""

    def __init__(self, synchronizer: SelectionSynchronizer):
        self._synchronizer = synchronizer

    async def handle(self, command: SelectFirstNCommand) -> BulkOutcomeDTO:
        """
        Walk pages from the start until ``count`` items are selected.

        Args:
            command: The SelectFirstN command

        Returns:
            BulkOutcomeDTO for the walk

        Raises:
            InvalidArgument: If count is not positive
            OperationInProgress: If another bulk operation is running
            FetchError: If a page fetch fails mid-walk
        """
        outcome = await self._synchronizer.select_first_n(command.count)
        return BulkOutcomeDTO.from_outcome(outcome)
