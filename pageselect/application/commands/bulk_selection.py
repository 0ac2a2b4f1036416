"""Whole-collection selection commands: select all, clear all, cancel.

Select all walks every page up to the page ceiling; clear all resets the
selection without fetching. Cancel is best-effort and only takes effect
between page fetches of a running walk.
"""
from dataclasses import dataclass
from typing import Any, Dict

from pageselect.application.dto.selection_dto import BulkOutcomeDTO
from pageselect.domain.services.selection_synchronizer import SelectionSynchronizer


@dataclass(frozen=True)
class SelectAllCommand:
    pass


@dataclass(frozen=True)
class ClearAllCommand:
    pass


@dataclass(frozen=True)
class CancelBulkOperationCommand:
    pass


class SelectAllHandler:
    """Handles SelectAll commands."""

    def __init__(self, synchronizer: SelectionSynchronizer):
        self._synchronizer = synchronizer

    async def handle(self, command: SelectAllCommand) -> BulkOutcomeDTO:
        outcome = await self._synchronizer.select_all()
        return BulkOutcomeDTO.from_outcome(outcome)


class ClearAllHandler:
    """Handles ClearAll commands."""

    def __init__(self, synchronizer: SelectionSynchronizer):
        self._synchronizer = synchronizer

    async def handle(self, command: ClearAllCommand) -> BulkOutcomeDTO:
        outcome = await self._synchronizer.clear_all()
        return BulkOutcomeDTO.from_outcome(outcome)


class CancelBulkOperationHandler:
    """Handles CancelBulkOperation commands."""

    def __init__(self, synchronizer: SelectionSynchronizer):
        self._synchronizer = synchronizer

    def handle(self, command: CancelBulkOperationCommand) -> Dict[str, Any]:
        operation = self._synchronizer.active_operation
        requested = self._synchronizer.request_cancel()
        return {
            "cancel_requested": requested,
            "operation": operation.value if (requested and operation) else None,
        }
