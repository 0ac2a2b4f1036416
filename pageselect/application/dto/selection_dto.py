"""
Data Transfer Objects for selection commands and queries.
"""
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional

from pageselect.domain.entities.item import Item
from pageselect.domain.value_objects.bulk_status import BulkOutcome


@dataclass(frozen=True)
class BulkOutcomeDTO:
    """DTO for the result of a bulk operation."""

    operation: str
    pages_walked: int
    items_walked: int
    added: int
    removed: int
    selected_count: int
    completed: bool
    cancelled: bool
    failed_page: Optional[int] = None
    error_message: Optional[str] = None

    @classmethod
    def from_outcome(cls, outcome: BulkOutcome) -> "BulkOutcomeDTO":
        return cls(
            operation=outcome.kind.value,
            pages_walked=outcome.pages_walked,
            items_walked=outcome.items_walked,
            added=outcome.added,
            removed=outcome.removed,
            selected_count=outcome.selected_count,
            completed=outcome.completed,
            cancelled=outcome.cancelled,
            failed_page=outcome.failed_page,
            error_message=outcome.error_message,
        )


@dataclass(frozen=True)
class SelectionSummaryDTO:
    """DTO for the session selection status."""

    selected_count: int
    state: str
    busy: bool = False
    active_operation: Optional[str] = None
    last_outcome: Optional[BulkOutcomeDTO] = None


@dataclass(frozen=True)
class SelectedItemDTO:
    key: Hashable
    fields: Dict[str, Any]

    @classmethod
    def from_item(cls, item: Item) -> "SelectedItemDTO":
        return cls(key=item.key, fields=dict(item.fields))


@dataclass(frozen=True)
class SelectedItemsDTO:
    """DTO for a listing of selected items in selection order."""

    items: List[SelectedItemDTO]
    total: int
    offset: int = 0
    limit: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [{"key": item.key, "fields": item.fields} for item in self.items],
            "total": self.total,
            "offset": self.offset,
            "limit": self.limit,
        }
