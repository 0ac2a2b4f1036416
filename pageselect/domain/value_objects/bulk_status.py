"""
Bulk operation status value objects

Describe the synchronizer's state machine (idle / fetching) and the immutable
outcome of a bulk operation (select first N, select all, clear all).
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional


class BulkState(str, Enum):
    """Synchronizer states."""
    IDLE = "idle"
    FETCHING = "fetching"


class BulkOperationKind(str, Enum):
    """Operations that may walk pages beyond the displayed one."""
    SELECT_FIRST_N = "select_first_n"
    SELECT_ALL = "select_all"
    CLEAR_ALL = "clear_all"


@dataclass(frozen=True)
class BulkOutcome:
    """
    Immutable result of one bulk operation.

    Partial progress is reported as-is: a cancelled or failed walk keeps the
    items it already inserted, and the counters reflect exactly that.
    """
    kind: BulkOperationKind
    pages_walked: int = 0
    items_walked: int = 0
    added: int = 0
    removed: int = 0
    selected_count: int = 0
    cancelled: bool = False
    failed_page: Optional[int] = None
    error_message: Optional[str] = None

    def __post_init__(self):
        """Accept plain strings for the operation kind."""
        if not isinstance(self.kind, BulkOperationKind):
            object.__setattr__(self, 'kind', BulkOperationKind(self.kind))

    @classmethod
    def started(cls, kind: BulkOperationKind, selected_count: int = 0) -> BulkOutcome:
        """Create an empty outcome for an operation that is about to run."""
        return cls(kind=kind, selected_count=selected_count)

    def record_page(self, items_walked: int, added: int, selected_count: int) -> BulkOutcome:
        """Return a copy with one more walked page folded in."""
        return replace(
            self,
            pages_walked=self.pages_walked + 1,
            items_walked=self.items_walked + items_walked,
            added=self.added + added,
            selected_count=selected_count,
        )

    def mark_cancelled(self) -> BulkOutcome:
        return replace(self, cancelled=True)

    def mark_failed(self, page_index: Optional[int], message: str) -> BulkOutcome:
        return replace(self, failed_page=page_index, error_message=message)

    @property
    def failed(self) -> bool:
        return self.error_message is not None

    @property
    def completed(self) -> bool:
        """True when the operation ran to its natural end."""
        return not self.cancelled and not self.failed

    def to_dict(self) -> Dict[str, Any]:
        """Convert outcome to dictionary."""
        return {
            "kind": self.kind.value,
            "pages_walked": self.pages_walked,
            "items_walked": self.items_walked,
            "added": self.added,
            "removed": self.removed,
            "selected_count": self.selected_count,
            "cancelled": self.cancelled,
            "completed": self.completed,
            "failed_page": self.failed_page,
            "error_message": self.error_message,
        }

    def __str__(self) -> str:
        if self.failed:
            return f"{self.kind.value} failed at page {self.failed_page}: {self.error_message}"
        if self.cancelled:
            return f"{self.kind.value} cancelled after {self.pages_walked} page(s)"
        return f"{self.kind.value} completed ({self.selected_count} selected)"
