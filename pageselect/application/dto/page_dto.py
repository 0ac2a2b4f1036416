"""
Data Transfer Objects for page views.

A page view is what the table renders: the rows of the displayed page, the
pagination metadata and the selection state derived for that page.
"""
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional

from pageselect.domain.entities.item import Item
from pageselect.domain.entities.page import Page
from pageselect.domain.services.selection_synchronizer import SelectionSynchronizer
from pageselect.domain.value_objects.pagination_state import PaginationState


@dataclass(frozen=True)
class RowDTO:
    """DTO for one table row."""

    key: Hashable
    fields: Dict[str, Any]
    selected: bool = False

    @classmethod
    def from_item(cls, item: Item, selected: bool) -> "RowDTO":
        return cls(key=item.key, fields=dict(item.fields), selected=selected)

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "fields": self.fields, "selected": self.selected}


@dataclass(frozen=True)
class PaginationDTO:
    """DTO for pagination metadata."""

    current_page: int
    page_size: int
    page_ceiling: int
    total_records: int
    total_pages: int
    first_record_offset: int
    has_previous: bool
    has_next: bool
    is_capped: bool
    reported_total: Optional[int] = None

    @classmethod
    def from_state(cls, state: PaginationState) -> "PaginationDTO":
        return cls(
            current_page=state.current_page,
            page_size=state.page_size,
            page_ceiling=state.page_ceiling,
            total_records=state.total_records,
            total_pages=state.total_pages,
            first_record_offset=state.first_record_offset,
            has_previous=state.has_previous,
            has_next=state.has_next,
            is_capped=state.is_capped,
            reported_total=state.reported_total,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_page": self.current_page,
            "page_size": self.page_size,
            "page_ceiling": self.page_ceiling,
            "total_records": self.total_records,
            "total_pages": self.total_pages,
            "first_record_offset": self.first_record_offset,
            "has_previous": self.has_previous,
            "has_next": self.has_next,
            "is_capped": self.is_capped,
            "reported_total": self.reported_total,
        }


@dataclass(frozen=True)
class PageViewDTO:
    """DTO for the displayed page with its derived selection state."""

    page_index: int
    rows: List[RowDTO]
    pagination: PaginationDTO
    selected_keys: List[Hashable]
    header_checkbox: str
    selected_count: int

    @classmethod
    def build(
        cls,
        page: Page,
        pagination: PaginationState,
        synchronizer: SelectionSynchronizer,
    ) -> "PageViewDTO":
        """Derive the view of ``page`` from the session selection."""
        visible = synchronizer.visible_selection(page)
        return cls(
            page_index=page.index,
            rows=[RowDTO.from_item(item, item.key in visible) for item in page.items],
            pagination=PaginationDTO.from_state(pagination),
            # page order, not set order
            selected_keys=[key for key in page.keys() if key in visible],
            header_checkbox=synchronizer.header_checkbox_state(page).value,
            selected_count=synchronizer.selected_count(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert DTO to dictionary."""
        return {
            "page_index": self.page_index,
            "rows": [row.to_dict() for row in self.rows],
            "pagination": self.pagination.to_dict(),
            "selected_keys": list(self.selected_keys),
            "header_checkbox": self.header_checkbox,
            "selected_count": self.selected_count,
        }
