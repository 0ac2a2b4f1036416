"""
PaginationState value object

Current page index, page size and the record total the pager works with.
When the remote source reports a total larger than the page ceiling allows,
the usable total is capped at ``page_size * page_ceiling``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PaginationState:
    """
    Immutable pagination metadata.

    ``current_page`` is 1-based. ``reported_total`` is whatever the source last
    said (None when it does not expose a total); ``total_records`` is the total
    the pager and bulk walks actually honor.
    """
    current_page: int
    page_size: int
    page_ceiling: int
    reported_total: Optional[int] = None

    def __post_init__(self):
        """Validate sizes and clamp the page index."""
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        if self.page_ceiling < 1:
            raise ValueError(f"page_ceiling must be >= 1, got {self.page_ceiling}")
        if self.current_page < 1:
            object.__setattr__(self, 'current_page', 1)
        if self.reported_total is not None and self.reported_total < 0:
            object.__setattr__(self, 'reported_total', 0)

    @classmethod
    def initial(cls, page_size: int, page_ceiling: int) -> PaginationState:
        """Create the state used before any page has been fetched."""
        return cls(current_page=1, page_size=page_size, page_ceiling=page_ceiling)

    @property
    def ceiling_records(self) -> int:
        return self.page_size * self.page_ceiling

    @property
    def total_records(self) -> int:
        if self.reported_total is None:
            return self.ceiling_records
        return min(self.reported_total, self.ceiling_records)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_records / self.page_size)

    @property
    def is_capped(self) -> bool:
        """True when the source reports more records than the ceiling lets us walk."""
        return self.reported_total is not None and self.reported_total > self.ceiling_records

    @property
    def first_record_offset(self) -> int:
        """Zero-based offset of the first record on the current page."""
        return (self.current_page - 1) * self.page_size

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def with_page(self, page_index: int, reported_total: Optional[int] = None) -> PaginationState:
        """
        Return a copy pointing at ``page_index``.

        Args:
            page_index: Newly displayed page
            reported_total: Total from the fetch; keeps the previous one when None

        Returns:
            New PaginationState instance
        """
        total = reported_total if reported_total is not None else self.reported_total
        return replace(self, current_page=page_index, reported_total=total)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_page": self.current_page,
            "page_size": self.page_size,
            "page_ceiling": self.page_ceiling,
            "reported_total": self.reported_total,
            "total_records": self.total_records,
            "total_pages": self.total_pages,
            "first_record_offset": self.first_record_offset,
            "has_previous": self.has_previous,
            "has_next": self.has_next,
            "is_capped": self.is_capped,
        }
