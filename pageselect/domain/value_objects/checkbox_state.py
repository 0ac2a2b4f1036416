"""Tri-state header checkbox derived from the visible selection."""
from __future__ import annotations

from enum import Enum


class CheckboxState(str, Enum):
    CHECKED = "checked"
    UNCHECKED = "unchecked"
    INDETERMINATE = "indeterminate"

    @classmethod
    def from_counts(cls, selected_on_page: int, rows_on_page: int) -> CheckboxState:
        """Checked iff every row of a non-empty page is selected."""
        if rows_on_page == 0 or selected_on_page == 0:
            return cls.UNCHECKED
        if selected_on_page >= rows_on_page:
            return cls.CHECKED
        return cls.INDETERMINATE
