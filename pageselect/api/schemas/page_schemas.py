"""
Schemas for page navigation endpoints
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

ItemKey = Union[int, str]


class RowSchema(BaseModel):
    key: ItemKey
    selected: bool = False
    data: Dict[str, Any] = Field(default_factory=dict)


class PaginationSchema(BaseModel):
    currentPage: int
    pageSize: int
    pageCeiling: int
    totalRecords: int
    totalPages: int
    firstRecordOffset: int
    hasPrevious: bool
    hasNext: bool
    isCapped: bool = False
    reportedTotal: Optional[int] = None


class PageViewSchema(BaseModel):
    pageIndex: int
    rows: List[RowSchema] = Field(default_factory=list)
    pagination: PaginationSchema
    selectedKeys: List[ItemKey] = Field(default_factory=list)
    headerCheckbox: str
    selectedCount: int
