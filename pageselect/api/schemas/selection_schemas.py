"""
Schemas for selection endpoints
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .page_schemas import ItemKey


class PageSelectionRequestSchema(BaseModel):
    keys: List[ItemKey] = Field(default_factory=list)


class SelectFirstRequestSchema(BaseModel):
    count: int = Field(..., gt=0)


class BulkOutcomeSchema(BaseModel):
    operation: str
    pagesWalked: int = 0
    itemsWalked: int = 0
    added: int = 0
    removed: int = 0
    selectedCount: int = 0
    completed: bool = True
    cancelled: bool = False
    failedPage: Optional[int] = None
    errorMessage: Optional[str] = None


class SelectionSummarySchema(BaseModel):
    selectedCount: int
    state: str
    busy: bool = False
    activeOperation: Optional[str] = None
    lastOutcome: Optional[BulkOutcomeSchema] = None


class SelectedItemSchema(BaseModel):
    key: ItemKey
    data: Dict[str, Any] = Field(default_factory=dict)


class SelectedItemsResponseSchema(BaseModel):
    items: List[SelectedItemSchema] = Field(default_factory=list)
    total: int
    offset: int = 0
    limit: Optional[int] = None


class CancelResponseSchema(BaseModel):
    cancelRequested: bool
    operation: Optional[str] = None
