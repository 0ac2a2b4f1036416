"""
API Schemas - organized by domain
"""
from .page_schemas import ItemKey, PageViewSchema, PaginationSchema, RowSchema
from .selection_schemas import (
    BulkOutcomeSchema,
    CancelResponseSchema,
    PageSelectionRequestSchema,
    SelectFirstRequestSchema,
    SelectedItemSchema,
    SelectedItemsResponseSchema,
    SelectionSummarySchema,
)

__all__ = [
    # Page schemas
    "ItemKey",
    "RowSchema",
    "PaginationSchema",
    "PageViewSchema",
    # Selection schemas
    "PageSelectionRequestSchema",
    "SelectFirstRequestSchema",
    "BulkOutcomeSchema",
    "SelectionSummarySchema",
    "SelectedItemSchema",
    "SelectedItemsResponseSchema",
    "CancelResponseSchema",
]
