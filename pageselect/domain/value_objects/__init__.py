"""
Domain Value Objects

Immutable value objects that encapsulate domain concepts with validation.
"""
from .bulk_status import BulkOperationKind, BulkOutcome, BulkState
from .checkbox_state import CheckboxState
from .pagination_state import PaginationState

__all__ = [
    'BulkOperationKind',
    'BulkOutcome',
    'BulkState',
    'CheckboxState',
    'PaginationState',
]
