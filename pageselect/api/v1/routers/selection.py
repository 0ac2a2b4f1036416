"""Selection routes for v1 endpoints.

Bulk operations are awaited inside the request; a second bulk request issued
while one is running gets 409. Cancellation is a separate request that is
served while the walk is suspended on a page fetch. Every route is ``async def``
so the selection is only touched from the event loop.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from pageselect.api.schemas import (
    BulkOutcomeSchema,
    CancelResponseSchema,
    PageSelectionRequestSchema,
    PageViewSchema,
    SelectFirstRequestSchema,
    SelectedItemSchema,
    SelectedItemsResponseSchema,
    SelectionSummarySchema,
)
from pageselect.api.v1.dependencies import (
    get_cancel_bulk_operation_handler,
    get_clear_all_handler,
    get_list_selected_items_handler,
    get_select_all_handler,
    get_select_first_n_handler,
    get_selection_summary_handler,
    get_toggle_page_selection_handler,
)
from pageselect.api.v1.routers.pages import page_view_to_schema
from pageselect.application.commands.bulk_selection import (
    CancelBulkOperationCommand,
    CancelBulkOperationHandler,
    ClearAllCommand,
    ClearAllHandler,
    SelectAllCommand,
    SelectAllHandler,
)
from pageselect.application.commands.select_first_n import SelectFirstNCommand, SelectFirstNHandler
from pageselect.application.commands.toggle_page_selection import (
    TogglePageSelectionCommand,
    TogglePageSelectionHandler,
)
from pageselect.application.dto.selection_dto import BulkOutcomeDTO
from pageselect.application.queries.get_selection_summary import (
    GetSelectionSummaryHandler,
    GetSelectionSummaryQuery,
)
from pageselect.application.queries.list_selected_items import (
    ListSelectedItemsHandler,
    ListSelectedItemsQuery,
)
from pageselect.domain.exceptions import (
    FetchError,
    InvalidArgument,
    OperationInProgress,
    PageNotLoadedError,
)

router = APIRouter(prefix="/selection", tags=["selection"])


@router.get("", response_model=SelectionSummarySchema)
async def get_selection_summary(
    handler: GetSelectionSummaryHandler = Depends(get_selection_summary_handler),
) -> SelectionSummarySchema:
    dto = handler.handle(GetSelectionSummaryQuery())
    return SelectionSummarySchema(
        selectedCount=dto.selected_count,
        state=dto.state,
        busy=dto.busy,
        activeOperation=dto.active_operation,
        lastOutcome=_outcome_to_schema(dto.last_outcome) if dto.last_outcome else None,
    )


@router.get("/items", response_model=SelectedItemsResponseSchema)
async def list_selected_items(
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    handler: ListSelectedItemsHandler = Depends(get_list_selected_items_handler),
) -> SelectedItemsResponseSchema:
    try:
        dto = handler.handle(ListSelectedItemsQuery(offset=offset, limit=limit))
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return SelectedItemsResponseSchema(
        items=[SelectedItemSchema(key=item.key, data=item.fields) for item in dto.items],
        total=dto.total,
        offset=dto.offset,
        limit=dto.limit,
    )


@router.put("/pages/{page_index}", response_model=PageViewSchema)
async def set_page_selection(
    page_index: int,
    payload: PageSelectionRequestSchema,
    handler: TogglePageSelectionHandler = Depends(get_toggle_page_selection_handler),
) -> PageViewSchema:
    command = TogglePageSelectionCommand(page_index=page_index, keys=frozenset(payload.keys))
    try:
        dto = handler.handle(command)
    except PageNotLoadedError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return page_view_to_schema(dto)


@router.post("/first", response_model=BulkOutcomeSchema)
async def select_first(
    payload: SelectFirstRequestSchema,
    handler: SelectFirstNHandler = Depends(get_select_first_n_handler),
) -> BulkOutcomeSchema:
    try:
        dto = await handler.handle(SelectFirstNCommand(count=payload.count))
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except OperationInProgress as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return _outcome_to_schema(dto)


@router.post("/all", response_model=BulkOutcomeSchema)
async def select_all(
    handler: SelectAllHandler = Depends(get_select_all_handler),
) -> BulkOutcomeSchema:
    try:
        dto = await handler.handle(SelectAllCommand())
    except OperationInProgress as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return _outcome_to_schema(dto)


@router.delete("", response_model=BulkOutcomeSchema)
async def clear_all(
    handler: ClearAllHandler = Depends(get_clear_all_handler),
) -> BulkOutcomeSchema:
    try:
        dto = await handler.handle(ClearAllCommand())
    except OperationInProgress as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _outcome_to_schema(dto)


@router.post("/cancel", response_model=CancelResponseSchema)
async def cancel_bulk_operation(
    handler: CancelBulkOperationHandler = Depends(get_cancel_bulk_operation_handler),
) -> CancelResponseSchema:
    result = handler.handle(CancelBulkOperationCommand())
    return CancelResponseSchema(
        cancelRequested=result["cancel_requested"],
        operation=result["operation"],
    )


def _outcome_to_schema(dto: BulkOutcomeDTO) -> BulkOutcomeSchema:
    return BulkOutcomeSchema(
        operation=dto.operation,
        pagesWalked=dto.pages_walked,
        itemsWalked=dto.items_walked,
        added=dto.added,
        removed=dto.removed,
        selectedCount=dto.selected_count,
        completed=dto.completed,
        cancelled=dto.cancelled,
        failedPage=dto.failed_page,
        errorMessage=dto.error_message,
    )
