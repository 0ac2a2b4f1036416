"""Page navigation routes for v1 endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pageselect.api.schemas import PageViewSchema, PaginationSchema, RowSchema
from pageselect.api.v1.dependencies import get_current_page_handler, get_navigate_page_handler
from pageselect.application.commands.navigate_page import (
    GoToPageCommand,
    NavigatePageHandler,
    PageStep,
    StepPageCommand,
)
from pageselect.application.dto.page_dto import PageViewDTO
from pageselect.application.queries.get_current_page import (
    GetCurrentPageHandler,
    GetCurrentPageQuery,
)
from pageselect.domain.exceptions import FetchError, InvalidArgument

router = APIRouter(prefix="/pages", tags=["pages"])


@router.get("/current", response_model=PageViewSchema)
async def get_current_page(
    handler: GetCurrentPageHandler = Depends(get_current_page_handler),
) -> PageViewSchema:
    try:
        dto = await handler.handle(GetCurrentPageQuery())
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return page_view_to_schema(dto)


@router.post("/next", response_model=PageViewSchema)
async def next_page(
    handler: NavigatePageHandler = Depends(get_navigate_page_handler),
) -> PageViewSchema:
    return await _step(handler, PageStep.NEXT)


@router.post("/previous", response_model=PageViewSchema)
async def previous_page(
    handler: NavigatePageHandler = Depends(get_navigate_page_handler),
) -> PageViewSchema:
    return await _step(handler, PageStep.PREVIOUS)


@router.post("/refresh", response_model=PageViewSchema)
async def refresh_page(
    handler: NavigatePageHandler = Depends(get_navigate_page_handler),
) -> PageViewSchema:
    return await _step(handler, PageStep.REFRESH)


@router.get("/{page_index}", response_model=PageViewSchema)
async def go_to_page(
    page_index: int,
    handler: NavigatePageHandler = Depends(get_navigate_page_handler),
) -> PageViewSchema:
    try:
        dto = await handler.go_to(GoToPageCommand(page_index=page_index))
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return page_view_to_schema(dto)


async def _step(handler: NavigatePageHandler, step: PageStep) -> PageViewSchema:
    try:
        dto = await handler.step(StepPageCommand(step=step))
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return page_view_to_schema(dto)


def page_view_to_schema(dto: PageViewDTO) -> PageViewSchema:
    pagination = dto.pagination
    return PageViewSchema(
        pageIndex=dto.page_index,
        rows=[RowSchema(key=row.key, selected=row.selected, data=row.fields) for row in dto.rows],
        pagination=PaginationSchema(
            currentPage=pagination.current_page,
            pageSize=pagination.page_size,
            pageCeiling=pagination.page_ceiling,
            totalRecords=pagination.total_records,
            totalPages=pagination.total_pages,
            firstRecordOffset=pagination.first_record_offset,
            hasPrevious=pagination.has_previous,
            hasNext=pagination.has_next,
            isCapped=pagination.is_capped,
            reportedTotal=pagination.reported_total,
        ),
        selectedKeys=list(dto.selected_keys),
        headerCheckbox=dto.header_checkbox,
        selectedCount=dto.selected_count,
    )
