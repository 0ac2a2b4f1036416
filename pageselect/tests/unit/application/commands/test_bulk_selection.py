"""
Unit tests for the bulk selection command handlers.
"""
from unittest.mock import AsyncMock, Mock

import pytest

from pageselect.application.commands.bulk_selection import (
    CancelBulkOperationCommand,
    CancelBulkOperationHandler,
    ClearAllCommand,
    ClearAllHandler,
    SelectAllCommand,
    SelectAllHandler,
)
from pageselect.application.commands.select_first_n import SelectFirstNCommand, SelectFirstNHandler
from pageselect.domain.exceptions import FetchError, InvalidArgument, OperationInProgress
from pageselect.domain.services.page_cache import PageCache
from pageselect.domain.services.selection_synchronizer import SelectionSynchronizer
from pageselect.domain.value_objects.bulk_status import BulkOperationKind

pytestmark = pytest.mark.anyio


@pytest.fixture
def synchronizer(source):
    return SelectionSynchronizer(PageCache(source, page_size=10, page_ceiling=1000))


class TestSelectFirstNHandler:
    async def test_returns_outcome_dto(self, synchronizer):
        dto = await SelectFirstNHandler(synchronizer).handle(SelectFirstNCommand(count=15))

        assert dto.operation == "select_first_n"
        assert dto.selected_count == 15
        assert dto.pages_walked == 2
        assert dto.completed

    async def test_invalid_count_propagates(self, synchronizer):
        with pytest.raises(InvalidArgument):
            await SelectFirstNHandler(synchronizer).handle(SelectFirstNCommand(count=0))

    async def test_fetch_error_propagates(self, make_source):
        synchronizer = SelectionSynchronizer(
            PageCache(make_source(total_items=100, fail_on={2}), page_size=10, page_ceiling=1000)
        )

        with pytest.raises(FetchError):
            await SelectFirstNHandler(synchronizer).handle(SelectFirstNCommand(count=15))

        assert synchronizer.selected_count() == 10


class TestSelectAllAndClearAllHandlers:
    async def test_select_all_then_clear_all(self, synchronizer):
        selected = await SelectAllHandler(synchronizer).handle(SelectAllCommand())
        cleared = await ClearAllHandler(synchronizer).handle(ClearAllCommand())

        assert selected.selected_count == 100
        assert cleared.operation == "clear_all"
        assert cleared.removed == 100
        assert synchronizer.selected_count() == 0

    async def test_in_progress_propagates(self):
        synchronizer = Mock()
        synchronizer.select_all = AsyncMock(side_effect=OperationInProgress("clear_all"))

        with pytest.raises(OperationInProgress):
            await SelectAllHandler(synchronizer).handle(SelectAllCommand())


class TestCancelBulkOperationHandler:
    def test_reports_running_operation(self):
        synchronizer = Mock()
        synchronizer.active_operation = BulkOperationKind.SELECT_ALL
        synchronizer.request_cancel.return_value = True

        result = CancelBulkOperationHandler(synchronizer).handle(CancelBulkOperationCommand())

        assert result == {"cancel_requested": True, "operation": "select_all"}

    def test_idle_synchronizer(self, synchronizer):
        result = CancelBulkOperationHandler(synchronizer).handle(CancelBulkOperationCommand())

        assert result == {"cancel_requested": False, "operation": None}
