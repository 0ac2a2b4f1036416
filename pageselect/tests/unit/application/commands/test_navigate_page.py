"""
Unit tests for the page navigation command handler.
"""
import pytest

from pageselect.application.commands.navigate_page import (
    GoToPageCommand,
    NavigatePageHandler,
    PageStep,
    StepPageCommand,
)
from pageselect.domain.exceptions import InvalidArgument
from pageselect.domain.services.page_cache import PageCache
from pageselect.domain.services.page_navigator import PageNavigator
from pageselect.domain.services.selection_synchronizer import SelectionSynchronizer

pytestmark = pytest.mark.anyio


@pytest.fixture
def session(source):
    cache = PageCache(source, page_size=10, page_ceiling=1000)
    return PageNavigator(cache), SelectionSynchronizer(cache)


@pytest.fixture
def handler(session):
    navigator, synchronizer = session
    return NavigatePageHandler(navigator, synchronizer)


class TestNavigatePageHandler:
    async def test_go_to_reflects_existing_selection(self, session, handler):
        _, synchronizer = session
        await synchronizer.select_first_n(25)

        view = await handler.go_to(GoToPageCommand(page_index=3))

        assert view.selected_keys == [21, 22, 23, 24, 25]
        assert view.header_checkbox == "indeterminate"
        assert view.selected_count == 25
        assert view.pagination.current_page == 3
        assert view.pagination.total_pages == 10

    async def test_steps(self, handler):
        await handler.go_to(GoToPageCommand(page_index=5))

        assert (await handler.step(StepPageCommand(step=PageStep.NEXT))).page_index == 6
        assert (await handler.step(StepPageCommand(step=PageStep.PREVIOUS))).page_index == 5
        assert (await handler.step(StepPageCommand(step=PageStep.REFRESH))).page_index == 5
        assert (await handler.step(StepPageCommand(step=PageStep.FIRST))).page_index == 1

    async def test_invalid_page_propagates(self, handler):
        with pytest.raises(InvalidArgument):
            await handler.go_to(GoToPageCommand(page_index=0))
