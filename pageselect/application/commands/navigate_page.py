"""Page navigation commands.

Move the displayed page and return its view. Navigation never changes the
selection; the view only reflects it.
"""
from dataclasses import dataclass
from enum import Enum

from pageselect.application.dto.page_dto import PageViewDTO
from pageselect.domain.services.page_navigator import PageNavigator
from pageselect.domain.services.selection_synchronizer import SelectionSynchronizer


class PageStep(Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    FIRST = "first"
    REFRESH = "refresh"


@dataclass(frozen=True)
class GoToPageCommand:
    page_index: int


@dataclass(frozen=True)
class StepPageCommand:
    step: PageStep


class NavigatePageHandler:
    """Handles GoToPage and StepPage commands."""

    def __init__(self, navigator: PageNavigator, synchronizer: SelectionSynchronizer):
        self._navigator = navigator
        self._synchronizer = synchronizer

    async def go_to(self, command: GoToPageCommand) -> PageViewDTO:
        page = await self._navigator.go_to(command.page_index)
        return PageViewDTO.build(page, self._navigator.pagination, self._synchronizer)

    async def step(self, command: StepPageCommand) -> PageViewDTO:
        if command.step is PageStep.NEXT:
            page = await self._navigator.next_page()
        elif command.step is PageStep.PREVIOUS:
            page = await self._navigator.previous_page()
        elif command.step is PageStep.FIRST:
            page = await self._navigator.first_page()
        else:
            page = await self._navigator.refresh()
        return PageViewDTO.build(page, self._navigator.pagination, self._synchronizer)
