"""Remote collection source interface (Abstract Base Class)."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Tuple

from pageselect.domain.entities.item import Item


@dataclass(frozen=True)
class SourcePage:
    """Raw answer of one remote page request."""

    items: Tuple[Item, ...] = field(default_factory=tuple)
    total_count: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))


class RemoteCollectionSource(ABC):
    """Abstract paginated collection living on a remote endpoint."""

    @abstractmethod
    async def fetch_page(self, page_index: int, page_size: int) -> SourcePage:
        """Return the items of the 1-based ``page_index``.

        Raises ``FetchError`` when the remote call fails or the payload is
        malformed. ``total_count`` may be None or lower than the true size.
        """

    async def aclose(self) -> None:
        """Release transport resources; no-op by default."""
