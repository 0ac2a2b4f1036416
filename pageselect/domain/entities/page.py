"""Page entity: one fetched, bounded slice of the remote collection.

A page is replaced wholesale on every navigation or walk step and is never
patched in place. Page indices are 1-based.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Hashable, Iterable, Optional, Tuple

from ..exceptions import MalformedPageError
from .item import Item


@dataclass(frozen=True)
class Page:
    """Ordered items for a page index plus the total reported with it."""

    index: int
    page_size: int
    items: Tuple[Item, ...] = field(default_factory=tuple)
    total_count: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

        if self.index < 1:
            raise MalformedPageError(f"Page index must be >= 1, got {self.index}", page_index=self.index)
        if self.page_size < 1:
            raise MalformedPageError(f"Page size must be >= 1, got {self.page_size}", page_index=self.index)
        if len(self.items) > self.page_size:
            raise MalformedPageError(
                f"Page {self.index} holds {len(self.items)} items, more than page size {self.page_size}",
                page_index=self.index,
            )
        if self.total_count is not None and self.total_count < 0:
            raise MalformedPageError(f"Negative total count: {self.total_count}", page_index=self.index)

        seen = set()
        for item in self.items:
            if not isinstance(item, Item):
                raise MalformedPageError(
                    f"Page {self.index} contains a non-item entry: {type(item).__name__}",
                    page_index=self.index,
                )
            if item.key in seen:
                raise MalformedPageError(
                    f"Duplicate key {item.key!r} on page {self.index}", page_index=self.index
                )
            seen.add(item.key)

    @classmethod
    def create(
        cls,
        index: int,
        page_size: int,
        items: Iterable[Item] = (),
        total_count: Optional[int] = None,
    ) -> Page:
        return cls(index=index, page_size=page_size, items=tuple(items), total_count=total_count)

    def keys(self) -> Tuple[Hashable, ...]:
        """Item keys in page order."""
        return tuple(item.key for item in self.items)

    def key_set(self) -> FrozenSet[Hashable]:
        return frozenset(item.key for item in self.items)

    def item_for(self, key: Hashable) -> Optional[Item]:
        for item in self.items:
            if item.key == key:
                return item
        return None

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def is_full(self) -> bool:
        return len(self.items) == self.page_size

    def __len__(self) -> int:
        return len(self.items)
