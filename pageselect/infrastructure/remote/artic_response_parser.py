"""Parse Art Institute of Chicago API payloads into domain items."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pageselect.domain.entities.item import Item
from pageselect.domain.exceptions import MalformedPageError, MalformedRecordError
from pageselect.domain.repositories.collection_source import SourcePage


class ArticResponseParser:
    """Converts ``/artworks`` listing payloads into source pages."""

    def __init__(self, key_field: str = "id"):
        self._key_field = key_field

    def parse_page(self, page_index: int, payload: Any) -> SourcePage:
        if not isinstance(payload, dict):
            raise MalformedPageError(
                f"Page {page_index} payload is not an object", page_index=page_index
            )
        records = payload.get("data")
        if not isinstance(records, list):
            raise MalformedPageError(
                f"Page {page_index} payload has no 'data' list", page_index=page_index
            )

        items: List[Item] = []
        for position, record in enumerate(records):
            try:
                items.append(Item.from_record(record, key_field=self._key_field))
            except MalformedRecordError as exc:
                raise MalformedRecordError(
                    f"Record {position} on page {page_index}: {exc}", page_index=page_index, cause=exc
                ) from exc

        return SourcePage(items=tuple(items), total_count=self._parse_total(payload.get("pagination")))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _parse_total(pagination: Optional[Dict[str, Any]]) -> Optional[int]:
        if not isinstance(pagination, dict):
            return None
        total = pagination.get("total")
        if isinstance(total, bool) or not isinstance(total, int) or total < 0:
            return None
        return total
