"""
Item Entity

One record of the remote collection, identified by a stable key. Items are
immutable once fetched; the selection layer stores them but never edits them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Hashable, Mapping

from ..exceptions import MalformedRecordError


@dataclass(frozen=True)
class Item:
    """
    Immutable collection record.

    ``key`` is the stable identifier used by the selection set, ``fields``
    holds arbitrary display values (title, artist, ...) as a read-only mapping.
    Equality and hashing only consider the key.
    """

    key: Hashable
    fields: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        """Freeze the display fields and reject unusable keys."""
        if not _is_valid_key(self.key):
            raise MalformedRecordError(f"Invalid item key: {self.key!r}")
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields or {})))

    @classmethod
    def from_record(cls, record: Mapping[str, Any], key_field: str = "id") -> Item:
        """
        Build an item from a raw remote record.

        Args:
            record: Mapping decoded from the remote payload
            key_field: Name of the field holding the stable key

        Returns:
            Item keyed by ``record[key_field]``

        Raises:
            MalformedRecordError: If the record is not a mapping or has no usable key
        """
        if not isinstance(record, Mapping):
            raise MalformedRecordError(f"Record is not an object: {type(record).__name__}")
        if key_field not in record:
            raise MalformedRecordError(f"Record has no '{key_field}' field")
        return cls(key=record[key_field], fields=dict(record))

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert item to a plain dictionary (fields plus the key)."""
        payload = dict(self.fields)
        payload.setdefault("id", self.key)
        return payload


def _is_valid_key(key: Any) -> bool:
    # bool is an int subclass but never a meaningful record id
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    if isinstance(key, str):
        return bool(key.strip())
    return False
