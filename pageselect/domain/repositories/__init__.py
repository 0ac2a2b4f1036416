"""Domain repository interfaces."""

from .collection_source import RemoteCollectionSource, SourcePage

__all__ = ["RemoteCollectionSource", "SourcePage"]
