"""Remote collection adapters."""

from .artic_collection_source import ArticCollectionSource
from .artic_response_parser import ArticResponseParser

__all__ = ["ArticCollectionSource", "ArticResponseParser"]
