"""
Domain services for the paged selection session.

- PageCache: the one displayed page and its pagination state
- PageNavigator: page-change requests turned into cache loads
- SelectionSynchronizer: the cross-page selection set and bulk walks
"""
from .page_cache import PageCache
from .page_navigator import PageNavigator
from .selection_synchronizer import SelectionSynchronizer

__all__ = ["PageCache", "PageNavigator", "SelectionSynchronizer"]
