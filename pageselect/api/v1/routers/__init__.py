"""API v1 routers package."""

from . import pages, selection

__all__ = [
    "pages",
    "selection",
]
