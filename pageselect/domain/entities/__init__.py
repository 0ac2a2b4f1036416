"""Domain entities package"""

from .item import Item
from .page import Page

__all__ = ["Item", "Page"]
