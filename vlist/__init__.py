"""Virtual list geometry engine and host runtime."""

from vlist.api.errors import IndexOutOfRange, InvalidConfig, InvalidSize, VirtualListError
from vlist.api.types import Alignment, ItemMetadata, VisibleRange
from vlist.geometry.manager import SizeAndPositionManager

__all__ = [
    "Alignment",
    "IndexOutOfRange",
    "InvalidConfig",
    "InvalidSize",
    "ItemMetadata",
    "SizeAndPositionManager",
    "VirtualListError",
    "VisibleRange",
]
