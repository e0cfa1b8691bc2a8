"""Public types, errors and logging contracts."""

from vlist.api.errors import IndexOutOfRange, InvalidConfig, InvalidSize, VirtualListError
from vlist.api.logging import JsonFormatter, VirtualListLoggingConfig
from vlist.api.types import (
    EMPTY_RANGE,
    POSITION_PROP,
    SCROLL_PROP,
    SIZE_PROP,
    ZERO_METADATA,
    Alignment,
    ItemMetadata,
    PositionBehavior,
    ScrollDirection,
    VisibleRange,
    normalize_alignment,
    normalize_direction,
)

__all__ = [
    "Alignment",
    "EMPTY_RANGE",
    "IndexOutOfRange",
    "InvalidConfig",
    "InvalidSize",
    "ItemMetadata",
    "JsonFormatter",
    "POSITION_PROP",
    "PositionBehavior",
    "SCROLL_PROP",
    "SIZE_PROP",
    "ScrollDirection",
    "VirtualListError",
    "VirtualListLoggingConfig",
    "VisibleRange",
    "ZERO_METADATA",
    "normalize_alignment",
    "normalize_direction",
]
