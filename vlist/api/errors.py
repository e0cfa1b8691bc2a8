"""Error kinds raised by the geometry engine."""

from __future__ import annotations


class VirtualListError(Exception):
    """Base class for geometry engine failures."""


class IndexOutOfRange(VirtualListError, IndexError):
    """Index outside `[0, item_count)` passed to an index-taking operation."""

    def __init__(self, index: int, item_count: int) -> None:
        super().__init__(f"index {index} out of range for item_count={item_count}")
        self.index = index
        self.item_count = item_count


class InvalidSize(VirtualListError, ValueError):
    """Item size getter returned a non-positive, non-finite or non-numeric value."""

    def __init__(self, index: int, size: object) -> None:
        super().__init__(f"invalid size {size!r} for index {index}")
        self.index = index
        self.size = size


class InvalidConfig(VirtualListError, ValueError):
    """Negative item count or non-positive estimated item size."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"invalid {field}: {value!r}")
        self.field = field
        self.value = value
