"""Public geometry types shared by the engine and host layers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class ItemMetadata:
    """Offset and size of one item along the scroll axis."""

    offset: float
    size: float

    @property
    def end(self) -> float:
        """Return the trailing edge of the item."""
        return self.offset + self.size


ZERO_METADATA = ItemMetadata(offset=0.0, size=0.0)


@dataclass(frozen=True, slots=True)
class VisibleRange:
    """Inclusive index range to render; `(0, -1)` when empty."""

    start: int
    stop: int

    @property
    def is_empty(self) -> bool:
        return self.stop < self.start

    def __len__(self) -> int:
        return max(0, self.stop - self.start + 1)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.stop + 1))


EMPTY_RANGE = VisibleRange(start=0, stop=-1)


class Alignment(StrEnum):
    """Where a scroll target lands inside the viewport."""

    START = "start"
    END = "end"
    CENTER = "center"
    AUTO = "auto"


class ScrollDirection(StrEnum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class PositionBehavior(StrEnum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


SIZE_PROP: dict[ScrollDirection, str] = {
    ScrollDirection.VERTICAL: "height",
    ScrollDirection.HORIZONTAL: "width",
}
POSITION_PROP: dict[ScrollDirection, str] = {
    ScrollDirection.VERTICAL: "top",
    ScrollDirection.HORIZONTAL: "left",
}
SCROLL_PROP: dict[ScrollDirection, str] = {
    ScrollDirection.VERTICAL: "scroll_top",
    ScrollDirection.HORIZONTAL: "scroll_left",
}


def normalize_alignment(value: Alignment | str | None) -> Alignment:
    """Resolve an alignment name; `None` means auto."""
    if value is None:
        return Alignment.AUTO
    if isinstance(value, Alignment):
        return value
    normalized = str(value).strip().lower()
    try:
        return Alignment(normalized)
    except ValueError:
        raise ValueError(f"unknown alignment: {value!r}") from None


def normalize_direction(value: ScrollDirection | str) -> ScrollDirection:
    """Resolve a scroll direction name."""
    if isinstance(value, ScrollDirection):
        return value
    normalized = str(value).strip().lower()
    try:
        return ScrollDirection(normalized)
    except ValueError:
        raise ValueError(f"unknown scroll direction: {value!r}") from None
