"""Lazily filled offset/size cache for list items."""

from __future__ import annotations

import logging
from bisect import bisect_left, bisect_right

from vlist.api.errors import IndexOutOfRange, InvalidSize
from vlist.api.types import ZERO_METADATA, ItemMetadata
from vlist.geometry.item_size import ItemSizeGetter, is_valid_size

_LOG = logging.getLogger("vlist.geometry")


def _item_end(item: ItemMetadata) -> float:
    return item.offset + item.size


class MeasurementCache:
    """Contiguous `ItemMetadata` for indices `0..last_measured_index`.

    Sizes are requested from `item_size_getter` in index order and never
    guessed. The getter must be deterministic for a fixed configuration;
    when sizes change the owner calls `reset_item` from the first changed
    index.
    """

    def __init__(self, *, item_count: int, item_size_getter: ItemSizeGetter) -> None:
        self._item_count = item_count
        self._item_size_getter = item_size_getter
        self._items: list[ItemMetadata] = []

    @property
    def item_count(self) -> int:
        return self._item_count

    @item_count.setter
    def item_count(self, value: int) -> None:
        self._item_count = value

    @property
    def last_measured_index(self) -> int:
        return len(self._items) - 1

    @property
    def effective_last_index(self) -> int:
        """Highest measured index still inside `[0, item_count)`."""
        return min(len(self._items), self._item_count) - 1

    def check_index(self, index: int) -> None:
        if index < 0 or index >= self._item_count:
            raise IndexOutOfRange(index, self._item_count)

    def ensure_measured(self, index: int) -> None:
        """Measure every item up to and including `index`."""
        self.check_index(index)
        first = len(self._items)
        if index < first:
            return
        offset = self._items[-1].end if self._items else 0.0
        pending: list[ItemMetadata] = []
        for position in range(first, index + 1):
            size = self._item_size_getter(position)
            if not is_valid_size(size):
                raise InvalidSize(position, size)
            item = ItemMetadata(offset=offset, size=float(size))
            pending.append(item)
            offset = item.end
        self._items.extend(pending)
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug("measure_batch start=%d stop=%d extent=%.2f", first, index, offset)

    def get_size_and_position(self, index: int) -> ItemMetadata:
        self.ensure_measured(index)
        return self._items[index]

    def get_last_measured(self) -> ItemMetadata:
        last = self.effective_last_index
        if last < 0:
            return ZERO_METADATA
        return self._items[last]

    def reset_item(self, start_index: int) -> None:
        """Drop metadata at and after `start_index`."""
        start = max(0, min(start_index, self._item_count - 1))
        dropped = max(0, len(self._items) - start)
        del self._items[start:]
        if dropped and _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug("reset_item start=%d dropped=%d", start, dropped)

    def get_total_size(self, estimated_item_size: float) -> float:
        """Measured extent plus the estimate for every unmeasured item."""
        last = self.effective_last_index
        unmeasured_count = max(0, self._item_count - 1 - last)
        return self.get_last_measured().end + unmeasured_count * estimated_item_size

    def first_index_ending_after(self, value: float, *, hi: int) -> int:
        """Smallest measured index `< hi` whose end is strictly past `value`.

        Returns `hi` when no such index exists.
        """
        return bisect_right(self._items, value, 0, hi, key=_item_end)

    def first_index_ending_at_or_after(self, value: float, *, lo: int, hi: int) -> int:
        """Smallest measured index in `[lo, hi)` whose end reaches `value`."""
        return bisect_left(self._items, value, lo, hi, key=_item_end)

    def measured_items(self) -> list[ItemMetadata]:
        return list(self._items[: self.effective_last_index + 1])
