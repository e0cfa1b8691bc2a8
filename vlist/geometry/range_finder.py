"""Visible index range lookup over a lazily measured cache."""

from __future__ import annotations

from collections.abc import Callable

from vlist.api.types import EMPTY_RANGE, VisibleRange
from vlist.geometry.measurement import MeasurementCache


def find_start_index(cache: MeasurementCache, offset: float) -> int:
    """Return the index whose half-open span `[offset, end)` contains `offset`.

    Binary search is only valid over the measured prefix; past it the cache
    is extended one index at a time until the containing item is found or
    the list runs out, in which case the last index is returned.
    """
    last = cache.effective_last_index
    if last >= 0:
        index = cache.first_index_ending_after(offset, hi=last + 1)
        if index <= last:
            return index
    return _extend_until(cache, last + 1, lambda end: end > offset)


def find_stop_index(cache: MeasurementCache, start: int, boundary: float) -> int:
    """Return the first index from `start` whose end reaches `boundary`."""
    last = cache.effective_last_index
    if start <= last:
        index = cache.first_index_ending_at_or_after(boundary, lo=start, hi=last + 1)
        if index <= last:
            return index
        start = last + 1
    return _extend_until(cache, start, lambda end: end >= boundary)


def _extend_until(
    cache: MeasurementCache, first: int, reached: Callable[[float], bool]
) -> int:
    final = cache.item_count - 1
    for index in range(first, final + 1):
        if reached(cache.get_size_and_position(index).end):
            return index
    return final


def get_visible_range(
    cache: MeasurementCache,
    *,
    container_size: float,
    offset: float,
    overscan_count: int = 0,
) -> VisibleRange:
    """Return the inclusive range of items to render, widened by overscan."""
    item_count = cache.item_count
    if item_count <= 0:
        return EMPTY_RANGE
    start = find_start_index(cache, offset)
    if container_size <= 0:
        stop = start
    else:
        stop = find_stop_index(cache, start, offset + container_size)
    overscan = max(0, int(overscan_count))
    return VisibleRange(
        start=max(0, start - overscan),
        stop=min(item_count - 1, stop + overscan),
    )
