"""Scroll offset resolution for programmatic scroll-to-index."""

from __future__ import annotations

from vlist.api.types import Alignment, normalize_alignment
from vlist.geometry.measurement import MeasurementCache


def clamp_index(index: int, item_count: int) -> int:
    """Clamp a target index to `[0, item_count - 1]`."""
    return max(0, min(index, item_count - 1))


def get_offset_for_index(
    cache: MeasurementCache,
    *,
    target_index: int,
    align: Alignment | str | None = Alignment.AUTO,
    container_size: float,
    current_offset: float,
) -> float:
    """Return the scroll offset that places `target_index` according to `align`.

    The result is not clamped to the scrollable extent; the surface that
    applies it owns the live bounds.
    """
    alignment = normalize_alignment(align)
    if cache.item_count <= 0:
        return 0.0
    item = cache.get_size_and_position(clamp_index(target_index, cache.item_count))

    if alignment is Alignment.AUTO:
        fully_visible = (
            item.offset >= current_offset and item.end <= current_offset + container_size
        )
        if fully_visible:
            return current_offset
        alignment = Alignment.START if item.offset < current_offset else Alignment.END

    if alignment is Alignment.START:
        return item.offset
    if alignment is Alignment.END:
        return item.offset - container_size + item.size
    return item.offset - (container_size - item.size) / 2
