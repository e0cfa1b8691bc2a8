from __future__ import annotations

import random

from tests.vlist.conftest import RecordingSizeGetter
from vlist.api.types import VisibleRange
from vlist.geometry.measurement import MeasurementCache
from vlist.geometry.range_finder import find_start_index, get_visible_range

SIZES = [10, 20, 30, 10, 5]


def _cache(sizes=SIZES) -> MeasurementCache:
    return MeasurementCache(item_count=len(sizes), item_size_getter=RecordingSizeGetter(sizes))


def test_visible_range_spans_containing_and_boundary_items() -> None:
    cache = _cache()
    assert get_visible_range(cache, container_size=20, offset=25) == VisibleRange(1, 2)


def test_visible_range_empty_list() -> None:
    cache = MeasurementCache(item_count=0, item_size_getter=lambda index: 10)
    visible = get_visible_range(cache, container_size=100, offset=0, overscan_count=3)
    assert visible == VisibleRange(0, -1)
    assert visible.is_empty
    assert list(visible) == []


def test_item_starting_at_offset_contains_it() -> None:
    cache = _cache()
    assert find_start_index(cache, 10) == 1
    assert find_start_index(cache, 30) == 2
    cache.ensure_measured(4)
    assert find_start_index(cache, 10) == 1
    assert find_start_index(cache, 30) == 2


def test_stop_is_item_reaching_viewport_end_exactly() -> None:
    cache = _cache()
    assert get_visible_range(cache, container_size=20, offset=10) == VisibleRange(1, 1)
    assert get_visible_range(cache, container_size=21, offset=10) == VisibleRange(1, 2)


def test_non_positive_container_is_single_item_viewport() -> None:
    cache = _cache()
    assert get_visible_range(cache, container_size=0, offset=35) == VisibleRange(2, 2)
    assert get_visible_range(cache, container_size=-5, offset=0) == VisibleRange(0, 0)


def test_overscan_is_clamped_to_list_bounds() -> None:
    cache = _cache()
    assert get_visible_range(cache, container_size=20, offset=25, overscan_count=1) == VisibleRange(0, 3)
    assert get_visible_range(cache, container_size=20, offset=25, overscan_count=10) == VisibleRange(0, 4)
    assert get_visible_range(cache, container_size=20, offset=25, overscan_count=-2) == VisibleRange(1, 2)


def test_offset_past_end_yields_last_item() -> None:
    cache = _cache()
    assert get_visible_range(cache, container_size=50, offset=500) == VisibleRange(4, 4)


def test_viewport_past_end_stops_at_last_item() -> None:
    cache = _cache()
    assert get_visible_range(cache, container_size=100, offset=0) == VisibleRange(0, 4)


def test_negative_offset_starts_at_first_item() -> None:
    cache = _cache()
    assert get_visible_range(cache, container_size=15, offset=-10) == VisibleRange(0, 0)


def test_measurement_extends_only_as_far_as_needed() -> None:
    getter = RecordingSizeGetter([10] * 10_000)
    cache = MeasurementCache(item_count=10_000, item_size_getter=getter)
    visible = get_visible_range(cache, container_size=50, offset=1_000)
    assert visible == VisibleRange(100, 104)
    assert cache.last_measured_index == 104
    calls = len(getter.calls)

    assert get_visible_range(cache, container_size=50, offset=500) == VisibleRange(50, 54)
    assert len(getter.calls) == calls


def test_range_containment_for_variable_sizes() -> None:
    rng = random.Random(7)
    sizes = [rng.randint(1, 40) for _ in range(2_000)]
    cache = _cache(sizes)
    offsets = [0]
    for size in sizes[:-1]:
        offsets.append(offsets[-1] + size)
    total = offsets[-1] + sizes[-1]

    for _ in range(300):
        offset = rng.uniform(0, total - 1)
        container = rng.uniform(1, 400)
        visible = get_visible_range(cache, container_size=container, offset=offset)
        start, stop = visible.start, visible.stop
        assert offsets[start] <= offset < offsets[start] + sizes[start]
        if offset + container <= total:
            assert offsets[stop] < offset + container <= offsets[stop] + sizes[stop]
        else:
            assert stop == len(sizes) - 1


def test_range_after_partial_reset_uses_new_sizes() -> None:
    getter = RecordingSizeGetter(list(SIZES))
    cache = MeasurementCache(item_count=5, item_size_getter=getter)
    cache.ensure_measured(4)
    getter.sizes[1] = 50
    cache.reset_item(1)
    assert get_visible_range(cache, container_size=10, offset=55) == VisibleRange(1, 2)
