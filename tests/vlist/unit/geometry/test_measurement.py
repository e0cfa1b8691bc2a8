from __future__ import annotations

import math

import pytest

from tests.vlist.conftest import RecordingSizeGetter
from vlist.api.errors import IndexOutOfRange, InvalidSize
from vlist.api.types import ItemMetadata
from vlist.geometry.measurement import MeasurementCache

SIZES = [10, 20, 30, 10, 5]


def _cache(sizes=SIZES, item_count: int | None = None) -> MeasurementCache:
    return MeasurementCache(
        item_count=len(sizes) if item_count is None else item_count,
        item_size_getter=RecordingSizeGetter(sizes),
    )


def test_offsets_accumulate_from_zero() -> None:
    cache = _cache()
    offsets = [cache.get_size_and_position(i).offset for i in range(5)]
    assert offsets == [0, 10, 30, 60, 70]
    assert cache.get_size_and_position(2) == ItemMetadata(offset=30.0, size=30.0)
    for i in range(1, 5):
        previous = cache.get_size_and_position(i - 1)
        assert cache.get_size_and_position(i).offset == previous.offset + previous.size


def test_total_size_for_fully_measured_list() -> None:
    cache = _cache()
    cache.ensure_measured(4)
    assert cache.get_total_size(15) == 75


def test_total_size_uses_estimate_for_unmeasured_tail() -> None:
    cache = _cache()
    assert cache.get_total_size(15) == 5 * 15
    cache.ensure_measured(1)
    assert cache.get_total_size(15) == 30 + 3 * 15


def test_total_size_never_shrinks_when_actual_sizes_exceed_estimate() -> None:
    cache = _cache([20, 25, 30, 40, 50])
    totals = [cache.get_total_size(20)]
    for index in range(5):
        cache.ensure_measured(index)
        totals.append(cache.get_total_size(20))
    assert totals == sorted(totals)


def test_ensure_measured_is_lazy_and_idempotent() -> None:
    getter = RecordingSizeGetter(SIZES)
    cache = MeasurementCache(item_count=5, item_size_getter=getter)
    assert cache.last_measured_index == -1
    cache.ensure_measured(2)
    cache.ensure_measured(1)
    cache.ensure_measured(2)
    assert getter.calls == [0, 1, 2]
    assert cache.last_measured_index == 2


def test_get_last_measured_returns_zero_sentinel_when_empty() -> None:
    cache = _cache()
    assert cache.get_last_measured() == ItemMetadata(offset=0.0, size=0.0)
    cache.ensure_measured(1)
    assert cache.get_last_measured() == ItemMetadata(offset=10.0, size=20.0)


@pytest.mark.parametrize("index", [-1, 5, 99])
def test_out_of_range_index_fails(index: int) -> None:
    cache = _cache()
    with pytest.raises(IndexOutOfRange):
        cache.get_size_and_position(index)


@pytest.mark.parametrize("bad_size", [0, -3, math.inf, math.nan, "10", None, True])
def test_invalid_size_fails_and_leaves_cache_unchanged(bad_size: object) -> None:
    cache = _cache([10, 20, bad_size, 10])
    cache.ensure_measured(0)
    with pytest.raises(InvalidSize) as excinfo:
        cache.ensure_measured(3)
    assert excinfo.value.index == 2
    assert cache.last_measured_index == 0


def test_invalid_size_on_first_item_keeps_cache_empty() -> None:
    cache = _cache([0, 10])
    with pytest.raises(InvalidSize):
        cache.get_size_and_position(0)
    assert cache.last_measured_index == -1


def test_reset_item_keeps_prefix_and_truncates_tail() -> None:
    getter = RecordingSizeGetter(list(SIZES))
    cache = MeasurementCache(item_count=5, item_size_getter=getter)
    cache.ensure_measured(4)
    before = [cache.get_size_and_position(i) for i in range(2)]

    getter.sizes[2] = 100
    cache.reset_item(2)

    assert cache.last_measured_index == 1
    assert [cache.get_size_and_position(i) for i in range(2)] == before
    assert cache.get_size_and_position(3).offset == 130


def test_reset_item_never_raises_last_measured_index() -> None:
    cache = _cache()
    cache.ensure_measured(1)
    cache.reset_item(3)
    assert cache.last_measured_index == 1


def test_reset_item_clamps_start_index() -> None:
    cache = _cache()
    cache.ensure_measured(4)
    cache.reset_item(-10)
    assert cache.last_measured_index == -1
    cache.ensure_measured(4)
    cache.reset_item(99)
    assert cache.last_measured_index == 3


def test_shrunk_item_count_ignores_measurements_past_bound() -> None:
    cache = _cache()
    cache.ensure_measured(4)
    cache.item_count = 2
    assert cache.effective_last_index == 1
    assert cache.get_total_size(15) == 30
    with pytest.raises(IndexOutOfRange):
        cache.get_size_and_position(3)


def test_empty_list_total_size_is_zero() -> None:
    cache = _cache([], item_count=0)
    assert cache.get_total_size(50) == 0
