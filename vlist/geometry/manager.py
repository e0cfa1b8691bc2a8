"""Size and position manager composing cache, estimator, range and scroll lookups."""

from __future__ import annotations

import logging
from numbers import Integral

from vlist.api.errors import InvalidConfig
from vlist.api.types import Alignment, ItemMetadata, VisibleRange
from vlist.geometry.estimator import DEFAULT_ESTIMATED_ITEM_SIZE, Estimator
from vlist.geometry.item_size import ItemSizeGetter
from vlist.geometry.measurement import MeasurementCache
from vlist.geometry.range_finder import get_visible_range
from vlist.geometry.scroll_target import get_offset_for_index

_LOG = logging.getLogger("vlist.geometry")


def validate_item_count(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 0:
        raise InvalidConfig("item_count", value)
    return int(value)


class SizeAndPositionManager:
    """Per-list geometry engine.

    Owns one measurement cache and one estimator. All calls are synchronous
    and must be serialized by the host; nothing here is shared between
    instances.
    """

    def __init__(
        self,
        *,
        item_count: int,
        item_size_getter: ItemSizeGetter,
        estimated_item_size: float | None = None,
        uniform_size: float | None = None,
        default_estimated_item_size: float = DEFAULT_ESTIMATED_ITEM_SIZE,
        trace_queries: bool = False,
    ) -> None:
        self._estimator = Estimator(
            estimated_item_size=estimated_item_size,
            uniform_size=uniform_size,
            default=default_estimated_item_size,
        )
        self._cache = MeasurementCache(
            item_count=validate_item_count(item_count),
            item_size_getter=item_size_getter,
        )
        self._trace_queries = trace_queries

    @property
    def item_count(self) -> int:
        return self._cache.item_count

    @property
    def estimated_item_size(self) -> float:
        return self._estimator.estimate

    @property
    def last_measured_index(self) -> int:
        return self._cache.last_measured_index

    def update_config(
        self,
        *,
        item_count: int | None = None,
        estimated_item_size: float | None = None,
        uniform_size: float | None = None,
    ) -> None:
        """Merge changed configuration fields; measured metadata is kept."""
        next_count = None if item_count is None else validate_item_count(item_count)
        self._estimator.update(
            estimated_item_size=estimated_item_size,
            uniform_size=uniform_size,
        )
        if next_count is not None:
            self._cache.item_count = next_count
        _LOG.debug(
            "update_config item_count=%d estimate=%.2f",
            self._cache.item_count,
            self._estimator.estimate,
        )

    def ensure_measured(self, index: int) -> None:
        self._cache.ensure_measured(index)

    def reset_item(self, start_index: int) -> None:
        self._cache.reset_item(start_index)

    def get_size_and_position(self, index: int) -> ItemMetadata:
        return self._cache.get_size_and_position(index)

    def get_last_measured(self) -> ItemMetadata:
        return self._cache.get_last_measured()

    def get_total_size(self) -> float:
        return self._cache.get_total_size(self._estimator.estimate)

    def get_visible_range(
        self,
        container_size: float,
        offset: float,
        overscan_count: int = 0,
    ) -> VisibleRange:
        visible = get_visible_range(
            self._cache,
            container_size=container_size,
            offset=offset,
            overscan_count=overscan_count,
        )
        if self._trace_queries:
            _LOG.debug(
                "visible_range container=%.2f offset=%.2f overscan=%d start=%d stop=%d",
                container_size,
                offset,
                overscan_count,
                visible.start,
                visible.stop,
            )
        return visible

    def get_offset_for_index(
        self,
        target_index: int,
        align: Alignment | str | None = Alignment.AUTO,
        container_size: float = 0.0,
        current_offset: float = 0.0,
    ) -> float:
        resolved = get_offset_for_index(
            self._cache,
            target_index=target_index,
            align=align,
            container_size=container_size,
            current_offset=current_offset,
        )
        if self._trace_queries:
            _LOG.debug(
                "offset_for_index target=%d align=%s container=%.2f current=%.2f offset=%.2f",
                target_index,
                align,
                container_size,
                current_offset,
                resolved,
            )
        return resolved

    def snapshot(self) -> dict[str, object]:
        """Return a JSON-serialisable view of the measured prefix."""
        return {
            "item_count": self.item_count,
            "estimated_item_size": self.estimated_item_size,
            "last_measured_index": self._cache.effective_last_index,
            "total_size": self.get_total_size(),
            "items": [[item.offset, item.size] for item in self._cache.measured_items()],
        }
