"""Backend-neutral virtual list host over the geometry engine."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import StrEnum
from numbers import Real
from typing import Protocol, TypeAlias

from vlist.api.types import (
    POSITION_PROP,
    SIZE_PROP,
    Alignment,
    PositionBehavior,
    ScrollDirection,
    VisibleRange,
    normalize_direction,
)
from vlist.geometry.estimator import resolve_estimated_item_size
from vlist.geometry.item_size import ItemSizeSpec, make_item_size_getter, uniform_item_size
from vlist.geometry.manager import SizeAndPositionManager
from vlist.runtime.config import ListRuntimeConfig, load_runtime_config
from vlist.runtime.debounce import Debouncer
from vlist.runtime.scheduler import Scheduler

_LOG = logging.getLogger("vlist.runtime.list_view")

ItemStyle: TypeAlias = dict[str, object]
RenderItem: TypeAlias = Callable[[int, ItemStyle | None], object]
RenderEmpty: TypeAlias = Callable[[], object]
ScrollListener: TypeAlias = Callable[[float], None]


class ScrollSurface(Protocol):
    """Scrollable surface the host list is attached to."""

    def read_scroll_offset(self) -> float: ...

    def write_scroll_offset(self, value: float) -> None: ...


class ScrollChangeReason(StrEnum):
    OBSERVED = "observed"
    REQUESTED = "requested"


@dataclass(frozen=True, slots=True)
class VirtualListProps:
    """Host-facing list properties."""

    item_count: int
    item_size: ItemSizeSpec
    height: float
    width: float | None = None
    estimated_item_size: float | None = None
    overscan_count: int | None = None
    scroll_direction: ScrollDirection | str = ScrollDirection.VERTICAL
    position_behavior: PositionBehavior | str = PositionBehavior.ABSOLUTE
    scroll_offset: float | None = None
    scroll_to_index: int | None = None
    scroll_to_alignment: Alignment | str | None = Alignment.AUTO

    @property
    def direction(self) -> ScrollDirection:
        return normalize_direction(self.scroll_direction)

    @property
    def container_size(self) -> float:
        if self.direction is ScrollDirection.VERTICAL:
            return float(self.height)
        return float(self.width or 0.0)


@dataclass(frozen=True, slots=True)
class RenderEdges:
    """Offsets between which scroll events need no re-render."""

    bottom_edge: float = math.inf
    top_edge: float = -math.inf


@dataclass(frozen=True, slots=True)
class RenderPlan:
    """Output of one render pass."""

    items: tuple[object, ...]
    visible: VisibleRange
    inner_size: float
    content_offset: float | None = None
    empty: object | None = None


def _same_item_size(left: ItemSizeSpec, right: ItemSizeSpec) -> bool:
    if isinstance(left, Real) and isinstance(right, Real):
        return left == right
    return left is right


class VirtualListView:
    """Owns scroll state, the rendered-cell memo and the scroll-settle timer.

    Geometry lives in a `SizeAndPositionManager`; the rendered-cell memo is
    dropped when scrolling settles, while the per-index style memo is only
    dropped by `recompute_sizes`.
    """

    def __init__(
        self,
        props: VirtualListProps,
        *,
        render_item: RenderItem,
        surface: ScrollSurface,
        scheduler: Scheduler,
        render_empty: RenderEmpty | None = None,
        on_scroll: ScrollListener | None = None,
        config: ListRuntimeConfig | None = None,
    ) -> None:
        self._config = config or load_runtime_config()
        self._props = props
        self._render_item = render_item
        self._render_empty = render_empty
        self._on_scroll = on_scroll
        self._surface = surface
        self._item_size_getter = make_item_size_getter(props.item_size)
        self._manager = SizeAndPositionManager(
            item_count=props.item_count,
            item_size_getter=lambda index: self._item_size_getter(index),
            estimated_item_size=self._estimated_item_size(props),
            default_estimated_item_size=self._config.default_estimated_item_size,
            trace_queries=self._config.trace_queries,
        )
        self._settle = Debouncer(
            scheduler, self._config.scroll_settle_seconds, self._on_scroll_settled
        )
        self._cell_cache: dict[int, object] = {}
        self._style_cache: dict[int, ItemStyle] = {}
        self._edges = RenderEdges()
        self._last_offset = 0.0
        self._is_scrolling = False
        self._reason = ScrollChangeReason.REQUESTED
        self._offset = 0.0
        self._offset = self._initial_offset(props)

    @property
    def props(self) -> VirtualListProps:
        return self._props

    @property
    def manager(self) -> SizeAndPositionManager:
        return self._manager

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def is_scrolling(self) -> bool:
        return self._is_scrolling

    @property
    def scroll_change_reason(self) -> ScrollChangeReason:
        return self._reason

    @property
    def overscan_count(self) -> int:
        if self._props.overscan_count is None:
            return self._config.default_overscan_count
        return max(0, self._props.overscan_count)

    def mount(self) -> None:
        """Apply the initial scroll request to the surface."""
        props = self._props
        if props.scroll_offset is not None:
            self._surface.write_scroll_offset(props.scroll_offset)
        elif props.scroll_to_index is not None:
            self._surface.write_scroll_offset(self.get_offset_for_index(props.scroll_to_index))

    def update_props(self, next_props: VirtualListProps) -> None:
        """Apply new props, invalidating geometry and re-targeting scroll as needed."""
        previous = self._props
        scroll_props_changed = (
            next_props.scroll_to_index != previous.scroll_to_index
            or next_props.scroll_to_alignment != previous.scroll_to_alignment
        )
        item_props_changed = (
            next_props.item_count != previous.item_count
            or not _same_item_size(next_props.item_size, previous.item_size)
            or next_props.estimated_item_size != previous.estimated_item_size
        )

        if item_props_changed:
            getter = make_item_size_getter(next_props.item_size)
            self._manager.update_config(
                item_count=next_props.item_count,
                estimated_item_size=self._estimated_item_size(next_props),
            )
            self._item_size_getter = getter
            self._props = next_props
            self.recompute_sizes()
        else:
            self._props = next_props

        if next_props.scroll_offset != previous.scroll_offset:
            if next_props.scroll_offset is not None:
                self._request_offset(next_props.scroll_offset)
        elif next_props.scroll_to_index is not None and (scroll_props_changed or item_props_changed):
            self._request_offset(
                self.get_offset_for_index(
                    next_props.scroll_to_index, next_props.scroll_to_alignment
                )
            )

    def scroll_to_index(self, index: int, align: Alignment | str | None = None) -> float:
        """Scroll the surface so `index` lands according to `align`."""
        alignment = self._props.scroll_to_alignment if align is None else align
        offset = self.get_offset_for_index(index, alignment)
        self._request_offset(offset)
        return offset

    def get_offset_for_index(self, index: int, align: Alignment | str | None = None) -> float:
        alignment = self._props.scroll_to_alignment if align is None else align
        return self._manager.get_offset_for_index(
            index,
            alignment,
            self._props.container_size,
            self._offset,
        )

    def handle_scroll(self, *, from_root: bool = True) -> None:
        """Process one scroll event from the surface."""
        offset = self._surface.read_scroll_offset()
        moving_up = offset - self._last_offset < 0
        stale = self._is_scrolling and (
            offset < 0
            or offset == self._offset
            or not from_root
            or (not moving_up and offset < self._edges.top_edge)
            or (moving_up and offset > self._edges.bottom_edge)
        )
        if not stale:
            self._is_scrolling = True
            self._offset = offset
            self._reason = ScrollChangeReason.OBSERVED
            if self._on_scroll is not None:
                self._on_scroll(offset)
            self._last_offset = offset
        self._settle.trigger()

    def recompute_sizes(self, start_index: int = 0) -> None:
        """Invalidate geometry from `start_index` along with memos derived from it."""
        self._manager.reset_item(start_index)
        for cache in (self._style_cache, self._cell_cache):
            for index in [index for index in cache if index >= start_index]:
                del cache[index]

    def get_style(self, index: int) -> ItemStyle:
        style = self._style_cache.get(index)
        if style is not None:
            return style
        direction = self._props.direction
        item = self._manager.get_size_and_position(index)
        style = {
            "position": PositionBehavior.ABSOLUTE.value,
            "left": 0.0,
            "width": "100%",
            SIZE_PROP[direction]: item.size,
            POSITION_PROP[direction]: item.offset,
        }
        self._style_cache[index] = style
        return style

    def render(self) -> RenderPlan:
        """Render the visible slice, reusing memoised cells."""
        props = self._props
        container_size = props.container_size
        visible = self._manager.get_visible_range(container_size, self._offset, self.overscan_count)
        absolute = PositionBehavior(props.position_behavior) is PositionBehavior.ABSOLUTE

        items: list[object] = []
        for index in visible:
            cell = self._cell_cache.get(index)
            if cell is None:
                cell = self._render_item(index, self.get_style(index) if absolute else None)
                self._cell_cache[index] = cell
            items.append(cell)

        empty = None
        content_offset = None
        if items:
            self._edges = RenderEdges(
                bottom_edge=self._start_offset(visible.start + 1),
                top_edge=self._start_offset(visible.stop) - container_size,
            )
            if not absolute:
                content_offset = self._start_offset(visible.start)
        elif self._render_empty is not None:
            empty = self._render_empty()

        return RenderPlan(
            items=tuple(items),
            visible=visible,
            inner_size=self._manager.get_total_size(),
            content_offset=content_offset,
            empty=empty,
        )

    def with_props(self, **changes: object) -> None:
        """Shorthand for `update_props(replace(props, **changes))`."""
        self.update_props(replace(self._props, **changes))

    def _start_offset(self, index: int) -> float:
        return self.get_offset_for_index(index, Alignment.START)

    def _request_offset(self, offset: float) -> None:
        changed = offset != self._offset
        self._offset = offset
        self._reason = ScrollChangeReason.REQUESTED
        if changed:
            self._surface.write_scroll_offset(offset)

    def _initial_offset(self, props: VirtualListProps) -> float:
        if props.scroll_offset:
            return float(props.scroll_offset)
        if props.scroll_to_index is not None:
            return self.get_offset_for_index(props.scroll_to_index)
        return 0.0

    def _estimated_item_size(self, props: VirtualListProps) -> float:
        return resolve_estimated_item_size(
            props.estimated_item_size,
            uniform_item_size(props.item_size),
            default=self._config.default_estimated_item_size,
        )

    def _on_scroll_settled(self) -> None:
        dropped = len(self._cell_cache)
        self._cell_cache.clear()
        self._is_scrolling = False
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug("scroll_settled offset=%.2f cells_dropped=%d", self._offset, dropped)
