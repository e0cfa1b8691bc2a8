"""Geometry engine: measurement, estimation, visible range and scroll targets."""

from vlist.geometry.estimator import DEFAULT_ESTIMATED_ITEM_SIZE, Estimator, resolve_estimated_item_size
from vlist.geometry.item_size import make_item_size_getter, uniform_item_size
from vlist.geometry.manager import SizeAndPositionManager
from vlist.geometry.measurement import MeasurementCache
from vlist.geometry.range_finder import get_visible_range
from vlist.geometry.scroll_target import clamp_index, get_offset_for_index

__all__ = [
    "DEFAULT_ESTIMATED_ITEM_SIZE",
    "Estimator",
    "MeasurementCache",
    "SizeAndPositionManager",
    "clamp_index",
    "get_offset_for_index",
    "get_visible_range",
    "make_item_size_getter",
    "resolve_estimated_item_size",
    "uniform_item_size",
]
