"""Item size specifications accepted from host layers."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from numbers import Real
from typing import TypeAlias

from vlist.api.errors import InvalidSize

ItemSizeGetter: TypeAlias = Callable[[int], float]
ItemSizeSpec: TypeAlias = float | Sequence[float] | ItemSizeGetter


def is_valid_size(value: object) -> bool:
    """Return whether a value is a usable positive, finite extent."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value) and value > 0


def uniform_item_size(item_size: ItemSizeSpec) -> float | None:
    """Return the uniform size when `item_size` is a single number."""
    if is_valid_size(item_size):
        return float(item_size)  # type: ignore[arg-type]
    return None


def make_item_size_getter(item_size: ItemSizeSpec) -> ItemSizeGetter:
    """Build an index -> size getter from a number, sequence or callable."""
    if callable(item_size):
        return item_size
    if isinstance(item_size, Sequence) and not isinstance(item_size, (str, bytes)):
        sizes = item_size

        def _from_sequence(index: int) -> float:
            if index >= len(sizes):
                raise InvalidSize(index, None)
            return sizes[index]

        return _from_sequence
    if isinstance(item_size, bool) or not isinstance(item_size, Real):
        raise TypeError(f"unsupported item_size: {item_size!r}")
    uniform = item_size
    return lambda index: uniform
