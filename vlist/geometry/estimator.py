"""Fallback per-item size for unmeasured indices."""

from __future__ import annotations

import math
from numbers import Real

from vlist.api.errors import InvalidConfig

DEFAULT_ESTIMATED_ITEM_SIZE = 50.0


def validate_estimated_item_size(value: object) -> float:
    """Return `value` as float or raise `InvalidConfig` when not positive and finite."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidConfig("estimated_item_size", value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfig("estimated_item_size", value)
    return float(value)


def resolve_estimated_item_size(
    estimated_item_size: float | None,
    uniform_size: float | None,
    *,
    default: float = DEFAULT_ESTIMATED_ITEM_SIZE,
) -> float:
    """Pick the explicit estimate, then a uniform item size, then the default."""
    if estimated_item_size is not None:
        return validate_estimated_item_size(estimated_item_size)
    if uniform_size is not None and uniform_size > 0:
        return float(uniform_size)
    return float(default)


class Estimator:
    """Holds the effective estimate for one configuration."""

    def __init__(
        self,
        *,
        estimated_item_size: float | None = None,
        uniform_size: float | None = None,
        default: float = DEFAULT_ESTIMATED_ITEM_SIZE,
    ) -> None:
        self._default = validate_estimated_item_size(default)
        self._estimated_item_size = estimated_item_size
        self._uniform_size = uniform_size
        self._estimate = resolve_estimated_item_size(
            estimated_item_size, uniform_size, default=self._default
        )

    @property
    def estimate(self) -> float:
        return self._estimate

    def update(
        self,
        *,
        estimated_item_size: float | None = None,
        uniform_size: float | None = None,
    ) -> float:
        """Re-resolve after a configuration change and return the new estimate."""
        estimate = resolve_estimated_item_size(
            estimated_item_size if estimated_item_size is not None else self._estimated_item_size,
            uniform_size if uniform_size is not None else self._uniform_size,
            default=self._default,
        )
        if estimated_item_size is not None:
            self._estimated_item_size = estimated_item_size
        if uniform_size is not None:
            self._uniform_size = uniform_size
        self._estimate = estimate
        return estimate
