"""Runtime configuration sourced from environment."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

from vlist.geometry.estimator import DEFAULT_ESTIMATED_ITEM_SIZE

DEFAULT_OVERSCAN_COUNT = 3
DEFAULT_SCROLL_SETTLE_MS = 150.0


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return minimum
    return value


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    if minimum is not None and value < minimum:
        return minimum
    return value


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("VLIST_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


@dataclass(frozen=True, slots=True)
class ListRuntimeConfig:
    """Immutable list runtime configuration."""

    log_level: str
    log_format: str
    log_file: str | None
    default_overscan_count: int
    default_estimated_item_size: float
    scroll_settle_ms: float
    trace_queries: bool

    @property
    def scroll_settle_seconds(self) -> float:
        return self.scroll_settle_ms / 1000.0


def load_runtime_config(env: Mapping[str, str] | None = None) -> ListRuntimeConfig:
    """Load immutable runtime configuration from env vars."""
    estimated = _float(
        "VLIST_DEFAULT_ESTIMATED_ITEM_SIZE", DEFAULT_ESTIMATED_ITEM_SIZE, env=env
    )
    if estimated <= 0:
        estimated = DEFAULT_ESTIMATED_ITEM_SIZE
    log_format = (_raw("VLIST_LOG_FORMAT", env=env) or "text").strip().lower()
    log_file = (_raw("VLIST_LOG_FILE", env=env) or "").strip() or None
    return ListRuntimeConfig(
        log_level=resolve_log_level_name(env=env),
        log_format=log_format if log_format in {"text", "json"} else "text",
        log_file=log_file,
        default_overscan_count=_int(
            "VLIST_DEFAULT_OVERSCAN", DEFAULT_OVERSCAN_COUNT, minimum=0, env=env
        ),
        default_estimated_item_size=estimated,
        scroll_settle_ms=_float(
            "VLIST_SCROLL_SETTLE_MS", DEFAULT_SCROLL_SETTLE_MS, minimum=0.0, env=env
        ),
        trace_queries=_flag("VLIST_TRACE_QUERIES", False, env=env),
    )
