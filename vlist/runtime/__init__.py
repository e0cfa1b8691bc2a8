"""Host runtime: configuration, logging, scheduling and the list view."""

from vlist.runtime.config import ListRuntimeConfig, load_runtime_config
from vlist.runtime.debounce import Debouncer
from vlist.runtime.list_view import (
    RenderPlan,
    ScrollChangeReason,
    ScrollSurface,
    VirtualListProps,
    VirtualListView,
)
from vlist.runtime.logging import configure_logging, setup_logging, shutdown_logging
from vlist.runtime.scheduler import Scheduler

__all__ = [
    "Debouncer",
    "ListRuntimeConfig",
    "RenderPlan",
    "Scheduler",
    "ScrollChangeReason",
    "ScrollSurface",
    "VirtualListProps",
    "VirtualListView",
    "configure_logging",
    "load_runtime_config",
    "setup_logging",
    "shutdown_logging",
]
