from __future__ import annotations

from collections.abc import Sequence

import pytest

from vlist.runtime.config import load_runtime_config


class RecordingSizeGetter:
    def __init__(self, sizes: Sequence[object]) -> None:
        self.sizes = list(sizes)
        self.calls: list[int] = []

    def __call__(self, index: int) -> object:
        self.calls.append(index)
        return self.sizes[index]


class FakeSurface:
    def __init__(self, offset: float = 0.0) -> None:
        self.offset = offset
        self.writes: list[float] = []

    def read_scroll_offset(self) -> float:
        return self.offset

    def write_scroll_offset(self, value: float) -> None:
        self.offset = value
        self.writes.append(value)


class RecordingRenderer:
    def __init__(self) -> None:
        self.calls: list[tuple[int, dict[str, object] | None]] = []

    def __call__(self, index: int, style: dict[str, object] | None) -> str:
        self.calls.append((index, style))
        return f"item-{index}"

    @property
    def rendered_indices(self) -> list[int]:
        return [index for index, _ in self.calls]


@pytest.fixture
def runtime_config():
    return load_runtime_config(env={})
