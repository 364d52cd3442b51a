from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Literal

import numpy as np

from chartdata.entry import Entry
from chartdata.errors import ChartDataError


AxisDependency = Literal["left", "right"]
RGBA = tuple[int, int, int, int]

AXIS_LEFT: AxisDependency = "left"
AXIS_RIGHT: AxisDependency = "right"
DEFAULT_SERIES_LABEL = "DataSet"
DEFAULT_SERIES_COLOR: RGBA = (62, 149, 255, 255)
DEFAULT_VALUE_TEXT_COLOR: RGBA = (0, 0, 0, 255)


def coerce_axis(axis: str) -> AxisDependency:
    if axis == AXIS_LEFT or axis == AXIS_RIGHT:
        return axis
    raise ChartDataError(f"axis must be 'left' or 'right': {axis!r}")


@dataclass(frozen=True)
class SeriesStyle:
    """Initial styling handed to the rendering layer; the core never reads it."""

    colors: tuple[RGBA, ...] = (DEFAULT_SERIES_COLOR,)
    value_formatter: Any = None
    value_text_color: RGBA = DEFAULT_VALUE_TEXT_COLOR
    value_font: Any = None
    draw_values_enabled: bool = True


class Series:
    """An ordered run of entries sharing a label and an axis.

    ``value_min``, ``value_max``, ``value_sum`` and ``entry_count`` track the
    current entries. Appends update them in O(1); ``remove_entry_at`` and
    ``remove_entry`` only adjust the sum and count, so call ``recompute()``
    afterwards when exact bounds matter. ``Dataset`` does this for you.
    """

    def __init__(
        self,
        entries: Iterable[Entry] | None = None,
        label: str = DEFAULT_SERIES_LABEL,
        *,
        axis: AxisDependency = AXIS_LEFT,
        style: SeriesStyle | None = None,
    ) -> None:
        style = style or SeriesStyle()
        self.label = label
        self.axis = coerce_axis(axis)
        self.colors: list[Any] = list(style.colors)
        self.value_formatter = style.value_formatter
        self.value_text_color = style.value_text_color
        self.value_font = style.value_font
        self.draw_values_enabled = style.draw_values_enabled

        self._entries: list[Entry] = list(entries) if entries is not None else []
        self._value_min = 0.0
        self._value_max = 0.0
        self._value_sum = 0.0
        self.recompute()

    def __repr__(self) -> str:
        return f"Series(label={self.label!r}, axis={self.axis!r}, entry_count={self.entry_count})"

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    @property
    def value_min(self) -> float:
        return self._value_min

    @property
    def value_max(self) -> float:
        return self._value_max

    @property
    def value_sum(self) -> float:
        return self._value_sum

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    def values(self) -> np.ndarray:
        return np.fromiter((e.value for e in self._entries), dtype=np.float64, count=len(self._entries))

    def recompute(self) -> None:
        vals = self.values()
        if vals.size == 0:
            self._value_min = 0.0
            self._value_max = 0.0
            self._value_sum = 0.0
            return
        self._value_min = float(np.min(vals))
        self._value_max = float(np.max(vals))
        self._value_sum = float(np.sum(vals))

    def add_entry(self, entry: Entry) -> None:
        val = entry.value
        if not self._entries:
            self._value_min = val
            self._value_max = val
        else:
            if val < self._value_min:
                self._value_min = val
            if val > self._value_max:
                self._value_max = val
        self._value_sum += val
        self._entries.append(entry)

    def entry_at(self, label_index: int) -> Entry | None:
        for entry in self._entries:
            if entry.label_index == label_index:
                return entry
        return None

    def entry_index(self, entry: Entry) -> int:
        for i, candidate in enumerate(self._entries):
            if candidate is entry:
                return i
        return -1

    def contains(self, entry: Entry) -> bool:
        return self.entry_index(entry) >= 0

    def remove_entry_at(self, label_index: int) -> bool:
        """Remove the first entry at ``label_index``.

        Bounds are left untouched; the removed value may have been the
        extremum, so follow up with ``recompute()``.
        """
        entry = self.entry_at(label_index)
        if entry is None:
            return False
        return self.remove_entry(entry)

    def remove_entry(self, entry: Entry) -> bool:
        idx = self.entry_index(entry)
        if idx < 0:
            return False
        del self._entries[idx]
        self._value_sum -= entry.value
        if not self._entries:
            self._value_sum = 0.0
        return True
