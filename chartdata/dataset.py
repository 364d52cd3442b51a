from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Any

from chartdata.entry import Entry
from chartdata.errors import ChartDataError
from chartdata.highlight import Highlight
from chartdata.labels import average_label_length, generate_label_range
from chartdata.series import AXIS_LEFT, AXIS_RIGHT, AxisDependency, Series, coerce_axis


LOGGER = logging.getLogger(__name__)


class Dataset:
    """Shared labels plus the series plotted against them.

    Keeps the cross-series aggregates (global and per-axis bounds, value sum,
    entry count, average label length) in step with every mutation. Additions
    widen the bounds in place; removals rescan every series because a bound
    cannot be shrunk without knowing the runner-up.
    """

    def __init__(self, labels: Iterable[str] | None = None, series: Iterable[Series] | None = None) -> None:
        if isinstance(labels, (str, bytes, bytearray)):
            raise ChartDataError("labels must be an iterable of strings, not a single string")
        self._labels: list[str] = list(labels) if labels is not None else []
        self._series: list[Series] = []
        self._y_min = 0.0
        self._y_max = 0.0
        self._left_axis_min = 0.0
        self._left_axis_max = 0.0
        self._right_axis_min = 0.0
        self._right_axis_max = 0.0
        self._total_value_sum = 0.0
        self._total_entry_count = 0
        self._label_average_length = 1.0
        self.initialize(series if series is not None else [])

    def __repr__(self) -> str:
        return (
            f"Dataset(label_count={self.label_count}, series_count={self.series_count}, "
            f"total_entry_count={self._total_entry_count})"
        )

    def initialize(self, series: Iterable[Series] | None = None) -> None:
        if series is not None:
            self._series = list(series)
        self.check_legal(self._series)
        self.recompute_all()

    def notify_changed(self) -> None:
        self.initialize()

    def check_legal(self, series: Iterable[Series]) -> bool:
        label_count = len(self._labels)
        for s in series:
            if s.entry_count > label_count:
                # Only the first offender is reported.
                LOGGER.warning(
                    "Series %r has %d entries but only %d labels exist",
                    s.label,
                    s.entry_count,
                    label_count,
                )
                return False
        return True

    def recompute_all(self) -> None:
        self.recompute_min_max()
        self.recompute_sum()
        self.recompute_count()
        self.recompute_label_average_length()

    def recompute_min_max(self) -> None:
        if not self._series:
            self._y_min = self._y_max = 0.0
            self._left_axis_min = self._left_axis_max = 0.0
            self._right_axis_min = self._right_axis_max = 0.0
            return

        self._y_min = min(s.value_min for s in self._series)
        self._y_max = max(s.value_max for s in self._series)

        left = [s for s in self._series if s.axis == AXIS_LEFT]
        if left:
            self._left_axis_min = min(s.value_min for s in left)
            self._left_axis_max = max(s.value_max for s in left)

        right = [s for s in self._series if s.axis == AXIS_RIGHT]
        if right:
            self._right_axis_min = min(s.value_min for s in right)
            self._right_axis_max = max(s.value_max for s in right)

        self._apply_axis_fallback()

    def recompute_sum(self) -> None:
        self._total_value_sum = float(sum(abs(s.value_sum) for s in self._series))

    def recompute_count(self) -> None:
        self._total_entry_count = sum(s.entry_count for s in self._series)

    def recompute_label_average_length(self) -> None:
        self._label_average_length = average_label_length(self._labels)

    def _apply_axis_fallback(self) -> None:
        # An axis without series mirrors the populated one.
        if self.first_left() is None:
            self._left_axis_min = self._right_axis_min
            self._left_axis_max = self._right_axis_max
        elif self.first_right() is None:
            self._right_axis_min = self._left_axis_min
            self._right_axis_max = self._left_axis_max

    def _widen(self, axis: AxisDependency, vmin: float, vmax: float) -> None:
        self._y_min = min(self._y_min, vmin)
        self._y_max = max(self._y_max, vmax)
        if axis == AXIS_LEFT:
            self._left_axis_min = min(self._left_axis_min, vmin)
            self._left_axis_max = max(self._left_axis_max, vmax)
        else:
            self._right_axis_min = min(self._right_axis_min, vmin)
            self._right_axis_max = max(self._right_axis_max, vmax)

    def _seed_axis(self, axis: AxisDependency, vmin: float, vmax: float) -> None:
        if axis == AXIS_LEFT:
            self._left_axis_min, self._left_axis_max = vmin, vmax
        else:
            self._right_axis_min, self._right_axis_max = vmin, vmax

    @property
    def y_min(self) -> float:
        return self._y_min

    @property
    def y_max(self) -> float:
        return self._y_max

    @property
    def left_axis_min(self) -> float:
        return self._left_axis_min

    @property
    def left_axis_max(self) -> float:
        return self._left_axis_max

    @property
    def right_axis_min(self) -> float:
        return self._right_axis_min

    @property
    def right_axis_max(self) -> float:
        return self._right_axis_max

    def y_min_for(self, axis: AxisDependency) -> float:
        return self._left_axis_min if coerce_axis(axis) == AXIS_LEFT else self._right_axis_min

    def y_max_for(self, axis: AxisDependency) -> float:
        return self._left_axis_max if coerce_axis(axis) == AXIS_LEFT else self._right_axis_max

    @property
    def total_value_sum(self) -> float:
        """Sum of the absolute per-series value sums."""
        return self._total_value_sum

    @property
    def total_entry_count(self) -> int:
        return self._total_entry_count

    @property
    def label_average_length(self) -> float:
        return self._label_average_length

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self._labels)

    @property
    def label_count(self) -> int:
        return len(self._labels)

    def add_label(self, label: str) -> None:
        self._labels.append(label)

    def remove_label_at(self, index: int) -> bool:
        if index < 0 or index >= len(self._labels):
            LOGGER.debug("remove_label_at ignored out-of-range index %d", index)
            return False
        del self._labels[index]
        return True

    @staticmethod
    def generate_label_range(start: int, stop: int) -> list[str]:
        return generate_label_range(start, stop)

    @property
    def series(self) -> tuple[Series, ...]:
        return tuple(self._series)

    @property
    def series_count(self) -> int:
        return len(self._series)

    def series_at(self, index: int) -> Series | None:
        if index < 0 or index >= len(self._series):
            return None
        return self._series[index]

    def series_labels(self) -> list[str]:
        return [s.label for s in self._series]

    def series_index_by_label(self, label: str, ignore_case: bool = False) -> int:
        if ignore_case:
            wanted = label.casefold()
            for i, s in enumerate(self._series):
                if s.label.casefold() == wanted:
                    return i
        else:
            for i, s in enumerate(self._series):
                if s.label == label:
                    return i
        return -1

    def series_by_label(self, label: str, ignore_case: bool = False) -> Series | None:
        return self.series_at(self.series_index_by_label(label, ignore_case=ignore_case))

    def index_of_series(self, series: Series) -> int:
        for i, s in enumerate(self._series):
            if s is series:
                return i
        return -1

    def series_for_entry(self, entry: Entry) -> Series | None:
        for s in self._series:
            if s.contains(entry):
                return s
        return None

    def contains_series(self, series: Series) -> bool:
        return self.index_of_series(series) >= 0

    def contains_entry(self, entry: Entry) -> bool:
        return self.series_for_entry(entry) is not None

    def first_left(self) -> Series | None:
        for s in self._series:
            if s.axis == AXIS_LEFT:
                return s
        return None

    def first_right(self) -> Series | None:
        for s in self._series:
            if s.axis == AXIS_RIGHT:
                return s
        return None

    def add_series(self, series: Series) -> None:
        self._total_entry_count += series.entry_count
        self._total_value_sum += abs(series.value_sum)

        if not self._series:
            self._y_min, self._y_max = series.value_min, series.value_max
            self._seed_axis(series.axis, series.value_min, series.value_max)
        elif not any(s.axis == series.axis for s in self._series):
            # The axis only mirrored the other one until now.
            self._y_min = min(self._y_min, series.value_min)
            self._y_max = max(self._y_max, series.value_max)
            self._seed_axis(series.axis, series.value_min, series.value_max)
        else:
            self._widen(series.axis, series.value_min, series.value_max)

        self._series.append(series)
        self._apply_axis_fallback()

    def remove_series_at(self, index: int) -> bool:
        if index < 0 or index >= len(self._series):
            LOGGER.debug("remove_series_at ignored out-of-range index %d", index)
            return False
        removed = self._series.pop(index)
        self._total_entry_count -= removed.entry_count
        self._total_value_sum -= abs(removed.value_sum)
        self.recompute_min_max()
        return True

    def remove_series(self, series: Series) -> bool:
        index = self.index_of_series(series)
        if index < 0:
            return False
        return self.remove_series_at(index)

    def clear_values(self) -> None:
        self._series.clear()
        self.notify_changed()

    def add_entry(self, value: float, label_index: int, series_index: int, data: Any = None) -> Entry | None:
        """Append a new entry to the series at ``series_index``.

        Returns the created entry, or ``None`` when the index is out of range.
        """
        target = self.series_at(series_index)
        if target is None:
            LOGGER.warning(
                "add_entry ignored: series_index %d out of range (series_count=%d)",
                series_index,
                len(self._series),
            )
            return None

        entry = Entry(value, label_index, data)
        was_empty = target.entry_count == 0
        old_sum = target.value_sum
        self._total_entry_count += 1
        self._widen(target.axis, entry.value, entry.value)
        self._apply_axis_fallback()
        target.add_entry(entry)
        self._total_value_sum += abs(target.value_sum) - abs(old_sum)
        if was_empty:
            # The empty series contributed a 0.0 seed to the bounds.
            self.recompute_min_max()
        return entry

    def remove_entry(self, entry: Entry | None, series_index: int) -> bool:
        target = self.series_at(series_index)
        if entry is None or target is None:
            return False
        old_sum = target.value_sum
        if not target.remove_entry(entry):
            return False
        self._total_entry_count -= 1
        self._total_value_sum += abs(target.value_sum) - abs(old_sum)
        target.recompute()
        self.recompute_min_max()
        return True

    def remove_entry_by_label_index(self, label_index: int, series_index: int) -> bool:
        target = self.series_at(series_index)
        if target is None:
            return False
        return self.remove_entry(target.entry_at(label_index), series_index)

    def entry_for_highlight(self, series_index: int, label_index: int) -> Entry | None:
        target = self.series_at(series_index)
        if target is None:
            return None
        return target.entry_at(label_index)

    def entry_for(self, highlight: Highlight) -> Entry | None:
        return self.entry_for_highlight(highlight.series_index, highlight.label_index)

    def all_colors(self) -> list[Any]:
        colors: list[Any] = []
        for s in self._series:
            colors.extend(s.colors)
        return colors

    def set_value_formatter(self, formatter: Any) -> None:
        for s in self._series:
            s.value_formatter = formatter

    def set_value_text_color(self, color: Any) -> None:
        if color is None:
            return
        for s in self._series:
            s.value_text_color = color

    def set_value_font(self, font: Any) -> None:
        if font is None:
            return
        for s in self._series:
            s.value_font = font

    def set_draw_values_enabled(self, enabled: bool) -> None:
        for s in self._series:
            s.draw_values_enabled = bool(enabled)
