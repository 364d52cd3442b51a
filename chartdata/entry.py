from __future__ import annotations

from dataclasses import dataclass
import operator
from typing import Any

from chartdata.errors import ChartDataError


@dataclass(frozen=True, eq=False)
class Entry:
    """One data point: a value placed at an index of the shared labels.

    Entries compare by identity, so two points with the same value and label
    index are still distinct when removing or looking them up.
    """

    value: float
    label_index: int
    data: Any = None

    def __post_init__(self) -> None:
        if isinstance(self.value, (str, bytes, bytearray)):
            raise ChartDataError(f"entry value must be numeric: {self.value!r}")
        try:
            value = float(self.value)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"entry value must be numeric: {self.value!r}") from exc
        if isinstance(self.label_index, bool):
            raise ChartDataError("label_index must be an int, not bool")
        try:
            label_index = operator.index(self.label_index)
        except TypeError as exc:
            raise ChartDataError(f"label_index must be an int: {self.label_index!r}") from exc
        # frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "label_index", label_index)
