from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from chartdata.entry import Entry
from chartdata.errors import ChartDataError
from chartdata.series import AXIS_LEFT, DEFAULT_SERIES_LABEL, AxisDependency, Series, SeriesStyle


def series_from_values(
    values: Any,
    *,
    label_indices: Any = None,
    label: str = DEFAULT_SERIES_LABEL,
    axis: AxisDependency = AXIS_LEFT,
    style: SeriesStyle | None = None,
) -> Series:
    y_arr = _coerce_1d_numeric(values, label="values")
    if y_arr.size == 0:
        raise ChartDataError("empty series")

    if label_indices is None:
        idx_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        idx_arr = _coerce_1d_numeric(label_indices, label="label_indices")

    if idx_arr.shape != y_arr.shape:
        raise ChartDataError(f"values and label_indices length mismatch: {y_arr.size} != {idx_arr.size}")
    if not np.all(np.isfinite(idx_arr)) or not np.all(idx_arr == np.floor(idx_arr)):
        raise ChartDataError("label_indices must be whole numbers")

    mask = np.isfinite(y_arr)
    if not np.any(mask):
        raise ChartDataError("series contains no finite points")

    entries = [
        Entry(float(v), int(i))
        for v, i in zip(y_arr[mask].tolist(), idx_arr[mask].tolist(), strict=True)
    ]
    return Series(entries, label, axis=axis, style=style)


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    # pandas.Series and similar array containers
    to_numpy = getattr(value, "to_numpy", None)
    if callable(to_numpy):
        arr = np.asarray(to_numpy())
        if arr.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(arr, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if not _is_flat(value):
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")


def _is_flat(value: Sequence[Any]) -> bool:
    return not any(isinstance(v, Sequence) and not isinstance(v, (str, bytes, bytearray)) for v in value)


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        if isinstance(raw, (str, bytes)):
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
