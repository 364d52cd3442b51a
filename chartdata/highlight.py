from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Highlight:
    series_index: int
    label_index: int
