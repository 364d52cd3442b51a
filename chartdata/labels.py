from __future__ import annotations

from collections.abc import Iterable


EMPTY_LABEL_AVERAGE_LENGTH = 1.0


def generate_label_range(start: int, stop: int) -> list[str]:
    """Default numeric labels ``str(i)`` for ``i`` in ``[start, stop)``."""
    return [str(i) for i in range(int(start), int(stop))]


def label_length(label: str) -> int:
    # Width heuristic counts UTF-16 code units, so astral characters count twice.
    return len(label.encode("utf-16-le", "surrogatepass")) // 2


def average_label_length(labels: Iterable[str]) -> float:
    lengths = [label_length(label) for label in labels]
    if not lengths:
        return EMPTY_LABEL_AVERAGE_LENGTH
    return float(sum(lengths)) / float(len(lengths))
