from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when chart data is constructed from malformed input."""
