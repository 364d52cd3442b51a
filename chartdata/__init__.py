from chartdata.adapters.normalize import series_from_values
from chartdata.dataset import Dataset
from chartdata.entry import Entry
from chartdata.errors import ChartDataError
from chartdata.highlight import Highlight
from chartdata.labels import average_label_length, generate_label_range, label_length
from chartdata.series import AXIS_LEFT, AXIS_RIGHT, AxisDependency, Series, SeriesStyle

__all__ = [
    "AXIS_LEFT",
    "AXIS_RIGHT",
    "AxisDependency",
    "ChartDataError",
    "Dataset",
    "Entry",
    "Highlight",
    "Series",
    "SeriesStyle",
    "average_label_length",
    "generate_label_range",
    "label_length",
    "series_from_values",
]
