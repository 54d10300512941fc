# synthseries/series/__init__.py
"""
Orchestration layer: components with cached buffers, the series and
collection orchestrators, and read-only export projections.
"""

from .component import Component
from .series import TimeSeries
from .collection import TimeSeriesCollection
from .options import date_axis
from .export import to_csv_header, to_csv_rows, to_chart_data, to_frame

__all__ = [
    "Component",
    "TimeSeries",
    "TimeSeriesCollection",
    "date_axis",

    # Projections
    "to_csv_header",
    "to_csv_rows",
    "to_chart_data",
    "to_frame",
]
