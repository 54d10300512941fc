# synthseries/series/export.py
"""
Pure projections of generated data for export and charting.

Nothing here takes part in composition; every function regenerates a stale
series or collection first and then only reads ``data_x`` / ``data_y``.
"""
from typing import Any, Dict, List, Union

import numpy as np
import pandas as pd

from synthseries.core.types import DateAxis, Values
from .collection import TimeSeriesCollection
from .options import format_date
from .series import TimeSeries

Exportable = Union[TimeSeries, TimeSeriesCollection]

DATE_FORMAT = "%Y-%m-%d"
RESULT_ID = "result"


def _fresh(obj: Exportable) -> Exportable:
    if obj.is_stale:
        obj.regenerate()
    return obj


def _format_axis(axis: DateAxis, fmt: str) -> List[Any]:
    if fmt == "milliseconds":
        return axis.astype("datetime64[ms]").astype(np.int64).tolist()
    index = pd.DatetimeIndex(axis)
    keys = list(index.strftime(fmt))
    # several samples per day collapse under a date-only pattern
    if len(set(keys)) < len(keys):
        keys = [format_date(ts) for ts in index]
    return keys


def _pairs(axis: DateAxis, values: Values) -> List[tuple]:
    return list(zip(pd.DatetimeIndex(axis), values.tolist()))


def to_csv_header(obj: Exportable, fmt: str = DATE_FORMAT) -> List[Any]:
    """
    Formatted dates of the axis.

    ``fmt`` is a strftime pattern, or ``"milliseconds"`` for epoch milliseconds.
    When the pattern maps two samples to the same key, ISO timestamps are used
    for sub-daily points instead.
    """
    return _format_axis(_fresh(obj).data_x, fmt)


def to_csv_rows(obj: Exportable, fmt: str = DATE_FORMAT) -> List[Dict[Any, float]]:
    """One ``{date: value}`` row per series."""
    obj = _fresh(obj)
    members = obj.series if isinstance(obj, TimeSeriesCollection) else [obj]
    rows = []
    for member in members:
        keys = _format_axis(member.data_x, fmt)
        rows.append(dict(zip(keys, member.data_y.tolist())))
    return rows


def to_chart_data(obj: Exportable, opacity: float = 0.25) -> List[Dict[str, Any]]:
    """
    Chart-ready series: one entry per component plus a trailing composite.

    Each entry is ``{id, color, opacity, values}`` where ``values`` holds
    ``(timestamp, value)`` pairs and ``color`` is the generator category tag.
    For a collection, entries carry the owning ``series`` id as well.
    """
    obj = _fresh(obj)
    if isinstance(obj, TimeSeriesCollection):
        data = []
        for member in obj.series:
            for entry in to_chart_data(member, opacity):
                entry["series"] = member.id
                data.append(entry)
        return data

    data = [
        {
            "id": component.id,
            "color": component.generator.category,
            "opacity": opacity,
            "values": _pairs(obj.data_x, values),
        }
        for component, values in obj.component_series()
    ]
    data.append({
        "id": RESULT_ID,
        "color": RESULT_ID,
        "opacity": 1,
        "values": _pairs(obj.data_x, obj.data_y),
    })
    return data


def to_frame(obj: Exportable) -> pd.DataFrame:
    """
    DataFrame indexed by date.

    A series yields one column per component id plus ``"result"``; a
    collection yields one column per member name.
    """
    obj = _fresh(obj)
    index = pd.DatetimeIndex(obj.data_x, name="date")
    if isinstance(obj, TimeSeriesCollection):
        columns = {member.name: member.data_y for member in obj.series}
    else:
        columns = {component.id: values for component, values in obj.component_series()}
        columns[RESULT_ID] = obj.data_y
    return pd.DataFrame(columns, index=index)
