# synthseries/__init__.py
"""Synthetic time series assembled from composable signal generators."""

from .core import (
    DEFAULT_CATALOG,
    Category,
    GeneratorCatalog,
    SeriesConfig,
    CollectionConfig,
    InvalidOption,
    UnknownGeneratorType,
    MalformedOperatorNode,
)
from .generators import Generator
from .composition import (
    Operator,
    Compositor,
    BothPresent,
    LeftOnly,
    RightOnly,
    NestedLeft,
    NestedRight,
)
from .series import (
    Component,
    TimeSeries,
    TimeSeriesCollection,
    to_csv_header,
    to_csv_rows,
    to_chart_data,
    to_frame,
)

__version__ = "0.1.0"

__all__ = [
    'DEFAULT_CATALOG',
    'Category',
    'GeneratorCatalog',
    'SeriesConfig',
    'CollectionConfig',
    'InvalidOption',
    'UnknownGeneratorType',
    'MalformedOperatorNode',
    'Generator',
    'Operator',
    'Compositor',
    'BothPresent',
    'LeftOnly',
    'RightOnly',
    'NestedLeft',
    'NestedRight',
    'Component',
    'TimeSeries',
    'TimeSeriesCollection',
    'to_csv_header',
    'to_csv_rows',
    'to_chart_data',
    'to_frame',
]
