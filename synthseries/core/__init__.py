# synthseries/core/__init__.py
"""
Core layer: generator catalog, series configuration, error taxonomy and
type aliases. Pure data; no generation logic lives here.
"""

from .catalog import (
    Category,
    Validator,
    OptionSpec,
    GeneratorSpec,
    GeneratorCatalog,
    DEFAULT_CATALOG,
    build_default_catalog,
)
from .config import SeriesConfig, CollectionConfig
from .errors import (
    SynthSeriesError,
    InvalidOption,
    UnknownGeneratorType,
    MalformedOperatorNode,
)

__all__ = [
    # Catalog
    "Category",
    "Validator",
    "OptionSpec",
    "GeneratorSpec",
    "GeneratorCatalog",
    "DEFAULT_CATALOG",
    "build_default_catalog",

    # Configs
    "SeriesConfig",
    "CollectionConfig",

    # Errors
    "SynthSeriesError",
    "InvalidOption",
    "UnknownGeneratorType",
    "MalformedOperatorNode",
]
