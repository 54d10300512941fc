# synthseries/series/options.py
"""
Series-wide options shared by a single series and a collection.

Option changes follow a two-phase contract: ``apply_option`` mutates state
and reports whether the data must be regenerated; ``set_option`` and
``set_options`` regenerate at most once per call.

Rules:
- ``min`` only updates when strictly below ``max``; ``max`` only when strictly above ``min``
- ``start`` / ``end`` only update when ``start < end`` still holds
- ``samples`` is rounded to the nearest integer and clamped to ≥ 3
- ``dynamicRange=False`` snapshots the current data extent as fixed bounds

Rejected values are dropped silently; the prior value is kept.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np
import pandas as pd
from loguru import logger

from synthseries.core.config import SeriesConfig
from synthseries.core.types import DateAxis

MIN_SAMPLES = 3

_ALIASES = {
    "dynamicRange": "dynamic_range",
    "dynamic_range": "dynamic_range",
}


def date_axis(start: Any, end: Any, samples: int) -> DateAxis:
    """``samples`` evenly spaced datetime64 points from ``start`` to ``end`` inclusive."""
    return pd.date_range(start=start, end=end, periods=samples).to_numpy()


def format_date(value: pd.Timestamp) -> str:
    if value == value.normalize():
        return value.strftime("%Y-%m-%d")
    return value.isoformat()


class SeriesOptions(ABC):
    """
    Option state and validation rules.

    Subclasses supply ``size``, ``is_stale``, ``regenerate`` and ``extent``.
    """

    def _init_options(self, config: SeriesConfig) -> None:
        self.start = pd.Timestamp(config.start)
        self.end = pd.Timestamp(config.end)
        self.samples = int(config.samples)
        self.dynamic_range = bool(config.dynamic_range)
        self.min = float(config.min)
        self.max = float(config.max)
        self.last_update: Optional[pd.Timestamp] = None

    @property
    def options(self) -> Dict[str, Any]:
        return {
            "start": format_date(self.start),
            "end": format_date(self.end),
            "samples": self.samples,
            "dynamicRange": self.dynamic_range,
            "min": self.min,
            "max": self.max,
        }

    # --- hooks ---------------------------------------------------------------

    @property
    @abstractmethod
    def size(self) -> int:
        ...

    @property
    @abstractmethod
    def is_stale(self) -> bool:
        ...

    @abstractmethod
    def regenerate(self) -> Any:
        ...

    @abstractmethod
    def extent(self) -> Optional[Tuple[float, float]]:
        ...

    # --- two-phase option contract -------------------------------------------

    def apply_option(self, key: str, value: Any) -> bool:
        """
        Apply one option and return True when the data must be regenerated.

        ``min``/``max`` are range metadata and never require regeneration.
        Unknown keys are ignored.
        """
        key = _ALIASES.get(key, key)

        if key == "min":
            if value < self.max:
                self.min = float(value)
            else:
                logger.debug(f"Rejected min={value!r}: not below max={self.max}")
            return False

        if key == "max":
            if value > self.min:
                self.max = float(value)
            else:
                logger.debug(f"Rejected max={value!r}: not above min={self.min}")
            return False

        if key == "start":
            start = pd.Timestamp(value)
            if start < self.end:
                self.start = start
                return True
            logger.debug(f"Rejected start={value!r}: not before end={self.end}")
            return False

        if key == "end":
            end = pd.Timestamp(value)
            if end > self.start:
                self.end = end
                return True
            logger.debug(f"Rejected end={value!r}: not after start={self.start}")
            return False

        if key == "samples":
            self.samples = max(MIN_SAMPLES, int(np.round(value)))
            return True

        if key == "dynamic_range":
            self.dynamic_range = value is True or value is np.True_
            if not self.dynamic_range and self.size > 0:
                self._snapshot_range()
            return False

        logger.debug(f"Ignoring unknown option {key!r}")
        return False

    def _snapshot_range(self) -> None:
        if self.is_stale:
            self.regenerate()
        bounds = self.extent()
        if bounds is None:
            return
        lo, hi = bounds
        # a flat composite has no usable range; keep the prior fixed bounds
        if lo < hi:
            self.min, self.max = lo, hi

    def set_option(self, key: str, value: Any) -> bool:
        needs_regen = self.apply_option(key, value)
        if needs_regen:
            self.regenerate()
        return needs_regen

    def set_options(self, options: Mapping[str, Any]) -> bool:
        """Apply a batch of options and regenerate at most once."""
        needs_regen = False
        for key, value in options.items():
            needs_regen = self.apply_option(key, value) or needs_regen
        if needs_regen:
            self.regenerate()
        return needs_regen
