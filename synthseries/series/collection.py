# synthseries/series/collection.py
"""
Collection Orchestrator: several series regenerated against one shared
date axis and range policy. Option changes fan out to every member; there is
no cross-series computation.
"""
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from loguru import logger

from synthseries.core.catalog import DEFAULT_CATALOG, GeneratorCatalog
from synthseries.core.config import CollectionConfig, SeriesConfig
from synthseries.core.types import DateAxis
from .options import SeriesOptions, date_axis
from .series import TimeSeries


class TimeSeriesCollection(SeriesOptions):

    def __init__(
            self,
            config: CollectionConfig = CollectionConfig(),
            series: Optional[List[TimeSeries]] = None,
            catalog: GeneratorCatalog = DEFAULT_CATALOG,
            next_id: Optional[int] = None
    ):
        self._init_options(config)
        self.catalog = catalog
        self.data_x: DateAxis = np.empty(0, dtype="datetime64[ns]")
        self.series: List[TimeSeries] = []

        members = list(series or [])
        known = [s.id for s in members if s.id is not None]
        self._next_id = max([next_id or 0, len(members)] + [sid + 1 for sid in known])
        for member in members:
            if member.id is None:
                member.id = self._allocate_id()
                member.name = member.name or self._series_name(member.id)
            self.series.append(member)

        if self.size > 0:
            self.regenerate()

    @property
    def size(self) -> int:
        return len(self.series)

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def is_stale(self) -> bool:
        return len(self.data_x) != self.samples or any(s.is_stale for s in self.series)

    def _allocate_id(self) -> int:
        sid = self._next_id
        self._next_id += 1
        return sid

    @staticmethod
    def _series_name(sid: int) -> str:
        return f"timeseries {sid}"

    def get_series(self, sid: int) -> Optional[TimeSeries]:
        for member in self.series:
            if member.id == sid:
                return member
        return None

    def has_series(self, sid: int) -> bool:
        return self.get_series(sid) is not None

    def _sync(self, member: TimeSeries) -> None:
        member.start, member.end, member.samples = self.start, self.end, self.samples
        member.dynamic_range, member.min, member.max = self.dynamic_range, self.min, self.max

    # ==========================================================================
    # Membership
    # ==========================================================================

    def add_series(self, series: Optional[TimeSeries] = None) -> TimeSeries:
        """
        Add ``series`` (replacing a member with the same id) or a new default one.

        An adopted series carrying a removed id is given a fresh one.
        """
        if series is None:
            sid = self._allocate_id()
            series = TimeSeries(
                config=self._member_config(),
                catalog=self.catalog,
                id=sid,
                name=self._series_name(sid),
            )
        else:
            retired = series.id is not None and series.id < self._next_id and not self.has_series(series.id)
            if series.id is None or retired:
                series.id = self._allocate_id()
            else:
                self._next_id = max(self._next_id, series.id + 1)
                self.series = [s for s in self.series if s.id != series.id]
            series.name = series.name or self._series_name(series.id)

        self.series.append(series)
        logger.info(f"Added series {series.id} to collection ({self.size} members)")
        self.regenerate()
        return series

    def remove_series(self, sid: int) -> None:
        member = self.get_series(sid)
        if member is None:
            return
        self.series.remove(member)
        logger.info(f"Removed series {sid} from collection ({self.size} members)")
        self.regenerate()

    def _member_config(self) -> SeriesConfig:
        return SeriesConfig.from_dict(self.options)

    # ==========================================================================
    # Options & generation
    # ==========================================================================

    def apply_option(self, key: str, value: Any) -> bool:
        needs_regen = super().apply_option(key, value)
        for member in self.series:
            self._sync(member)
        return needs_regen

    def regenerate(self) -> DateAxis:
        """Build the shared axis and regenerate every member against it."""
        axis = date_axis(self.start, self.end, self.samples)
        self.data_x = axis
        for member in self.series:
            self._sync(member)
            member.regenerate(axis)
        self.last_update = pd.Timestamp.now()
        logger.debug(f"Regenerated collection ({self.size} series, {self.samples} samples)")
        return axis

    def extent(self) -> Optional[Tuple[float, float]]:
        """Union of the member extents."""
        # union of member bounds; prior bounds are not clamped against each member
        bounds = [b for b in (s.extent() for s in self.series) if b is not None]
        if not bounds:
            return None
        return min(b[0] for b in bounds), max(b[1] for b in bounds)

    # ==========================================================================
    # Persistence
    # ==========================================================================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "timeseries-collection",
            "options": self.options,
            "series": [s.to_dict() for s in self.series],
            "nextId": self._next_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], catalog: GeneratorCatalog = DEFAULT_CATALOG) -> "TimeSeriesCollection":
        members = [TimeSeries.from_dict(s, catalog=catalog, generate=False) for s in data.get("series", ())]
        return cls(
            config=CollectionConfig.from_dict(data.get("options", {})),
            series=members,
            catalog=catalog,
            next_id=data.get("nextId"),
        )
