# synthseries/core/config.py
"""
Series-wide option defaults.
"""
from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class SeriesConfig:
    start: str = "2022-01-01"
    end: str = "2022-12-31"
    samples: int = 100
    dynamic_range: bool = True
    min: float = -2.0
    max: float = 2.0

    def __post_init__(self):
        """Validate configuration."""
        if pd.Timestamp(self.start) >= pd.Timestamp(self.end):
            raise ValueError("start must be before end")
        if self.samples < 3:
            raise ValueError("samples must be ≥ 3")
        if self.min >= self.max:
            raise ValueError("min must be < max")

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "samples": self.samples,
            "dynamicRange": self.dynamic_range,
            "min": self.min,
            "max": self.max,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SeriesConfig":
        defaults = cls()
        return cls(
            start=data.get("start", defaults.start),
            end=data.get("end", defaults.end),
            samples=int(data.get("samples", defaults.samples)),
            dynamic_range=bool(data.get("dynamicRange", defaults.dynamic_range)),
            min=float(data.get("min", defaults.min)),
            max=float(data.get("max", defaults.max)),
        )


@dataclass(frozen=True)
class CollectionConfig(SeriesConfig):
    """Shared options for every member of a collection."""
    end: str = "2022-03-31"
