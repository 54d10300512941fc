"""
Shared test fixtures.
"""
from typing import Callable, Optional, Sequence

import numpy as np
import pytest

from synthseries.composition.compositor import Compositor
from synthseries.composition.nodes import OperatorNode
from synthseries.core.config import SeriesConfig
from synthseries.generators.generator import Generator
from synthseries.series.component import Component
from synthseries.series.series import TimeSeries


def make_constant(cid: int, value: float) -> Component:
    return Component(cid, Generator("CONSTANT", options={"value": value}), name=f"Constant {cid}")


@pytest.fixture
def constant_series() -> Callable[..., TimeSeries]:
    """
    Build a regenerated series of CONSTANT components with ids 0..k-1.

    ``nodes=None`` keeps the default tree (one left-only ADD per component);
    a list replaces it entirely.
    """
    def build(*values: float, samples: int = 3, nodes: Optional[Sequence[OperatorNode]] = None,
              start: str = "2022-01-01", end: str = "2022-01-03") -> TimeSeries:
        components = [make_constant(i, v) for i, v in enumerate(values)]
        compositor = None
        if nodes is not None:
            compositor = Compositor(operands=[c.id for c in components], nodes=nodes)
        series = TimeSeries(
            SeriesConfig(start=start, end=end, samples=samples),
            components=components,
            compositor=compositor,
        )
        series.regenerate()
        return series
    return build


@pytest.fixture
def provider() -> Callable[[int], np.ndarray]:
    """Component sequences keyed by id, for driving the compositor directly."""
    table = {
        0: np.array([1.0, 2.0, 3.0]),
        1: np.array([10.0, 20.0, 30.0]),
        2: np.array([-1.0, 0.5, 4.0]),
    }
    return table.__getitem__
