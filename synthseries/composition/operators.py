# synthseries/composition/operators.py
"""
Elementwise binary operators used by the compositor.
"""
from enum import Enum
from typing import Any

import numpy as np

from synthseries.core.types import Values


class Operator(str, Enum):
    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    MULTIPLY = "MULTIPLY"

    @classmethod
    def parse(cls, tag: Any) -> "Operator":
        """Resolve a tag to an operator; None and unknown tags fall back to ADD."""
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            try:
                return cls[tag.strip().upper()]
            except KeyError:
                pass
        return cls.ADD


def fold(op: Operator, left: Values, right: Values) -> Values:
    """
    Combine two equal-length sequences index by index.

    Returns a new array; neither input is modified.
    """
    if left.shape != right.shape:
        raise ValueError(f"cannot fold sequences of shapes {left.shape} and {right.shape}")
    if op is Operator.SUBTRACT:
        return np.subtract(left, right)
    if op is Operator.MULTIPLY:
        return np.multiply(left, right)
    return np.add(left, right)
