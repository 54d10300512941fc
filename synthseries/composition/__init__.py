# synthseries/composition/__init__.py
"""
Composition layer: elementwise operators, tagged operator nodes and the
compositor that walks them into a single composite sequence.
"""

from .operators import Operator, fold
from .nodes import (
    BothPresent,
    LeftOnly,
    RightOnly,
    NestedLeft,
    NestedRight,
    OperatorNode,
    node_from_dict,
)
from .compositor import Compositor

__all__ = [
    "Operator",
    "fold",

    # Nodes
    "BothPresent",
    "LeftOnly",
    "RightOnly",
    "NestedLeft",
    "NestedRight",
    "OperatorNode",
    "node_from_dict",

    "Compositor",
]
