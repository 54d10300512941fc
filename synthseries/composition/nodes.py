# synthseries/composition/nodes.py
"""
Operator nodes
==============

One frozen dataclass per composition case. Each node carries exactly the
fields its case needs and checks them on construction, so the compositor's
walk never meets a half-filled node.

Cases (``acc`` is the running composite, ``L``/``R`` component sequences):

- BothPresent:  acc = op(L, R)
- LeftOnly:     acc = op(L, acc)
- RightOnly:    acc = op(acc, R)
- NestedLeft:   acc = outer(L, op(L, R))
- NestedRight:  acc = outer(op(L, R), acc)
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Optional, Union

import numpy as np

from synthseries.core.errors import MalformedOperatorNode
from synthseries.core.types import ComponentId, Values
from .operators import Operator, fold

Provider = Callable[[ComponentId], Values]


def _require_id(node: str, side: str, value: Any) -> None:
    if value is None or isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise MalformedOperatorNode(f"{node}: {side} must be a component id, got {value!r}")


def _require_op(node: object, attr: str) -> None:
    value = getattr(node, attr)
    if value is None:
        raise MalformedOperatorNode(f"{type(node).__name__}: missing {attr}")
    object.__setattr__(node, attr, Operator.parse(value))


@dataclass(frozen=True)
class BothPresent:
    left: ComponentId
    op: Operator
    right: ComponentId

    case = "BOTH"

    def __post_init__(self):
        _require_id(type(self).__name__, "left", self.left)
        _require_id(type(self).__name__, "right", self.right)
        _require_op(self, "op")

    @property
    def references(self) -> FrozenSet[ComponentId]:
        return frozenset((self.left, self.right))

    def apply(self, acc: Values, provider: Provider) -> Values:
        return fold(self.op, provider(self.left), provider(self.right))

    def without(self, cid: ComponentId) -> Optional["OperatorNode"]:
        if self.left == cid and self.right == cid:
            return None
        if self.left == cid:
            return RightOnly(self.right, self.op)
        if self.right == cid:
            return LeftOnly(self.left, self.op)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {"case": self.case, "left": self.left, "op": self.op.value, "right": self.right}


@dataclass(frozen=True)
class LeftOnly:
    left: ComponentId
    op: Operator = Operator.ADD

    case = "LEFT"

    def __post_init__(self):
        _require_id(type(self).__name__, "left", self.left)
        object.__setattr__(self, "op", Operator.parse(self.op))

    @property
    def references(self) -> FrozenSet[ComponentId]:
        return frozenset((self.left,))

    def apply(self, acc: Values, provider: Provider) -> Values:
        return fold(self.op, provider(self.left), acc)

    def without(self, cid: ComponentId) -> Optional["OperatorNode"]:
        return None if self.left == cid else self

    def to_dict(self) -> Dict[str, Any]:
        return {"case": self.case, "left": self.left, "op": self.op.value}


@dataclass(frozen=True)
class RightOnly:
    right: ComponentId
    op: Operator = Operator.ADD

    case = "RIGHT"

    def __post_init__(self):
        _require_id(type(self).__name__, "right", self.right)
        object.__setattr__(self, "op", Operator.parse(self.op))

    @property
    def references(self) -> FrozenSet[ComponentId]:
        return frozenset((self.right,))

    def apply(self, acc: Values, provider: Provider) -> Values:
        return fold(self.op, acc, provider(self.right))

    def without(self, cid: ComponentId) -> Optional["OperatorNode"]:
        return None if self.right == cid else self

    def to_dict(self) -> Dict[str, Any]:
        return {"case": self.case, "right": self.right, "op": self.op.value}


@dataclass(frozen=True)
class _Nested:
    left: ComponentId
    op: Operator
    right: ComponentId
    outer: Operator

    case = ""

    def __post_init__(self):
        _require_id(type(self).__name__, "left", self.left)
        _require_id(type(self).__name__, "right", self.right)
        _require_op(self, "op")
        _require_op(self, "outer")

    @property
    def references(self) -> FrozenSet[ComponentId]:
        return frozenset((self.left, self.right))

    def without(self, cid: ComponentId) -> Optional["OperatorNode"]:
        # The nested fold cannot survive losing an operand; keep the inner op.
        return BothPresent(self.left, self.op, self.right).without(cid)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "case": self.case,
            "left": self.left,
            "op": self.op.value,
            "right": self.right,
            "outer": self.outer.value,
        }


@dataclass(frozen=True)
class NestedLeft(_Nested):
    case = "NESTED_LEFT"

    def apply(self, acc: Values, provider: Provider) -> Values:
        left = provider(self.left)
        side = fold(self.op, left, provider(self.right))
        return fold(self.outer, left, side)


@dataclass(frozen=True)
class NestedRight(_Nested):
    case = "NESTED_RIGHT"

    def apply(self, acc: Values, provider: Provider) -> Values:
        side = fold(self.op, provider(self.left), provider(self.right))
        return fold(self.outer, side, acc)


OperatorNode = Union[BothPresent, LeftOnly, RightOnly, NestedLeft, NestedRight]

_CASES = {cls.case: cls for cls in (BothPresent, LeftOnly, RightOnly, NestedLeft, NestedRight)}


def node_from_dict(data: Dict[str, Any]) -> OperatorNode:
    """Rebuild a node from its ``to_dict`` form."""
    try:
        cls = _CASES[data["case"]]
    except KeyError:
        raise MalformedOperatorNode(f"unknown node case: {data.get('case')!r}") from None
    fields = {k: data[k] for k in ("left", "op", "right", "outer") if k in data}
    try:
        return cls(**fields)
    except TypeError as e:
        raise MalformedOperatorNode(f"{cls.__name__}: {e}") from e
