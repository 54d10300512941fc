# synthseries/composition/compositor.py
"""
Compositor
==========

Ordered operator tree over component identifiers. ``compose`` walks the nodes
in insertion order, starting from a zero accumulator, and folds component
sequences into one composite of length ``sample_count``.

Nodes reference components by opaque id; sequences are pulled through a
provider callback so the compositor never owns sample data.
"""
from typing import Any, Dict, Iterable, List, Optional

import numpy as np
from loguru import logger

from synthseries.core.errors import MalformedOperatorNode
from synthseries.core.types import ComponentId, Values
from .nodes import LeftOnly, OperatorNode, Provider, node_from_dict
from .operators import Operator


class Compositor:

    def __init__(
            self,
            operands: Optional[Iterable[ComponentId]] = None,
            nodes: Optional[Iterable[OperatorNode]] = None
    ):
        self._operands: List[ComponentId] = []
        self._nodes: List[OperatorNode] = []
        for cid in operands or ():
            self.register(cid)
        for node in nodes or ():
            self.add_node(node)

    @property
    def operands(self) -> List[ComponentId]:
        return list(self._operands)

    @property
    def nodes(self) -> List[OperatorNode]:
        return list(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def referenced_ids(self) -> set:
        refs = set()
        for node in self._nodes:
            refs |= node.references
        return refs

    # ==========================================================================
    # Structure
    # ==========================================================================

    def register(self, cid: ComponentId) -> None:
        """Make ``cid`` available to nodes without adding one."""
        if cid not in self._operands:
            self._operands.append(cid)

    def add_operand(self, cid: ComponentId, op: Any = Operator.ADD) -> OperatorNode:
        """Register a component and append its default left-only node."""
        self.register(cid)
        return self.add_node(LeftOnly(cid, Operator.parse(op)))

    def add_node(self, node: OperatorNode) -> OperatorNode:
        missing = node.references - set(self._operands)
        if missing:
            raise MalformedOperatorNode(f"{type(node).__name__} references unknown ids {sorted(missing)}")
        self._nodes.append(node)
        return node

    def remove_references_to(self, cid: ComponentId) -> None:
        """Drop ``cid``; nodes keep whichever side still references a live id."""
        if cid in self._operands:
            self._operands.remove(cid)
        kept = []
        for node in self._nodes:
            rewritten = node.without(cid)
            if rewritten is not None:
                kept.append(rewritten)
        logger.debug(f"Pruned component {cid}: {len(self._nodes) - len(kept)} node(s) dropped")
        self._nodes = kept

    def swap_references(self, a: ComponentId, b: ComponentId) -> None:
        """
        Exchange the operand slots of ``a`` and ``b``.

        Nodes address components by id, not by slot, so every node keeps
        resolving the same sequences and the composite is unchanged.
        """
        if a == b or a not in self._operands or b not in self._operands:
            return
        ia, ib = self._operands.index(a), self._operands.index(b)
        self._operands[ia], self._operands[ib] = b, a

    def clear(self) -> None:
        self._operands.clear()
        self._nodes.clear()

    # ==========================================================================
    # Evaluation
    # ==========================================================================

    def compose(self, sample_count: int, provider: Provider) -> Values:
        """
        Fold every node into a composite sequence.

        Parameters
        ----------
        sample_count : int
            Length of the composite and of every provided sequence.
        provider : callable
            Maps a component id to its current sample sequence.

        Returns
        -------
        Values
            Composite of length ``sample_count``; zeros when there are no nodes.
        """
        acc = np.zeros(sample_count, dtype=np.float64)
        for node in self._nodes:
            acc = node.apply(acc, provider)
        return acc

    # ==========================================================================
    # Persistence
    # ==========================================================================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operands": list(self._operands),
            "nodes": [node.to_dict() for node in self._nodes],
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Compositor":
        data = data or {}
        nodes = [node_from_dict(n) for n in data.get("nodes", ())]
        operands = data.get("operands")
        if operands is None:
            operands = []
            for node in nodes:
                operands.extend(sorted(node.references - set(operands)))
        return cls(operands=operands, nodes=nodes)
