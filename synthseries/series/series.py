# synthseries/series/series.py
"""
Series Orchestrator
===================

Owns the components, the compositor, the date axis and the value-range
policy of one synthetic time series.

Every mutation runs to completion, including the regeneration it triggers,
before returning. Component ids come from a monotonic counter and are never
reused, even after removal.
"""
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
from loguru import logger

from synthseries.composition.compositor import Compositor
from synthseries.composition.nodes import OperatorNode
from synthseries.core.catalog import DEFAULT_CATALOG, Category, GeneratorCatalog, GeneratorSpec
from synthseries.core.config import SeriesConfig
from synthseries.core.types import ComponentId, DateAxis, Values
from synthseries.generators.generator import Generator, random_seed
from .component import Component, parse_id
from .options import SeriesOptions, date_axis


class TimeSeries(SeriesOptions):
    """
    A composite time series.

    Parameters
    ----------
    config : SeriesConfig
        Initial date range, sample count and range policy.
    components : list of Component, optional
        Pre-built components; one default component is added when empty.
    compositor : Compositor, optional
        Operator tree over ``components``; built with one left-only ADD node
        per component when omitted.
    catalog : GeneratorCatalog
        Catalog used to resolve generator types.
    id, name : optional
        Identity inside a collection.
    next_id : int, optional
        Persisted id counter; raised to ``max(component ids) + 1`` if lower.
    """

    def __init__(
            self,
            config: SeriesConfig = SeriesConfig(),
            components: Optional[List[Component]] = None,
            compositor: Optional[Compositor] = None,
            catalog: GeneratorCatalog = DEFAULT_CATALOG,
            id: Optional[int] = None,
            name: Optional[str] = None,
            next_id: Optional[int] = None
    ):
        self._init_options(config)
        self.catalog = catalog
        self.id = id
        self.name = name

        self.data_x: DateAxis = np.empty(0, dtype="datetime64[ns]")
        self.data_y: Values = np.empty(0, dtype=np.float64)

        self.components: List[Component] = list(components or [])
        ids = self.component_ids
        if len(set(ids)) != len(ids):
            raise ValueError("component ids must be unique")
        self._next_id = max([next_id or 0, len(ids)] + [cid + 1 for cid in ids])

        if compositor is None:
            compositor = Compositor()
            for component in self.components:
                compositor.add_operand(component.id)
        else:
            for cid in set(compositor.operands) - set(ids):
                compositor.remove_references_to(cid)
            for cid in ids:
                compositor.register(cid)
        self.compositor = compositor

        if not self.components:
            self.add_component()

    # ==========================================================================
    # Lookup
    # ==========================================================================

    @property
    def size(self) -> int:
        return len(self.components)

    @property
    def component_ids(self) -> List[ComponentId]:
        return [c.id for c in self.components]

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def is_stale(self) -> bool:
        return len(self.data_y) != self.samples or len(self.data_x) != self.samples

    def get_component(self, cid: ComponentId) -> Optional[Component]:
        for component in self.components:
            if component.id == cid:
                return component
        return None

    def has_component(self, cid: ComponentId) -> bool:
        return self.get_component(cid) is not None

    def _index_of(self, cid: ComponentId) -> int:
        for i, component in enumerate(self.components):
            if component.id == cid:
                return i
        return -1

    def _allocate_id(self) -> ComponentId:
        cid = self._next_id
        self._next_id += 1
        return cid

    def _component_name(self, spec: GeneratorSpec) -> str:
        count = sum(1 for c in self.components if c.generator.key == spec.key)
        return f"{spec.title} {count}"

    # ==========================================================================
    # Component lifecycle
    # ==========================================================================

    def add_component(self, key: Optional[str] = None) -> Component:
        """
        Add a component of type ``key`` (first prefab type when omitted).

        Raises
        ------
        UnknownGeneratorType
            If ``key`` is given but absent from the catalog.
        """
        if key is None:
            spec = self.catalog.first_of(Category.PREFAB)
        else:
            spec = self.catalog.lookup(key)

        seed = random_seed() if spec.seed_required else None
        generator = Generator(spec.key, seed=seed, catalog=self.catalog)
        component = Component(self._allocate_id(), generator, name=self._component_name(spec))

        self.components.append(component)
        self.compositor.add_operand(component.id)
        logger.debug(f"Added component {component.id} ({spec.key})")
        self.regenerate()
        return component

    def remove_component(self, cid: ComponentId) -> None:
        idx = self._index_of(cid)
        if idx < 0:
            return
        self.components.pop(idx)
        self.compositor.remove_references_to(cid)
        logger.debug(f"Removed component {cid}")
        self.regenerate()

    def switch_components(self, a: ComponentId, b: ComponentId) -> None:
        """Swap the positions of two components; ids and composite are unchanged."""
        ia, ib = self._index_of(a), self._index_of(b)
        if ia < 0 or ib < 0 or ia == ib:
            return
        self.components[ia], self.components[ib] = self.components[ib], self.components[ia]
        self.compositor.swap_references(a, b)
        self.regenerate()

    def add_node(self, node: OperatorNode) -> OperatorNode:
        """
        Append an operator node to the tree and regenerate.

        Raises
        ------
        MalformedOperatorNode
            If the node references an id that is not a live component.
        """
        self.compositor.add_node(node)
        self.regenerate()
        return node

    def set_component_option(self, cid: ComponentId, name: str, value: Any) -> None:
        """Update one generator option; InvalidOption propagates unchanged."""
        component = self.get_component(cid)
        if component is None:
            return
        component.set_option(name, value)
        self.regenerate()

    def reseed_component(self, cid: ComponentId, seed: Optional[int] = None) -> None:
        component = self.get_component(cid)
        if component is None:
            return
        component.set_seed(seed)
        self.regenerate()

    def randomize_seeds(self) -> None:
        """Re-roll every component seed, then regenerate once."""
        for component in self.components:
            component.set_seed(random_seed())
        self.regenerate()

    # ==========================================================================
    # Generation
    # ==========================================================================

    def _values_of(self, cid: ComponentId) -> Values:
        component = self.get_component(cid)
        if component is None:
            raise KeyError(f"operator tree references missing component {cid}")
        return component.ensure_fresh(self.samples)

    def regenerate(self, axis: Optional[DateAxis] = None) -> Values:
        """
        Rebuild the date axis and the composite sequence.

        Parameters
        ----------
        axis : DateAxis, optional
            Shared axis supplied by a collection; must have ``samples`` points.

        Returns
        -------
        Values
            The new composite, also stored as ``data_y``.
        """
        n = self.samples
        if axis is None:
            axis = date_axis(self.start, self.end, n)
        elif len(axis) != n:
            raise ValueError(f"date axis has {len(axis)} points, expected {n}")

        for component in self.components:
            component.ensure_fresh(n)

        self.data_x = axis
        self.data_y = self.compositor.compose(n, self._values_of)
        self.last_update = pd.Timestamp.now()
        logger.debug(f"Regenerated series {self.id} ({n} samples, {self.size} components)")
        return self.data_y

    def extent(self) -> Optional[Tuple[float, float]]:
        if len(self.data_y) == 0:
            return None
        return float(np.min(self.data_y)), float(np.max(self.data_y))

    def component_series(self) -> List[Tuple[Component, Values]]:
        """Each component paired with its fresh samples, in position order."""
        if self.is_stale:
            self.regenerate()
        return [(c, c.ensure_fresh(self.samples)) for c in self.components]

    # ==========================================================================
    # Persistence
    # ==========================================================================

    def to_dict(self, include_components: bool = True, include_compositor: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": "timeseries"}
        if self.id is not None:
            data["id"] = self.id
            data["name"] = self.name
        data.update(self.options)
        data["size"] = self.size
        data["nextId"] = self._next_id
        if include_components:
            data["components"] = [c.to_dict() for c in self.components]
        if include_compositor:
            data["compositor"] = self.compositor.to_dict()
        return data

    @classmethod
    def from_dict(
            cls,
            data: Dict[str, Any],
            catalog: GeneratorCatalog = DEFAULT_CATALOG,
            generate: bool = True
    ) -> "TimeSeries":
        components = [Component.from_dict(c, catalog=catalog) for c in data.get("components", ())]
        compositor = Compositor.from_dict(data["compositor"]) if data.get("compositor") else None
        series = cls(
            config=SeriesConfig.from_dict(data),
            components=components,
            compositor=compositor,
            catalog=catalog,
            id=parse_id(data["id"]) if data.get("id") is not None else None,
            name=data.get("name"),
            next_id=data.get("nextId"),
        )
        if generate and series.is_stale:
            series.regenerate()
        return series

    def __repr__(self) -> str:
        return f"TimeSeries(id={self.id!r}, samples={self.samples}, components={self.component_ids})"
