# synthseries/series/component.py
"""
Component: a generator with an identity and a cached output buffer.

The buffer is either empty (stale) or exactly as long as the last requested
sample count. Reads go through ``ensure_fresh``; nothing regenerates
implicitly.
"""
from typing import Any, Dict, Optional

import numpy as np

from synthseries.core.catalog import DEFAULT_CATALOG, GeneratorCatalog
from synthseries.core.types import ComponentId, Values
from synthseries.generators.generator import Generator


class Component:

    def __init__(self, cid: ComponentId, generator: Generator, name: Optional[str] = None):
        self.id = cid
        self.generator = generator
        self.name = name if name is not None else generator.title
        self.data: Values = np.empty(0, dtype=np.float64)

    def is_stale(self, sample_count: int) -> bool:
        return len(self.data) != sample_count

    def clear(self) -> None:
        self.data = np.empty(0, dtype=np.float64)

    def ensure_fresh(self, sample_count: int) -> Values:
        if self.is_stale(sample_count):
            self.data = self.generator.generate(sample_count)
        return self.data

    def set_seed(self, seed: Optional[int]) -> None:
        self.generator.set_seed(seed)
        self.clear()

    def set_option(self, name: str, value: Any) -> None:
        # InvalidOption propagates before the cache is touched
        self.generator.set_option(name, value)
        self.clear()

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "generator": self.generator.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], catalog: GeneratorCatalog = DEFAULT_CATALOG) -> "Component":
        return cls(
            parse_id(data["id"]),
            Generator.from_dict(data["generator"], catalog=catalog),
            name=data.get("name"),
        )

    def __repr__(self) -> str:
        return f"Component(id={self.id!r}, name={self.name!r}, generator={self.generator.key!r})"


def parse_id(raw: Any) -> int:
    """
    Accept an integer id or a legacy ``"<prefix>_<n>"`` string.

    >>> parse_id("comp_7")
    7
    """
    if isinstance(raw, str):
        raw = raw.rsplit("_", 1)[-1]
    return int(raw)
