# synthseries/generators/generator.py
"""
Generator: one catalog type bound to concrete option values and a seed.

Option values are validated once, when the generator is built or an option is
updated; ``generate`` itself never re-checks them.
"""
from typing import Any, Callable, Dict, Optional

import numpy as np

from synthseries.core.catalog import DEFAULT_CATALOG, GeneratorCatalog, GeneratorSpec
from synthseries.core.errors import InvalidOption, UnknownGeneratorType
from synthseries.core.types import OptionValues, Values
from . import distributions, noise, prefab, waves

_SEED_BOUND = 2**31 - 1

Sampler = Callable[[int, OptionValues, Optional[np.random.Generator]], Values]

_SAMPLERS: Dict[str, Sampler] = {
    # prefab
    "CONSTANT": lambda n, o, _: prefab.constant(n, o["value"]),
    "TREND": lambda n, o, _: prefab.linear_trend(n, o["slope"], o["position"]),
    "OUTLIER": lambda n, o, _: prefab.outlier(n, o["position"], o["width"], o["magnitude"]),

    # noise
    "RNG_AWGN": lambda n, o, rng: noise.gaussian_noise(n, o["sigma"], rng),
    "RNG_AWLN": lambda n, o, rng: noise.laplacian_noise(n, o["sigma"], rng),
    "RNG_AWUN": lambda n, o, rng: noise.uniform_noise(n, o["sigma"], rng),
    "RNG_UNIFORM": lambda n, o, rng: noise.random_uniform(n, o["min"], o["max"], rng),
    "RNG_NORMAL": lambda n, o, rng: noise.random_normal(n, o["mu"], o["sigma"], rng),

    # waves
    "WAVE_SINE": lambda n, o, _: waves.sine_wave(n, o["period"], o["amplitude"], o["offset"]),
    "WAVE_COSINE": lambda n, o, _: waves.cosine_wave(n, o["period"], o["amplitude"], o["offset"]),

    # pdf / pmf
    "PDF_UNIFORM": lambda n, o, rng: distributions.pdf_uniform(
        n, o["minSupport"], o["maxSupport"], o["magnitude"], rng),
    "PDF_NORMAL": lambda n, o, rng: distributions.pdf_normal(n, o["mu"], o["sigma"], o["magnitude"], rng),
    "PDF_LOGNORMAL": lambda n, o, rng: distributions.pdf_lognormal(
        n, o["mean"], o["std"], o["magnitude"], rng),
    "PMF_POISSON": lambda n, o, rng: distributions.pmf_poisson(n, o["lambda"], o["magnitude"], rng),
    "PMF_GEOMETRIC": lambda n, o, rng: distributions.pmf_geometric(n, o["p"], o["magnitude"], rng),
}


def random_seed() -> int:
    """Draw a fresh non-negative 31-bit seed."""
    return int(np.random.default_rng().integers(0, _SEED_BOUND))


class Generator:
    """
    A validated generator instance.

    Parameters
    ----------
    key : str
        Catalog type key, e.g. ``"WAVE_SINE"``.
    seed : int, optional
        Required by stochastic types; drawn with ``random_seed`` when omitted.
        Ignored (stored as None) for deterministic types.
    options : dict, optional
        Option overrides merged over the catalog defaults.
    catalog : GeneratorCatalog
        Catalog the key is resolved against.

    Raises
    ------
    UnknownGeneratorType
        If ``key`` is not in the catalog or has no registered sampler.
    InvalidOption
        If any option is unknown, out of bounds or fails a validator.
    """

    def __init__(
            self,
            key: str,
            seed: Optional[int] = None,
            options: Optional[Dict[str, Any]] = None,
            catalog: GeneratorCatalog = DEFAULT_CATALOG
    ):
        self.spec: GeneratorSpec = catalog.lookup(key)
        if self.spec.key not in _SAMPLERS:
            raise UnknownGeneratorType(self.spec.key)

        values = self.spec.defaults()
        values.update(options or {})
        self.options: OptionValues = {name: self._validated(name, v) for name, v in values.items()}

        if self.spec.seed_required:
            self.seed: Optional[int] = int(seed) if seed is not None else random_seed()
        else:
            self.seed = None

    @property
    def key(self) -> str:
        return self.spec.key

    @property
    def category(self) -> str:
        return self.spec.category.value

    @property
    def title(self) -> str:
        return self.spec.title

    def _validated(self, name: str, value: Any) -> float:
        opt = self.spec.option(name)
        if opt is None:
            raise InvalidOption(name, "unknown", value, key=self.key)
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise InvalidOption(name, "numeric", value, key=self.key) from None
        rule = opt.check(value)
        if rule is not None:
            raise InvalidOption(name, rule, value, key=self.key)
        return value

    def set_option(self, name: str, value: Any) -> None:
        """Validate and store one option; the previous value is kept on failure."""
        self.options[name] = self._validated(name, value)

    def set_seed(self, seed: Optional[int]) -> None:
        if self.spec.seed_required:
            self.seed = int(seed) if seed is not None else random_seed()

    def generate(self, sample_count: int) -> Values:
        """Produce ``sample_count`` float64 samples."""
        if sample_count < 0:
            raise ValueError(f"sample_count must be ≥ 0, got {sample_count}")
        rng = np.random.default_rng(self.seed) if self.spec.seed_required else None
        values = _SAMPLERS[self.key](int(sample_count), self.options, rng)
        return np.asarray(values, dtype=np.float64)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.key}
        if self.seed is not None:
            data["seed"] = self.seed
        data["options"] = dict(self.options)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], catalog: GeneratorCatalog = DEFAULT_CATALOG) -> "Generator":
        return cls(data["type"], seed=data.get("seed"), options=data.get("options"), catalog=catalog)

    def __repr__(self) -> str:
        return f"Generator({self.key!r}, seed={self.seed!r}, options={self.options!r})"
