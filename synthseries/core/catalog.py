# synthseries/core/catalog.py
"""
Generator Catalog
=================

Static registry of generator types. Each entry records its category, whether
it needs a seed, and the ordered set of numeric options with defaults, bounds
and validator tags.

The catalog is built once at import (``DEFAULT_CATALOG``) and shared by
reference; it has no mutation API.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .errors import UnknownGeneratorType


class Category(str, Enum):
    PREFAB = "prefab"
    RNG = "rng"
    WAVE = "wave"
    PDF = "pdf"
    PMF = "pmf"


class Validator(str, Enum):
    NOT_ZERO = "NOT_ZERO"
    POSITIVE = "POSITIVE"
    EXCLUSIVE_0_1 = "EXCLUSIVE_0_1"
    INTEGER = "INTEGER"

    def accepts(self, value: float) -> bool:
        if self is Validator.NOT_ZERO:
            return value != 0
        if self is Validator.POSITIVE:
            return value > 0
        if self is Validator.EXCLUSIVE_0_1:
            return 0 < value < 1
        return float(value).is_integer()


@dataclass(frozen=True)
class OptionSpec:
    name: str
    default: float
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    validators: Tuple[Validator, ...] = ()

    def check(self, value: float) -> Optional[str]:
        """
        Return the name of the first rule ``value`` violates, or None.

        Bounds are inclusive; validators are checked in declaration order.
        """
        if not np.isfinite(value):
            return "finite"
        if self.min is not None and value < self.min:
            return "min"
        if self.max is not None and value > self.max:
            return "max"
        for validator in self.validators:
            if not validator.accepts(value):
                return validator.value
        return None


@dataclass(frozen=True)
class GeneratorSpec:
    key: str
    name: str
    category: Category
    title: str
    seed_required: bool
    options: Tuple[OptionSpec, ...] = ()

    def option(self, name: str) -> Optional[OptionSpec]:
        for opt in self.options:
            if opt.name == name:
                return opt
        return None

    def defaults(self) -> Dict[str, float]:
        return {opt.name: opt.default for opt in self.options}


@dataclass(frozen=True)
class GeneratorCatalog:
    specs: Tuple[GeneratorSpec, ...]
    _index: Dict[str, GeneratorSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        index = {spec.key: spec for spec in self.specs}
        if len(index) != len(self.specs):
            raise ValueError("generator keys must be unique")
        object.__setattr__(self, "_index", index)

    def __contains__(self, key) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[GeneratorSpec]:
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def lookup(self, key: str) -> GeneratorSpec:
        try:
            return self._index[key]
        except (KeyError, TypeError):
            raise UnknownGeneratorType(key) from None

    def list_all(self) -> List[Dict[str, str]]:
        return [{"key": s.key, "name": s.name, "title": s.title} for s in self.specs]

    def first_of(self, category: Category) -> GeneratorSpec:
        for spec in self.specs:
            if spec.category is category:
                return spec
        raise UnknownGeneratorType(category)


# ==============================================================================
# SECTION: Default catalog
# ==============================================================================

_NZ = Validator.NOT_ZERO
_POS = Validator.POSITIVE
_EX01 = Validator.EXCLUSIVE_0_1
_INT = Validator.INTEGER


def _position() -> OptionSpec:
    return OptionSpec("position", 0.5, min=0, max=1, step=0.01, validators=(_EX01,))


def _magnitude(default: float = 0.1, step: Optional[float] = None) -> OptionSpec:
    return OptionSpec("magnitude", default, min=0, step=step, validators=(_POS,))


def _noise_sigma() -> OptionSpec:
    return OptionSpec("sigma", 0.1, min=0, validators=(_NZ, _POS))


def _wave_options() -> Tuple[OptionSpec, ...]:
    return (
        OptionSpec("period", 10, min=1, step=1, validators=(_INT,)),
        OptionSpec("amplitude", 1, min=0.1, step=0.1, validators=(_POS,)),
        OptionSpec("offset", 0, min=0, step=1, validators=(_INT,)),
    )


def build_default_catalog() -> GeneratorCatalog:
    """Build the standard set of generator types."""
    prefab, rng, wave, pdf, pmf = (
        Category.PREFAB, Category.RNG, Category.WAVE, Category.PDF, Category.PMF
    )
    return GeneratorCatalog(specs=(
        GeneratorSpec("CONSTANT", "constant", prefab, "Constant", False, (
            OptionSpec("value", 0, step=0.1),
        )),
        GeneratorSpec("TREND", "trend", prefab, "Linear Trend", False, (
            _position(),
            OptionSpec("slope", 0.1, validators=(_NZ,)),
        )),
        GeneratorSpec("OUTLIER", "outlier", prefab, "Outlier", False, (
            _position(),
            OptionSpec("width", 1, min=1, step=1, validators=(_INT,)),
            _magnitude(0.5, step=0.01),
        )),

        # random numbers / noise
        GeneratorSpec("RNG_AWGN", "awgn", rng, "Additive White Gaussian Noise", True, (_noise_sigma(),)),
        GeneratorSpec("RNG_AWLN", "awln", rng, "Additive White Laplacian Noise", True, (_noise_sigma(),)),
        GeneratorSpec("RNG_AWUN", "awun", rng, "Additive White Uniform Noise", True, (_noise_sigma(),)),
        GeneratorSpec("RNG_UNIFORM", "uniform", rng, "Random Uniform", True, (
            OptionSpec("min", 0),
            OptionSpec("max", 1),
        )),
        GeneratorSpec("RNG_NORMAL", "normal", rng, "Random Normal", True, (
            OptionSpec("mu", 0),
            OptionSpec("sigma", 0.1, min=0, validators=(_NZ,)),
        )),

        # waves
        GeneratorSpec("WAVE_SINE", "sine", wave, "Sine Wave", False, _wave_options()),
        GeneratorSpec("WAVE_COSINE", "cosine", wave, "Cosine Wave", False, _wave_options()),

        # pdfs
        GeneratorSpec("PDF_UNIFORM", "uniform", pdf, "PDF Uniform", True, (
            OptionSpec("minSupport", 0, step=0.1),
            OptionSpec("maxSupport", 1, step=0.1),
            _magnitude(),
        )),
        GeneratorSpec("PDF_NORMAL", "normal", pdf, "PDF Normal", True, (
            OptionSpec("mu", 0),
            OptionSpec("sigma", 0.1, min=0, validators=(_NZ,)),
            _magnitude(),
        )),
        GeneratorSpec("PDF_LOGNORMAL", "lognormal", pdf, "PDF LogNormal", True, (
            OptionSpec("mean", 0),
            OptionSpec("std", 0.1, min=0, validators=(_NZ,)),
            _magnitude(),
        )),

        # pmfs
        GeneratorSpec("PMF_POISSON", "poisson", pmf, "PMF Poisson", True, (
            OptionSpec("lambda", 1, min=1, step=1, validators=(_INT,)),
            _magnitude(),
        )),
        GeneratorSpec("PMF_GEOMETRIC", "geometric", pmf, "PMF Geometric", True, (
            OptionSpec("p", 0.5, min=0, max=1, validators=(_EX01,)),
            _magnitude(),
        )),
    ))


DEFAULT_CATALOG = build_default_catalog()
