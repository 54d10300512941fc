# synthseries/generators/__init__.py
"""
Signal generators: prefab shapes, seeded noise, waveforms and distribution
samplers, plus the validated ``Generator`` instance that dispatches to them.
"""

from .generator import Generator, random_seed
from .prefab import constant, linear_trend, outlier
from .waves import sine_wave, cosine_wave

__all__ = [
    "Generator",
    "random_seed",

    # Deterministic shapes
    "constant",
    "linear_trend",
    "outlier",
    "sine_wave",
    "cosine_wave",
]
