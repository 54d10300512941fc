# synthseries/generators/noise.py
"""
Seeded random noise. Every draw is independent per sample; the caller owns
the ``numpy.random.Generator`` so that a seed fully determines the output.
"""
import numpy as np

from synthseries.core.types import Values


def gaussian_noise(n: int, sigma: float, rng: np.random.Generator) -> Values:
    """Additive white Gaussian noise, N(0, sigma)."""
    return rng.normal(0.0, sigma, size=n)


def laplacian_noise(n: int, sigma: float, rng: np.random.Generator) -> Values:
    """Additive white Laplacian noise with scale ``sigma``."""
    return rng.laplace(0.0, sigma, size=n)


def uniform_noise(n: int, sigma: float, rng: np.random.Generator) -> Values:
    """Additive white uniform noise on [-sigma, sigma)."""
    return rng.uniform(-sigma, sigma, size=n)


def random_uniform(n: int, low: float, high: float, rng: np.random.Generator) -> Values:
    return rng.uniform(low, high, size=n)


def random_normal(n: int, mu: float, sigma: float, rng: np.random.Generator) -> Values:
    return rng.normal(mu, sigma, size=n)
