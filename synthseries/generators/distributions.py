# synthseries/generators/distributions.py
"""
PDF / PMF samplers
==================

Seeded draws from named probability distributions, scaled by ``magnitude``.
Distributions come from ``scipy.stats``; sampling uses the caller's
``numpy.random.Generator`` as ``random_state``.
"""
import numpy as np
from scipy import stats

from synthseries.core.types import Values


def _sample(dist, n: int, magnitude: float, rng: np.random.Generator) -> Values:
    draws = dist.rvs(size=n, random_state=rng)
    return magnitude * np.asarray(draws, dtype=np.float64)


def pdf_uniform(
        n: int,
        min_support: float,
        max_support: float,
        magnitude: float,
        rng: np.random.Generator
) -> Values:
    """
    Uniform draws on the support interval.

    Reversed bounds are swapped; a zero-width support yields a constant.
    """
    low, high = sorted((min_support, max_support))
    if high == low:
        return np.full(n, magnitude * low, dtype=np.float64)
    return _sample(stats.uniform(loc=low, scale=high - low), n, magnitude, rng)


def pdf_normal(n: int, mu: float, sigma: float, magnitude: float, rng: np.random.Generator) -> Values:
    return _sample(stats.norm(loc=mu, scale=sigma), n, magnitude, rng)


def pdf_lognormal(n: int, mean: float, std: float, magnitude: float, rng: np.random.Generator) -> Values:
    """Log-normal draws; ``mean`` and ``std`` describe the underlying normal."""
    return _sample(stats.lognorm(s=std, scale=np.exp(mean)), n, magnitude, rng)


def pmf_poisson(n: int, lam: float, magnitude: float, rng: np.random.Generator) -> Values:
    return _sample(stats.poisson(mu=lam), n, magnitude, rng)


def pmf_geometric(n: int, p: float, magnitude: float, rng: np.random.Generator) -> Values:
    """Number of Bernoulli(p) trials up to and including the first success."""
    return _sample(stats.geom(p), n, magnitude, rng)
