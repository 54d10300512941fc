# synthseries/generators/prefab.py
"""
Deterministic prefab shapes: constant level, linear trend and single outlier.
"""
import numpy as np

from synthseries.core.types import Values


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"sample count must be ≥ 0, got {n}")


def constant(n: int, value: float) -> Values:
    """Flat line at ``value``."""
    _check_count(n)
    return np.full(n, value, dtype=np.float64)


def linear_trend(n: int, slope: float, position: float) -> Values:
    """
    Linear trend through zero at the reference point ``position * (n - 1)``.

    Args:
        n: Number of samples.
        slope: Increase per sample.
        position: Relative location (0..1) of the zero crossing.

    Returns:
        Values: ``slope * (i - position * (n - 1))`` for each index ``i``.
    """
    _check_count(n)
    idx = np.arange(n, dtype=np.float64)
    return slope * (idx - position * max(n - 1, 0))


def outlier(n: int, position: float, width: int, magnitude: float) -> Values:
    """
    Rectangular bump of height ``magnitude`` centred at ``int(position * n)``.

    The bump spans ``width`` samples and is clipped at both ends of the array.
    """
    _check_count(n)
    out = np.zeros(n, dtype=np.float64)
    if n == 0:
        return out

    width = int(width)
    center = min(int(position * n), n - 1)
    start = center - width // 2
    out[max(start, 0):min(start + width, n)] = magnitude
    return out
