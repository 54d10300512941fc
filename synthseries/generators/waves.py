# synthseries/generators/waves.py
"""
Periodic waveforms as functions of the sample index.
"""
import numpy as np

from synthseries.core.types import Values


def _phase(n: int, period: float, offset: float) -> Values:
    if n < 0:
        raise ValueError(f"sample count must be ≥ 0, got {n}")
    if period <= 0:
        raise ValueError("period must be > 0")
    idx = np.arange(n, dtype=np.float64)
    return 2.0 * np.pi * (idx + offset) / period


def sine_wave(n: int, period: float, amplitude: float, offset: float = 0) -> Values:
    """``amplitude * sin(2*pi*(i + offset) / period)``"""
    return amplitude * np.sin(_phase(n, period, offset))


def cosine_wave(n: int, period: float, amplitude: float, offset: float = 0) -> Values:
    """``amplitude * cos(2*pi*(i + offset) / period)``"""
    return amplitude * np.cos(_phase(n, period, offset))
