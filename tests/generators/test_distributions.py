# tests/generators/test_distributions.py
"""
Tests for the PDF / PMF samplers.
"""
import numpy as np
import pytest

from synthseries.generators.distributions import (
    pdf_lognormal,
    pdf_normal,
    pdf_uniform,
    pmf_geometric,
    pmf_poisson,
)


def rng(seed=11):
    return np.random.default_rng(seed)


class TestPdf:

    def test_uniform_within_scaled_support(self):
        result = pdf_uniform(500, 2.0, 4.0, 0.5, rng())
        assert result.min() >= 1.0
        assert result.max() <= 2.0

    def test_uniform_reversed_bounds(self):
        assert np.array_equal(pdf_uniform(50, 4.0, 2.0, 1.0, rng()), pdf_uniform(50, 2.0, 4.0, 1.0, rng()))

    def test_uniform_zero_width(self):
        np.testing.assert_array_equal(pdf_uniform(4, 3.0, 3.0, 2.0, rng()), [6.0] * 4)

    def test_normal_scaled(self):
        result = pdf_normal(20000, 1.0, 0.1, 10.0, rng())
        assert result.mean() == pytest.approx(10.0, rel=0.01)

    def test_lognormal_positive(self):
        assert np.all(pdf_lognormal(200, 0.0, 0.5, 1.0, rng()) > 0)

    def test_seeded(self):
        assert np.array_equal(pdf_normal(30, 0, 1, 1, rng(5)), pdf_normal(30, 0, 1, 1, rng(5)))
        assert not np.array_equal(pdf_normal(30, 0, 1, 1, rng(5)), pdf_normal(30, 0, 1, 1, rng(6)))


class TestPmf:

    def test_poisson_integral_counts(self):
        result = pmf_poisson(300, 3, 0.1, rng())
        counts = result / 0.1
        np.testing.assert_allclose(counts, np.round(counts), atol=1e-9)
        assert np.all(counts >= 0)

    def test_geometric_at_least_one_trial(self):
        result = pmf_geometric(300, 0.5, 2.0, rng())
        assert np.all(result >= 2.0)

    def test_dtype_and_length(self):
        result = pmf_poisson(17, 1, 1.0, rng())
        assert result.dtype == np.float64
        assert len(result) == 17
