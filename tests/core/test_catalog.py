# tests/core/test_catalog.py
"""
Tests for the generator catalog.
"""
import dataclasses

import pytest

from synthseries.core.catalog import (
    DEFAULT_CATALOG,
    Category,
    GeneratorCatalog,
    GeneratorSpec,
    OptionSpec,
    Validator,
)
from synthseries.core.errors import UnknownGeneratorType


class TestCatalogLookup:

    # ========== POSITIVE TESTS ==========

    def test_lookup_constant(self):
        spec = DEFAULT_CATALOG.lookup("CONSTANT")
        assert spec.category is Category.PREFAB
        assert spec.title == "Constant"
        assert spec.seed_required is False
        assert spec.defaults() == {"value": 0}

    def test_option_order_preserved(self):
        spec = DEFAULT_CATALOG.lookup("OUTLIER")
        assert [o.name for o in spec.options] == ["position", "width", "magnitude"]
        assert spec.defaults() == {"position": 0.5, "width": 1, "magnitude": 0.5}

    def test_list_all(self):
        entries = DEFAULT_CATALOG.list_all()
        assert len(entries) == len(DEFAULT_CATALOG) == 15
        assert entries[0] == {"key": "CONSTANT", "name": "constant", "title": "Constant"}
        assert all(set(e) == {"key", "name", "title"} for e in entries)

    @pytest.mark.parametrize("category,key", [
        (Category.PREFAB, "CONSTANT"),
        (Category.RNG, "RNG_AWGN"),
        (Category.WAVE, "WAVE_SINE"),
        (Category.PDF, "PDF_UNIFORM"),
        (Category.PMF, "PMF_POISSON"),
    ])
    def test_first_of_category(self, category, key):
        assert DEFAULT_CATALOG.first_of(category).key == key

    def test_seed_required_only_for_stochastic_types(self):
        for spec in DEFAULT_CATALOG:
            stochastic = spec.category in (Category.RNG, Category.PDF, Category.PMF)
            assert spec.seed_required is stochastic, spec.key

    def test_contains(self):
        assert "WAVE_COSINE" in DEFAULT_CATALOG
        assert "WAVE_SQUARE" not in DEFAULT_CATALOG

    # ========== NEGATIVE TESTS ==========

    def test_unknown_key(self):
        with pytest.raises(UnknownGeneratorType, match="NOPE"):
            DEFAULT_CATALOG.lookup("NOPE")

    def test_unknown_key_is_key_error(self):
        with pytest.raises(KeyError):
            DEFAULT_CATALOG.lookup(None)

    def test_duplicate_keys_rejected(self):
        spec = GeneratorSpec("A", "a", Category.PREFAB, "A", False)
        with pytest.raises(ValueError, match="unique"):
            GeneratorCatalog(specs=(spec, spec))

    def test_specs_are_immutable(self):
        spec = DEFAULT_CATALOG.lookup("TREND")
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.title = "changed"


class TestOptionRules:

    @pytest.mark.parametrize("key,option,value,rule", [
        ("TREND", "position", 0.0, "EXCLUSIVE_0_1"),
        ("TREND", "position", 1.5, "max"),
        ("TREND", "slope", 0.0, "NOT_ZERO"),
        ("RNG_AWGN", "sigma", 0.0, "NOT_ZERO"),
        ("RNG_AWGN", "sigma", -1.0, "min"),
        ("WAVE_SINE", "period", 2.5, "INTEGER"),
        ("WAVE_SINE", "amplitude", 0.05, "min"),
        ("OUTLIER", "width", 0.0, "min"),
        ("PMF_GEOMETRIC", "p", 1.0, "EXCLUSIVE_0_1"),
        ("CONSTANT", "value", float("nan"), "finite"),
    ])
    def test_violations(self, key, option, value, rule):
        assert DEFAULT_CATALOG.lookup(key).option(option).check(value) == rule

    @pytest.mark.parametrize("key,option,value", [
        ("TREND", "position", 0.01),
        ("CONSTANT", "value", -1e6),
        ("WAVE_SINE", "offset", 0),
        ("PMF_POISSON", "lambda", 4),
    ])
    def test_valid_values(self, key, option, value):
        assert DEFAULT_CATALOG.lookup(key).option(option).check(value) is None

    def test_unknown_option_name(self):
        assert DEFAULT_CATALOG.lookup("CONSTANT").option("slope") is None

    @pytest.mark.parametrize("validator,value,expected", [
        (Validator.NOT_ZERO, 0, False),
        (Validator.NOT_ZERO, -0.1, True),
        (Validator.POSITIVE, 0, False),
        (Validator.POSITIVE, 0.001, True),
        (Validator.EXCLUSIVE_0_1, 1, False),
        (Validator.EXCLUSIVE_0_1, 0.999, True),
        (Validator.INTEGER, 3.0, True),
        (Validator.INTEGER, 3.2, False),
    ])
    def test_validator_predicates(self, validator, value, expected):
        assert validator.accepts(value) is expected

    def test_bounds_are_inclusive(self):
        opt = OptionSpec("x", 0.5, min=0, max=1)
        assert opt.check(0) is None
        assert opt.check(1) is None
