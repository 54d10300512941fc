# tests/core/test_errors.py
from synthseries.core.errors import (
    InvalidOption,
    MalformedOperatorNode,
    SynthSeriesError,
    UnknownGeneratorType,
)


def test_invalid_option_carries_context():
    err = InvalidOption("sigma", "NOT_ZERO", 0.0, key="RNG_AWGN")
    assert (err.option, err.rule, err.value, err.key) == ("sigma", "NOT_ZERO", 0.0, "RNG_AWGN")
    assert "RNG_AWGN.sigma" in str(err)
    assert isinstance(err, ValueError)


def test_unknown_generator_type_message():
    err = UnknownGeneratorType("FOO")
    assert str(err) == "unknown generator type: 'FOO'"
    assert isinstance(err, KeyError)


def test_hierarchy():
    for cls in (InvalidOption, UnknownGeneratorType, MalformedOperatorNode):
        assert issubclass(cls, SynthSeriesError)
    assert issubclass(MalformedOperatorNode, AssertionError)
