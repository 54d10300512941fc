# synthseries/core/errors.py
"""
Error taxonomy for the composition engine.

- InvalidOption: a generator option outside its bounds or failing a validator
- UnknownGeneratorType: a type key absent from the catalog
- MalformedOperatorNode: an operator node whose case does not match its references

Missing identifiers and rejected series range options are not errors.
"""
from typing import Any, Optional


class SynthSeriesError(Exception):
    """Base class for all synthseries errors."""


class InvalidOption(SynthSeriesError, ValueError):
    def __init__(self, option: str, rule: str, value: Any = None, key: Optional[str] = None):
        self.option = option
        self.rule = rule
        self.value = value
        self.key = key
        where = f"{key}." if key else ""
        super().__init__(f"option '{where}{option}' = {value!r} violates rule '{rule}'")


class UnknownGeneratorType(SynthSeriesError, KeyError):
    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"unknown generator type: {key!r}")

    def __str__(self) -> str:
        return self.args[0]


class MalformedOperatorNode(SynthSeriesError, AssertionError):
    """Raised when an operator node is built with references that do not fit its case."""
