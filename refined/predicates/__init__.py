# Predicates package for refined
"""
Predicate markers: primitives, combinators and named character classes.

Every predicate exposes `true(value) -> bool`, total and pure.
"""

from .base import Alias, AllOf, AnyOf, Exists, ForAll, Pred, explain
from .chars import (
    AlphaNum,
    Char,
    CharSatisfy,
    Digit,
    Letter,
    Lower,
    Upper,
    Whitespace,
    is_char,
)
from .compare import GreaterOrEq, GreaterThan, LessOrEq, LessThan, Range
from .seq import MaxCount, MinCount, NonEmpty, SeqInfo

__all__ = [
    "Alias",
    "AllOf",
    "AlphaNum",
    "AnyOf",
    "Char",
    "CharSatisfy",
    "Digit",
    "Exists",
    "ForAll",
    "GreaterOrEq",
    "GreaterThan",
    "LessOrEq",
    "LessThan",
    "Letter",
    "Lower",
    "MaxCount",
    "MinCount",
    "NonEmpty",
    "Pred",
    "Range",
    "SeqInfo",
    "Upper",
    "Whitespace",
    "explain",
    "is_char",
]
