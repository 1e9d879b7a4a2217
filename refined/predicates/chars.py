"""
Character predicates.

A character is a string of length one. Anything else (longer strings,
non-strings) satisfies none of the character-range predicates.

Primitives:
    Char[C]              equal to the constant character C
    CharSatisfy[MIN, MAX] within MIN..MAX inclusive, by code point

Named classes:
    Upper, Lower, Letter, Digit, Whitespace, AlphaNum
"""

from __future__ import annotations

from typing import Any

from ..constants import Ch0, Ch9, ChA, ChCR, ChLF, ChSpace, ChTab, ChZ, Cha, Chz, Const
from ..ordering import TChar
from .base import Alias, AnyOf, Pred
from .compare import Range


def is_char(value: Any) -> bool:
    """True for single-character strings."""
    return isinstance(value, str) and len(value) == 1


class Char(Pred):
    """Exactly the constant character."""

    _template = True
    _slots = (("ch", Const),)

    @classmethod
    def _evaluate(cls, value: Any) -> bool:
        return is_char(value) and value == cls.ch.get()


class CharSatisfy(Pred):
    """A character between MIN and MAX inclusive."""

    _template = True
    _slots = (("min", Const), ("max", Const))

    @classmethod
    def _evaluate(cls, value: Any) -> bool:
        return is_char(value) and Range[TChar, cls.min, cls.max].true(value)


# =============================================================================
# CHARACTER CLASSES
# =============================================================================

class Upper(Alias):
    """ASCII upper-case letter, A..Z."""

    definition = CharSatisfy[ChA, ChZ]


class Lower(Alias):
    """ASCII lower-case letter, a..z."""

    definition = CharSatisfy[Cha, Chz]


class Letter(Alias):
    """ASCII letter of either case."""

    definition = AnyOf[Upper, Lower]


class Digit(Alias):
    """ASCII decimal digit, 0..9."""

    definition = CharSatisfy[Ch0, Ch9]


class Whitespace(Alias):
    """Space, tab, carriage return or line feed."""

    definition = AnyOf[Char[ChSpace], Char[ChTab], Char[ChCR], Char[ChLF]]


class AlphaNum(Alias):
    """ASCII letter or digit."""

    definition = AnyOf[Letter, Digit]
