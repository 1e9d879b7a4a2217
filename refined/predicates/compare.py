"""
Threshold and range predicates over an ordering marker.

    GreaterThan[O, C]   O.compare(v, C) >  0
    LessThan[O, C]      O.compare(v, C) <  0
    GreaterOrEq[O, C]   O.compare(v, C) >= 0
    LessOrEq[O, C]      O.compare(v, C) <= 0
    Range[O, MIN, MAX]  MIN <= v <= MAX under O (inclusive both ends)

These predicates impose no ordering themselves. A value the ordering
cannot compare (TypeError from `compare`) does not satisfy the predicate.
A range whose MIN is above its MAX is satisfied by nothing.
"""

from __future__ import annotations

from typing import Any, Optional

from ..constants import Const
from ..ordering import Ord
from .base import Pred


def _compare(ord_: Any, value: Any, bound: Any) -> Optional[int]:
    try:
        return ord_.compare(value, bound)
    except TypeError:
        return None


class _Threshold(Pred):
    _slots = (("ord", Ord), ("const", Const))

    @classmethod
    def _evaluate(cls, value: Any) -> bool:
        result = _compare(cls.ord, value, cls.const.get())
        return result is not None and cls._accepts(result)

    @classmethod
    def _accepts(cls, result: int) -> bool:
        raise NotImplementedError


class GreaterThan(_Threshold):
    """Strictly greater than the constant."""

    _template = True

    @classmethod
    def _accepts(cls, result: int) -> bool:
        return result > 0


class LessThan(_Threshold):
    """Strictly less than the constant."""

    _template = True

    @classmethod
    def _accepts(cls, result: int) -> bool:
        return result < 0


class GreaterOrEq(_Threshold):
    """Greater than or equal to the constant."""

    _template = True

    @classmethod
    def _accepts(cls, result: int) -> bool:
        return result >= 0


class LessOrEq(_Threshold):
    """Less than or equal to the constant."""

    _template = True

    @classmethod
    def _accepts(cls, result: int) -> bool:
        return result <= 0


class Range(Pred):
    """Between MIN and MAX inclusive."""

    _template = True
    _slots = (("ord", Ord), ("min", Const), ("max", Const))

    @classmethod
    def _evaluate(cls, value: Any) -> bool:
        lower = _compare(cls.ord, value, cls.min.get())
        if lower is None or lower < 0:
            return False
        upper = _compare(cls.ord, value, cls.max.get())
        return upper is not None and upper <= 0
