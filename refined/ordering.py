"""
Ordering markers — pluggable three-way comparison over a base type.

Threshold and range predicates never compare values themselves; they ask
an ordering marker. `compare(x, y)` returns a negative number, zero or a
positive number when `x` is less than, equal to or greater than `y`.

Orderings supplied from outside (a locale collation, a domain-specific
rank) are adapted with `ordering()` or `ordering_by_key()`.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

from .markers import Marker, MarkerMeta, cached_marker, make_marker


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


class Ord(Marker):
    """Base ordering marker. Subclasses define `compare(x, y) -> int`."""

    @classmethod
    def compare(cls, x: Any, y: Any) -> int:
        raise TypeError(f"{cls.describe()} does not define a comparison")


class NaturalOrd(Ord):
    """
    Python's own `<` / `>` ordering.

    Pairs that are neither less, greater nor equal (NaN against anything)
    are unordered and raise TypeError.
    """

    @classmethod
    def compare(cls, x: Any, y: Any) -> int:
        if x < y:
            return -1
        if x > y:
            return 1
        if x == y:
            return 0
        raise TypeError(f"{x!r} and {y!r} are unordered")


class TInt(NaturalOrd):
    """Natural ordering of integers."""


class TFloat(NaturalOrd):
    """
    Total ordering of floats: NaN equals NaN and sorts below every number.
    """

    @classmethod
    def compare(cls, x: Any, y: Any) -> int:
        x_nan = _is_nan(x)
        y_nan = _is_nan(y)
        if x_nan or y_nan:
            return int(y_nan) - int(x_nan)
        return super().compare(x, y)


class TStr(NaturalOrd):
    """Lexicographic ordering of strings."""


class TChar(NaturalOrd):
    """Code point ordering of single characters."""


# =============================================================================
# EXTERNAL ORDERINGS
# =============================================================================

def ordering(
    compare: Callable[[Any, Any], int],
    name: Optional[str] = None,
) -> MarkerMeta:
    """
    Adapt a three-way comparison function into an ordering marker.

    The same function always yields the same marker.
    """
    label = name or f"Ord[{getattr(compare, '__qualname__', repr(compare))}]"

    def _compare(cls: Any, x: Any, y: Any) -> int:
        return compare(x, y)

    return cached_marker(
        ("ordering", compare, label),
        lambda: make_marker(
            label,
            Ord,
            {"_origin": (ordering, (compare, label)), "compare": classmethod(_compare)},
        ),
    )


def ordering_by_key(
    key: Callable[[Any], Any],
    name: Optional[str] = None,
) -> MarkerMeta:
    """Ordering marker comparing values by `key(value)` in natural order."""
    label = name or f"OrdBy[{getattr(key, '__qualname__', repr(key))}]"

    def _compare(cls: Any, x: Any, y: Any) -> int:
        return NaturalOrd.compare(key(x), key(y))

    return cached_marker(
        ("ordering_by_key", key, label),
        lambda: make_marker(
            label,
            Ord,
            {"_origin": (ordering_by_key, (key, label)), "compare": classmethod(_compare)},
        ),
    )
