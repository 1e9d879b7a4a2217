"""
Constant markers — fixed values known when a predicate is defined.

A constant is a marker class whose `get()` returns a fixed value. Using a
class instead of a stored field keeps predicates free of runtime state:
`GreaterThan[TInt, const(5)]` knows its threshold without holding one.

Constants must be hashable. Unhashable values are mutable containers and
could change after the predicate was defined.
"""

from __future__ import annotations

from typing import Any, ClassVar

from .markers import Marker, MarkerMeta, cached_marker, make_marker


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


_UNSET = _Unset()


class Const(Marker):
    """
    A fixed value of some base type, retrieved with `get()`.

    Build constants with `const(value)` or `Const[value]`; both return
    the same cached marker for equal values of the same type.
    """

    _template = True

    value: ClassVar[Any] = _UNSET

    @classmethod
    def get(cls) -> Any:
        """Return the constant value."""
        if cls.value is _UNSET:
            raise TypeError(
                f"{cls.describe()} has no value; use const(value) to build one"
            )
        return cls.value

    @classmethod
    def _specialise(cls, params: Any) -> MarkerMeta:
        if cls is not Const:
            raise TypeError(f"{cls.describe()} is not a generic marker")
        return const(params)


def const(value: Any) -> MarkerMeta:
    """
    Return the constant marker for `value`.

    Markers are cached per (type, value), so `const(1)` and `const(True)`
    are distinct while `const(5) is const(5)`.

    Raises:
        TypeError: If `value` is unhashable.
    """
    try:
        hash(value)
    except TypeError:
        raise TypeError(
            f"Constant values must be hashable (immutable), got {type(value).__name__}"
        ) from None

    return cached_marker(
        ("const", type(value), value),
        lambda: make_marker(
            f"Const[{value!r}]",
            Const,
            {"_template": False, "_origin": (const, (value,)), "value": value},
        ),
    )


# =============================================================================
# CHARACTER CONSTANTS
# =============================================================================

ChA = const("A")
ChZ = const("Z")
Cha = const("a")
Chz = const("z")
Ch0 = const("0")
Ch9 = const("9")

ChSpace = const(" ")
ChTab = const("\t")
ChCR = const("\r")
ChLF = const("\n")
