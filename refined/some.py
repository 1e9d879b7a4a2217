"""
Some — a container that can only hold a present value.

`Some(value)` refuses `None`, which is Python's absent sentinel. The
optional view of a `Some` is a plain `Optional[A]`: the value, or `None`.

    Some(x).to_optional()      total, always x
    Some.from_optional(opt)    partial, raises NullValueError on None

ESCAPE HATCH:
    `Some.from_iterable(values)` takes at most the first element. An empty
    iterable produces an *uninitialised* Some whose `is_some` is False even
    though its type promises presence. This exists only for serialisation
    frameworks that must build an instance before they have a value, and
    is what `pickle` / `copy` use to rebuild a Some. Reading the value of
    an uninitialised Some raises UninitializedAccessError.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

logger = logging.getLogger(__name__)

A = TypeVar("A")
R = TypeVar("R")


class NullValueError(ValueError):
    """Raised when a Some is built from an absent (None) value."""
    pass


class UninitializedAccessError(RuntimeError):
    """
    Raised when reading the value of an uninitialised Some.

    This signals a broken invariant (a deserialiser never populated the
    wrapper), not a normal control-flow condition.
    """

    def __init__(self, value_type: Optional[type] = None):
        self.value_type = value_type
        target = f"Some[{value_type.__name__}]" if value_type else "Some"
        super().__init__(f"{target} has not been initialised")


class Some(Generic[A]):
    """A present value of type A."""

    __slots__ = ("_value", "_initialised", "_type")

    def __init__(self, value: A):
        if value is None:
            raise NullValueError("Value is None when expecting Some(x)")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_initialised", True)
        object.__setattr__(self, "_type", type(value))

    @classmethod
    def from_iterable(
        cls,
        values: Iterable[A],
        *,
        value_type: Optional[type] = None,
    ) -> Some[A]:
        """
        Build from the first element of `values`.

        An empty iterable yields an uninitialised Some. A None first
        element raises NullValueError. `value_type` names the promised
        type of an uninitialised Some for `underlying_type()` and error
        messages; it is ignored when a value is present.
        """
        first = list(itertools.islice(values, 1))
        if first:
            return cls(first[0])

        logger.debug("Some built from an empty iterable; instance is uninitialised")
        instance = object.__new__(cls)
        object.__setattr__(instance, "_value", None)
        object.__setattr__(instance, "_initialised", False)
        object.__setattr__(instance, "_type", value_type)
        return instance

    @classmethod
    def from_optional(cls, value: Optional[A]) -> Some[A]:
        """
        Convert an optional value into a Some.

        Raises:
            NullValueError: If `value` is None (absent).
        """
        if value is None:
            raise NullValueError("Cannot build Some from an absent optional value")
        return cls(value)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def is_some(self) -> bool:
        return self._initialised

    @property
    def is_none(self) -> bool:
        return not self._initialised

    @property
    def value(self) -> A:
        """
        The held value.

        Raises:
            UninitializedAccessError: If this Some was never initialised.
        """
        if not self._initialised:
            raise UninitializedAccessError(self._type)
        return self._value

    def unwrap(self) -> A:
        """Return the held value; see `value`."""
        return self.value

    def underlying_type(self) -> Optional[type]:
        """
        Type of the held value.

        For an uninitialised Some this is the `value_type` it was built
        with, or None when none was given.
        """
        return self._type

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_optional(self) -> Optional[A]:
        """The value if initialised, None otherwise. Never raises."""
        return self._value if self._initialised else None

    def to_list(self) -> list[A]:
        """A one-element list when initialised, an empty list otherwise."""
        return [self._value] if self._initialised else []

    def match(self, some: Callable[[A], R], none: Callable[[], R]) -> R:
        """Dispatch on the initialised state."""
        if self._initialised:
            return some(self._value)
        return none()

    def __iter__(self) -> Iterator[A]:
        return iter(self.to_list())

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Some is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Some is immutable")

    def __reduce__(self):
        value_type = None if self._initialised else self._type
        return (_rebuild_some, (self.to_list(), value_type))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Some):
            if self._initialised and other._initialised:
                return self._value == other._value
            return self._initialised == other._initialised
        if not self._initialised:
            return False
        return self._value == other

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        if not self._initialised:
            return "Some(<uninitialised>)"
        return f"Some({self._value!r})"


def _rebuild_some(values: list, value_type: Optional[type] = None) -> Some:
    return Some.from_iterable(values, value_type=value_type)


def to_some(value: A) -> Some[A]:
    """Wrap a value in Some; raises NullValueError for None."""
    return Some(value)
