"""
Refinement wrapper — a value proven to satisfy a predicate.

CORE INVARIANT:
    Every live `Refined[P]` instance holds a value for which `P.true`
    returned True at construction time. Instances are frozen, and unhashable
    values are deep-copied on the way in, so the invariant holds
    for the instance's whole lifetime. Unhashable values that cannot be
    deep-copied (locks, open files) are stored as-is and stay the caller's
    responsibility.

Construction:
    Refined[P](value)         raises PredicateViolation on failure
    refine(value, P)          same, as a function
    try_refine(value, P)      returns a RefineResult, never raises for a
                              failed predicate
    Refined[P].try_new(value) class-level form of try_refine

Equality and hashing delegate to the wrapped value. Two wrappers with
different predicates but equal values compare equal, and a wrapper
compares equal to its raw value: predicates are a definition-time
distinction with no identity of their own at runtime.
"""

from __future__ import annotations

import copy
import logging
import threading
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from .markers import MarkerMeta
from .predicates.base import Pred

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Longest repr of a rejected value kept in error messages.
MAX_REPR_LENGTH = 80


def short_repr(value: Any) -> str:
    """repr() truncated to MAX_REPR_LENGTH characters."""
    text = repr(value)
    if len(text) > MAX_REPR_LENGTH:
        text = text[:MAX_REPR_LENGTH - 3] + "..."
    return text


class PredicateViolation(ValueError):
    """Raised when a value does not satisfy the predicate of a refined type."""

    def __init__(self, predicate: MarkerMeta, value: Any):
        self.predicate = predicate
        self.value = value
        super().__init__(f"[{predicate.describe()}] rejected value {short_repr(value)}")


# =============================================================================
# REFINED
# =============================================================================

_specialisations: dict[MarkerMeta, type] = {}
_specialisations_lock = threading.Lock()


def _detach(value: Any) -> Any:
    """
    Return a private copy of `value` if it may be mutable.

    Hashable values (ints, strings, tuples of hashables) are returned
    unchanged. Anything else, including a tuple holding a list, is
    deep-copied. Values deepcopy cannot handle are returned unchanged.
    """
    try:
        hash(value)
        return value
    except TypeError:
        pass

    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error) as e:
        logger.debug("Storing uncopyable %s as-is: %s", type(value).__name__, e)
        return value


def _check_predicate(predicate: Any) -> None:
    if not (isinstance(predicate, type) and issubclass(predicate, Pred)):
        raise TypeError(f"Refined expects a predicate marker, got {predicate!r}")
    if predicate.is_template():
        raise TypeError(
            f"{predicate.describe()} is a generic predicate; specialise it first"
        )


@dataclass(frozen=True, eq=False)
class Refined:
    """
    A value paired with the proof that `predicate` holds for it.

    Use `Refined[P]` to get the refined type for predicate `P`; the bare
    `Refined` class cannot be constructed.
    """
    value: Any

    predicate: ClassVar[Optional[MarkerMeta]] = None

    def __post_init__(self):
        """Enforce the predicate at construction time."""
        predicate = type(self).predicate
        if predicate is None:
            raise TypeError(
                "Refined must be specialised with a predicate, e.g. Refined[Digit]"
            )

        object.__setattr__(self, "value", _detach(self.value))

        if not predicate.true(self.value):
            logger.debug(
                "%s rejected value %s", predicate.describe(), short_repr(self.value)
            )
            raise PredicateViolation(predicate, self.value)

    def __class_getitem__(cls, predicate: Any) -> type:
        if cls.predicate is not None:
            raise TypeError(f"{cls.__qualname__} is already refined")
        _check_predicate(predicate)

        refined_type = _specialisations.get(predicate)
        if refined_type is not None:
            return refined_type

        with _specialisations_lock:
            refined_type = _specialisations.get(predicate)
            if refined_type is None:
                name = f"Refined[{predicate.describe()}]"
                refined_type = type(cls)(
                    name,
                    (cls,),
                    {
                        "__module__": cls.__module__,
                        "__qualname__": name,
                        "predicate": predicate,
                    },
                )
                _specialisations[predicate] = refined_type
        return refined_type

    @classmethod
    def try_new(cls, value: Any) -> RefineResult:
        """Attempt construction; a failed predicate becomes a rejected result."""
        try:
            return RefineResult(accepted=True, refined=cls(value))
        except PredicateViolation as e:
            return RefineResult(accepted=False, violation=e)

    def unwrap(self) -> Any:
        """Return the wrapped value."""
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Refined):
            return self.value == other.value
        return self.value == other

    def __hash__(self) -> int:
        return hash(self.value)

    def __reduce__(self):
        # Rebuilt through refine() so unpickling re-checks the predicate.
        return (refine, (self.value, type(self).predicate))


@dataclass(frozen=True)
class RefineResult:
    """Outcome of a Try-construct: either a Refined instance or the violation."""
    accepted: bool
    refined: Optional[Refined] = None
    violation: Optional[PredicateViolation] = None

    def unwrap(self) -> Refined:
        """
        Return the refined instance.

        Raises:
            PredicateViolation: If the value was rejected.
        """
        if not self.accepted:
            raise self.violation
        return self.refined


# =============================================================================
# FUNCTIONAL FORMS
# =============================================================================

def refine(value: Any, predicate: MarkerMeta) -> Refined:
    """
    Wrap `value` in `Refined[predicate]`.

    Raises:
        PredicateViolation: If `predicate.true(value)` is False.
    """
    return Refined[predicate](value)


def try_refine(value: Any, predicate: MarkerMeta) -> RefineResult:
    """Wrap `value` in `Refined[predicate]`, reporting failure as a result."""
    return Refined[predicate].try_new(value)
