# refined
# Refinement types and the non-null Some wrapper

"""
Core guarantee: a refined value always satisfies its predicate, and a Some
always holds a present value. Both are enforced at construction time;
failures are raised, never defaulted.

Modules:
    markers      — sealed, non-instantiable marker classes
    constants    — constant markers (`const(5)`, `ChA`, ...)
    ordering     — ordering markers (`TInt`, `ordering(fn)`, ...)
    predicates   — primitives, combinators, character classes
    refinement   — `Refined[P]`, `refine`, `try_refine`
    some         — `Some`, `to_some`
"""

from .constants import Const, const
from .ordering import NaturalOrd, Ord, ordering, ordering_by_key
from .refinement import PredicateViolation, RefineResult, Refined, refine, try_refine
from .some import NullValueError, Some, UninitializedAccessError, to_some

__all__ = [
    "Const",
    "NaturalOrd",
    "NullValueError",
    "Ord",
    "PredicateViolation",
    "RefineResult",
    "Refined",
    "Some",
    "UninitializedAccessError",
    "const",
    "ordering",
    "ordering_by_key",
    "refine",
    "to_some",
    "try_refine",
]
