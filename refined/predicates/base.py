"""
Predicate markers and the logical combinators.

A predicate is a marker class with a single decision procedure:

    Pred.true(value) -> bool

`true` is total and pure. It never raises for any input value, and the
same input always gives the same answer. Subclasses implement
`_evaluate`; `true` guards against use of an unspecialised template.

Combinators:
    AllOf[P1, ..., Pn]  — every sub-predicate holds (AllOf[()] is True)
    AnyOf[P1, ..., Pn]  — at least one holds (AnyOf[()] is False)

Named predicates that are defined in terms of others derive from `Alias`
and set `definition`. `explain()` walks these definitions.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from ..markers import Marker, MarkerMeta


class Pred(Marker):
    """Base predicate marker."""

    @classmethod
    def true(cls, value: Any) -> bool:
        """Decide whether `value` satisfies this predicate."""
        if cls.is_template():
            raise TypeError(
                f"{cls.describe()} is a generic predicate; specialise it "
                f"before use, e.g. {cls.describe()}[...]"
            )
        return bool(cls._evaluate(value))

    @classmethod
    def _evaluate(cls, value: Any) -> bool:
        raise TypeError(f"{cls.describe()} does not define a decision procedure")

    @classmethod
    def children(cls) -> tuple[MarkerMeta, ...]:
        """Sub-predicates this predicate is built from."""
        return tuple(
            arg for arg in cls.args
            if isinstance(arg, type) and issubclass(arg, Pred)
        )


class Alias(Pred):
    """A named predicate defined as another predicate."""

    definition: ClassVar[Optional[MarkerMeta]] = None

    @classmethod
    def _evaluate(cls, value: Any) -> bool:
        if cls.definition is None:
            raise TypeError(f"{cls.describe()} has no definition")
        return cls.definition.true(value)

    @classmethod
    def children(cls) -> tuple[MarkerMeta, ...]:
        return (cls.definition,) if cls.definition is not None else ()


# =============================================================================
# COMBINATORS
# =============================================================================

class AllOf(Pred):
    """Logical AND of the sub-predicates. Vacuously true when empty."""

    _template = True
    _variadic = Pred

    @classmethod
    def _evaluate(cls, value: Any) -> bool:
        return all(pred.true(value) for pred in cls.args)


class AnyOf(Pred):
    """Logical OR of the sub-predicates. Vacuously false when empty."""

    _template = True
    _variadic = Pred

    @classmethod
    def _evaluate(cls, value: Any) -> bool:
        return any(pred.true(value) for pred in cls.args)


ForAll = AllOf
Exists = AnyOf


# =============================================================================
# DIAGNOSTICS
# =============================================================================

def explain(pred: MarkerMeta) -> str:
    """
    Render the composition tree of a predicate.

    Example for AlphaNum:

        AlphaNum
          = AnyOf[Letter, Digit]
              Letter
                = AnyOf[Upper, Lower]
                ...
    """
    lines: list[str] = []
    _explain_into(pred, 0, "", lines)
    return "\n".join(lines)


def _explain_into(pred: MarkerMeta, depth: int, prefix: str, lines: list[str]) -> None:
    lines.append(f"{'  ' * depth}{prefix}{pred.describe()}")
    if not issubclass(pred, Pred):
        return

    if issubclass(pred, Alias):
        for child in pred.children():
            _explain_into(child, depth + 1, "= ", lines)
    else:
        for child in pred.children():
            _explain_into(child, depth + 2, "", lines)
