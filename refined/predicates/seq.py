"""
Sequence-length predicates.

These operate on `SeqInfo`, a pre-computed count, so a length bound can be
checked without materialising or walking the sequence. Values that are
not `SeqInfo` satisfy none of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sized

from ..constants import Const, const
from .base import Alias, Pred


@dataclass(frozen=True)
class SeqInfo:
    """Known size of a sequence or collection."""
    count: int

    def __post_init__(self):
        """Counts are non-negative integers."""
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError(
                f"count must be an int, got {type(self.count).__name__}"
            )
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")

    @classmethod
    def of(cls, items: Sized) -> SeqInfo:
        """Build from anything with a length."""
        return cls(count=len(items))


class MaxCount(Pred):
    """At most MAX items. A bound of zero admits only empty sequences."""

    _template = True
    _slots = (("max", Const),)

    @classmethod
    def _evaluate(cls, value: Any) -> bool:
        return isinstance(value, SeqInfo) and value.count <= cls.max.get()


class MinCount(Pred):
    """At least MIN items."""

    _template = True
    _slots = (("min", Const),)

    @classmethod
    def _evaluate(cls, value: Any) -> bool:
        return isinstance(value, SeqInfo) and value.count >= cls.min.get()


class NonEmpty(Alias):
    """At least one item."""

    definition = MinCount[const(1)]
