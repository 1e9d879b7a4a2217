"""
Marker classes — the zero-size identities behind every refined type.

A marker is a class that is never instantiated. It carries no per-value
state; everything it knows lives on the class itself. Constants, orderings
and predicates are all markers.

Generic markers (templates) declare the parameters they accept and are
specialised by subscription:

    GreaterThan[TInt, const(5)]

Specialisation is cached. The same parameters always produce the same
class object, so markers can be compared with `is` and used as dict keys.
Marker classes are sealed: attributes cannot be set or deleted after the
class is created.
"""

from __future__ import annotations

import copyreg
import threading
from typing import Any, ClassVar, Optional


class MarkerMeta(type):
    """Metaclass for marker classes: sealed, non-instantiable, subscriptable."""

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        raise TypeError(
            f"{cls.describe()} is a marker and cannot be instantiated"
        )

    def __setattr__(cls, name: str, value: Any) -> None:
        raise AttributeError(
            f"{cls.describe()} is a marker; attribute '{name}' cannot be set"
        )

    def __delattr__(cls, name: str) -> None:
        raise AttributeError(
            f"{cls.describe()} is a marker; attribute '{name}' cannot be deleted"
        )

    def __getitem__(cls, params: Any) -> MarkerMeta:
        return cls._specialise(params)

    def __repr__(cls) -> str:
        return cls.describe()


class Marker(metaclass=MarkerMeta):
    """
    Base class of all markers.

    Template subclasses set `_template = True` and describe their
    parameters either as named slots or as a variadic kind:

        _slots = (("ord", Ord), ("const", Const))   # fixed arity
        _variadic = Pred                             # any number of Preds

    Specialised classes expose their parameters as `args` and, for
    slotted templates, as the named class attributes.
    """

    _template: ClassVar[bool] = False
    _slots: ClassVar[tuple[tuple[str, type], ...]] = ()
    _variadic: ClassVar[Optional[type]] = None

    args: ClassVar[tuple[Any, ...]] = ()

    @classmethod
    def describe(cls) -> str:
        """Human-readable identity of this marker."""
        return cls.__name__

    @classmethod
    def is_template(cls) -> bool:
        """True when this marker still needs parameters before use."""
        return cls._template

    @classmethod
    def _specialise(cls, params: Any) -> MarkerMeta:
        if not isinstance(params, tuple):
            params = (params,)
        return specialise(cls, params)


# =============================================================================
# SPECIALISATION CACHE
# =============================================================================

_cache: dict[tuple[Any, ...], MarkerMeta] = {}
_cache_lock = threading.Lock()


def cached_marker(key: tuple[Any, ...], build: Any) -> MarkerMeta:
    """
    Return the marker stored under `key`, building it once if missing.

    `build` is a zero-argument callable producing the marker class. The
    lock guarantees that concurrent first lookups yield a single class.
    """
    marker = _cache.get(key)
    if marker is not None:
        return marker

    with _cache_lock:
        marker = _cache.get(key)
        if marker is None:
            marker = build()
            _cache[key] = marker
    return marker


def make_marker(
    name: str,
    base: MarkerMeta,
    namespace: dict[str, Any],
) -> MarkerMeta:
    """Create a sealed marker class deriving from `base`."""
    namespace = {
        "__module__": base.__module__,
        "__qualname__": name,
        "__doc__": base.__doc__,
        **namespace,
    }
    return MarkerMeta(name, (base,), namespace)


def _check_param(template: MarkerMeta, position: str, param: Any, kind: type) -> None:
    if not (isinstance(param, type) and issubclass(param, kind)):
        raise TypeError(
            f"{template.describe()} expects a {kind.__name__} marker for "
            f"{position}, got {param!r}"
        )
    if issubclass(param, Marker) and param.is_template():
        raise TypeError(
            f"{template.describe()} parameter {position} is the generic "
            f"marker {param.describe()}; specialise it first"
        )


def specialise(template: MarkerMeta, params: tuple[Any, ...]) -> MarkerMeta:
    """
    Specialise a template marker with the given parameters.

    Raises:
        TypeError: If `template` is not generic, or if the parameters do
            not match what the template declares.
    """
    if not template.is_template():
        raise TypeError(f"{template.describe()} is not a generic marker")

    if template._variadic is not None:
        for index, param in enumerate(params):
            _check_param(template, f"#{index}", param, template._variadic)
        namespace: dict[str, Any] = {}
    else:
        if len(params) != len(template._slots):
            raise TypeError(
                f"{template.describe()} takes {len(template._slots)} "
                f"parameter(s), got {len(params)}"
            )
        for (slot, kind), param in zip(template._slots, params):
            _check_param(template, f"'{slot}'", param, kind)
        namespace = {slot: param for (slot, _), param in zip(template._slots, params)}

    def build() -> MarkerMeta:
        name = "{}[{}]".format(
            template.__name__,
            ", ".join(param.describe() for param in params),
        )
        return make_marker(
            name,
            template,
            {
                "_template": False,
                "_origin": (specialise, (template, params)),
                "args": params,
                **namespace,
            },
        )

    return cached_marker((template, params), build)


# =============================================================================
# PICKLING
# =============================================================================

def _reduce_marker(marker: MarkerMeta) -> Any:
    """
    Pickle markers built by a factory through that factory.

    Generated markers record `_origin = (factory, args)`; markers defined
    with a class statement are pickled by qualified name.
    """
    origin = marker.__dict__.get("_origin")
    if origin is None:
        return marker.__qualname__
    return origin


copyreg.pickle(MarkerMeta, _reduce_marker)
