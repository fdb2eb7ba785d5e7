"""Single-layer functor capability.

A value is a functor when ``fmap`` knows how to map over it, either because
its type has a registered instance or because it exposes a ``map`` method.
Built-in containers cannot grow a ``map`` method, so they get instances here.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Awaitable, Callable, Iterator
from functools import singledispatch
from typing import Any, Protocol, TypeVar, runtime_checkable

from functor_extras.kernel.errors import NotAFunctorError

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
A_co = TypeVar("A_co", covariant=True)

Mapper = Callable[[Callable[[Any], Any], Any], Any]


@runtime_checkable
class Functor(Protocol[A_co]):
    """Structure-preserving container over a single value type.

    Implementations must satisfy:
    - identity: ``fa.map(lambda x: x) == fa``
    - composition: ``fa.map(lambda x: g(f(x))) == fa.map(f).map(g)``
    """

    def map(self, f: Callable[[A_co], B]) -> Functor[B]: ...


@singledispatch
def _map_layer(fa: Any, f: Callable[[Any], Any]) -> Any:
    method = getattr(fa, "map", None)
    if not callable(method):
        raise NotAFunctorError(f"{type(fa).__name__!r} is not a functor", fa)
    return method(f)


def fmap(f: Callable[[A], B], fa: Any) -> Any:
    """Map ``f`` over the values of one container layer.

    Dispatches on the type of ``fa``. Types without a registered instance
    fall back to their own ``map`` method.

    Args:
        f: Transform applied to every contained value
        fa: The container

    Returns:
        A container of the same shape holding the transformed values

    Raises:
        NotAFunctorError: ``fa`` has neither an instance nor a ``map`` method
    """
    return _map_layer(fa, f)


def register_functor(cls: type, mapper: Mapper | None = None) -> Any:
    """Register a functor instance for ``cls``.

    ``mapper`` takes ``(f, fa)`` like ``fmap`` and must preserve shape.
    Without ``mapper`` this returns a decorator, so both spellings work:

        register_functor(Tree, map_tree)

        @register_functor(Tree)
        def map_tree(f, tree): ...

    Subclasses of ``cls`` share the instance unless they register their own
    or define a ``map`` method of their own, which then takes over.
    """
    if mapper is None:
        def decorator(fn: Mapper) -> Mapper:
            register_functor(cls, fn)
            return fn

        return decorator

    inherited_map = getattr(cls, "map", None)

    def _instance(fa: Any, f: Callable[[Any], Any]) -> Any:
        own_map = getattr(type(fa), "map", None)
        if own_map is not inherited_map and callable(own_map):
            return fa.map(f)
        return mapper(f, fa)

    _map_layer.register(cls, _instance)
    logger.debug("registered functor instance for %s", cls.__qualname__)
    return mapper


def is_functor(value: object) -> bool:
    """Check whether ``fmap`` can map over ``value``."""
    if _map_layer.dispatch(type(value)) is not _map_layer.dispatch(object):
        return True
    return callable(getattr(value, "map", None))


# Instances for the host's built-in containers. Subclasses are rebuilt as
# their own type; extra state such as defaultdict.default_factory survives
# through copy.copy.


@register_functor(list)
def _map_list(f: Callable[[A], B], fa: list[A]) -> list[B]:
    if type(fa) is list:
        return [f(x) for x in fa]
    mapped = copy.copy(fa)
    mapped[:] = [f(x) for x in fa]
    return mapped


@register_functor(tuple)
def _map_tuple(f: Callable[[A], B], fa: tuple[A, ...]) -> tuple[B, ...]:
    if type(fa) is tuple:
        return tuple(f(x) for x in fa)
    make = getattr(fa, "_make", None)
    if make is not None:
        return make(f(x) for x in fa)
    return type(fa)(f(x) for x in fa)


@register_functor(dict)
def _map_dict(f: Callable[[A], B], fa: dict[Any, A]) -> dict[Any, B]:
    if type(fa) is dict:
        return {key: f(value) for key, value in fa.items()}
    mapped = copy.copy(fa)
    for key, value in fa.items():
        mapped[key] = f(value)
    return mapped


@register_functor(Iterator)
def _map_iterator(f: Callable[[A], B], fa: Iterator[A]) -> Iterator[B]:
    return map(f, fa)


@register_functor(Awaitable)
def _map_awaitable(f: Callable[[A], B], fa: Awaitable[A]) -> Awaitable[B]:
    async def _mapped() -> B:
        return f(await fa)

    return _mapped()
