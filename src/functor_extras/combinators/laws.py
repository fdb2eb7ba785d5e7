"""Functor laws and helpers for checking them.

Every transform in this package satisfies, for a container ``v`` whose layers
are lawful functors:

1. Identity: fmapN(identity, v) == v
   Mapping the identity function changes nothing

2. Composition: fmapN(compose(g, f), v) == fmapN(g, fmapN(f, v))
   One pass with the composed function equals two passes

Depth N inherits both from depth N-1 because fmapN is fmap around fmap{N-1}.
The checkers below evaluate the laws over a concrete value; they are meant
for tests of user-defined instances, not for runtime validation.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar

A = TypeVar("A")

Transform = Callable[[Callable[[Any], Any], Any], Any]


def identity(x: A) -> A:
    return x


def compose(*fs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions right to left: ``compose(g, f)(x) == g(f(x))``."""
    if not fs:
        return identity

    def _step(g: Callable[[Any], Any], f: Callable[[Any], Any]) -> Callable[[Any], Any]:
        return lambda x: g(f(x))

    return reduce(_step, fs)


def holds_identity(transform: Transform, value: Any) -> bool:
    """Check the identity law for ``transform`` (``fmap``, ``fmap2``, ...) at ``value``."""
    return transform(identity, value) == value


def holds_composition(
    transform: Transform,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    value: Any,
) -> bool:
    """Check the composition law for ``transform`` at ``value``.

    Args:
        transform: A transform such as ``fmap`` or ``fmap3``
        f: Applied first
        g: Applied second
        value: Container nested at least as deep as ``transform`` expects

    Returns:
        True when one pass with ``compose(g, f)`` equals two passes
    """
    return transform(compose(g, f), value) == transform(g, transform(f, value))
