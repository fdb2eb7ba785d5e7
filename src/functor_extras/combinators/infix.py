"""Infix spellings of the functor combinators.

Python has no user-defined operators, so each combinator is wrapped in an
``Infix`` object that sits between two real operators:

    f <<fmap2>> v         # Haskell: f <$$> v
    a <<fconst2>> v       # Haskell: a <$$ v
    v <<freplace2>> a     # Haskell: v $$> a
    v |ffor2| f           # Haskell: v <&&> f

Transform and replace operators use the shift level (tight binding); the
flipped transform uses ``|`` (loose binding), so a pipeline reads left to
right after the container:

    f <<fmap2>> v |ffor2| g   ==   ffor2(fmap2(f, v), g)

Both levels associate left. Arithmetic binds tighter than either. A tight
operator refuses ``|`` and a loose one refuses ``<<``/``>>``.

Each ``Infix`` is also callable with the named function's arguments.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import update_wrapper
from typing import Any, Generic, TypeVar

from functor_extras.combinators import ops
from functor_extras.kernel import functor

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")


class Infix(Generic[L, R, T]):
    """Binary function usable as an infix operator.

    Attributes:
        loose: True for ``|left|`` binding, False for ``<<left>>`` binding.
    """

    def __init__(self, fn: Callable[[L, R], T], *, loose: bool = False) -> None:
        self._fn = fn
        self.loose = loose
        update_wrapper(self, fn)

    def __call__(self, left: L, right: R) -> T:
        return self._fn(left, right)

    def __rlshift__(self, left: L) -> _Pending[L, R, T]:
        if self.loose:
            return NotImplemented
        return _Pending(self, left)

    def __ror__(self, left: L) -> _Pending[L, R, T]:
        if not self.loose:
            return NotImplemented
        return _Pending(self, left)

    def __repr__(self) -> str:
        spelling = "|{}|" if self.loose else "<<{}>>"
        return f"Infix({spelling.format(self._fn.__name__)})"


@dataclass(frozen=True)
class _Pending(Generic[L, R, T]):
    """Left operand captured, waiting for the right one."""

    op: Infix[L, R, T]
    left: L

    def __rshift__(self, right: R) -> T:
        if self.op.loose:
            return NotImplemented
        return self.op(self.left, right)

    def __or__(self, right: R) -> T:
        if not self.op.loose:
            return NotImplemented
        return self.op(self.left, right)


fmap: Infix[Callable[[Any], Any], Any, Any] = Infix(functor.fmap)
fconst: Infix[Any, Any, Any] = Infix(ops.fconst)
freplace: Infix[Any, Any, Any] = Infix(ops.freplace)
ffor: Infix[Any, Callable[[Any], Any], Any] = Infix(ops.ffor, loose=True)

fmap2: Infix[Callable[[Any], Any], Any, Any] = Infix(ops.fmap2)
fconst2: Infix[Any, Any, Any] = Infix(ops.fconst2)
freplace2: Infix[Any, Any, Any] = Infix(ops.freplace2)
ffor2: Infix[Any, Callable[[Any], Any], Any] = Infix(ops.ffor2, loose=True)

fmap3: Infix[Callable[[Any], Any], Any, Any] = Infix(ops.fmap3)
fconst3: Infix[Any, Any, Any] = Infix(ops.fconst3)
freplace3: Infix[Any, Any, Any] = Infix(ops.freplace3)
ffor3: Infix[Any, Callable[[Any], Any], Any] = Infix(ops.ffor3, loose=True)

fmap4: Infix[Callable[[Any], Any], Any, Any] = Infix(ops.fmap4)
fconst4: Infix[Any, Any, Any] = Infix(ops.fconst4)
freplace4: Infix[Any, Any, Any] = Infix(ops.freplace4)
ffor4: Infix[Any, Callable[[Any], Any], Any] = Infix(ops.ffor4, loose=True)

fmap5: Infix[Callable[[Any], Any], Any, Any] = Infix(ops.fmap5)
fconst5: Infix[Any, Any, Any] = Infix(ops.fconst5)
freplace5: Infix[Any, Any, Any] = Infix(ops.freplace5)
ffor5: Infix[Any, Callable[[Any], Any], Any] = Infix(ops.ffor5, loose=True)

__all__ = [
    "Infix",
    "fmap",
    "fconst",
    "freplace",
    "ffor",
    "fmap2",
    "fconst2",
    "freplace2",
    "ffor2",
    "fmap3",
    "fconst3",
    "freplace3",
    "ffor3",
    "fmap4",
    "fconst4",
    "freplace4",
    "ffor4",
    "fmap5",
    "fconst5",
    "freplace5",
    "ffor5",
]
