"""Multi-level functor combinators: fmap, fconst, freplace, ffor, void.

Every depth-N operation is one ``fmap`` around the depth-(N-1) operation:

    fmap2(f, v)   == fmap(partial(fmap, f), v)
    fconst3(a, v) == fmap(partial(fconst2, a), v)
    void4(v)      == fmap(void3, v)

so the functor laws of each layer carry over to the nested operation.
The flipped forms are argument swaps, nothing more.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import Any, TypeVar

from functor_extras.kernel import fmap

A = TypeVar("A")
B = TypeVar("B")


# Single level


def fconst(a: A, fa: Any) -> Any:
    """Replace every value in ``fa`` with ``a``.

    Named version of Haskell's ``<$``. Easier to partially apply than an
    operator.
    """
    return fmap(lambda _: a, fa)


def freplace(fa: Any, a: A) -> Any:
    """Flipped fconst."""
    return fconst(a, fa)


def ffor(fa: Any, f: Callable[[A], B]) -> Any:
    """Flipped fmap.

    Useful when the function is the larger argument, e.g. a multi-line
    ``def`` passed after the container.
    """
    return fmap(f, fa)


def void(fa: Any) -> Any:
    """Replace every value in ``fa`` with ``None``."""
    return fconst(None, fa)


# Two levels: functors containing functors


def fmap2(f: Callable[[A], B], v: Any) -> Any:
    """Two-level fmap.

    Example:
        >>> fmap2(lambda x: x + 1, [[1, 2], [3]])
        [[2, 3], [4]]
    """
    return fmap(partial(fmap, f), v)


def fconst2(a: A, v: Any) -> Any:
    """Two-level fconst."""
    return fmap(partial(fconst, a), v)


def freplace2(v: Any, a: A) -> Any:
    """Two-level freplace."""
    return fconst2(a, v)


def ffor2(v: Any, f: Callable[[A], B]) -> Any:
    """Flipped two-level fmap."""
    return fmap2(f, v)


def void2(v: Any) -> Any:
    """Two-level void."""
    return fmap(void, v)


# Three levels


def fmap3(f: Callable[[A], B], v: Any) -> Any:
    """Three-level fmap."""
    return fmap(partial(fmap2, f), v)


def fconst3(a: A, v: Any) -> Any:
    """Three-level fconst."""
    return fmap(partial(fconst2, a), v)


def freplace3(v: Any, a: A) -> Any:
    """Three-level freplace."""
    return fconst3(a, v)


def ffor3(v: Any, f: Callable[[A], B]) -> Any:
    """Flipped three-level fmap."""
    return fmap3(f, v)


def void3(v: Any) -> Any:
    """Three-level void."""
    return fmap(void2, v)


# Four levels


def fmap4(f: Callable[[A], B], v: Any) -> Any:
    """Four-level fmap."""
    return fmap(partial(fmap3, f), v)


def fconst4(a: A, v: Any) -> Any:
    """Four-level fconst."""
    return fmap(partial(fconst3, a), v)


def freplace4(v: Any, a: A) -> Any:
    """Four-level freplace."""
    return fconst4(a, v)


def ffor4(v: Any, f: Callable[[A], B]) -> Any:
    """Flipped four-level fmap."""
    return fmap4(f, v)


def void4(v: Any) -> Any:
    """Four-level void."""
    return fmap(void3, v)


# Five levels


def fmap5(f: Callable[[A], B], v: Any) -> Any:
    """Five-level fmap."""
    return fmap(partial(fmap4, f), v)


def fconst5(a: A, v: Any) -> Any:
    """Five-level fconst."""
    return fmap(partial(fconst4, a), v)


def freplace5(v: Any, a: A) -> Any:
    """Five-level freplace."""
    return fconst5(a, v)


def ffor5(v: Any, f: Callable[[A], B]) -> Any:
    """Flipped five-level fmap."""
    return fmap5(f, v)


def void5(v: Any) -> Any:
    """Five-level void."""
    return fmap(void4, v)
