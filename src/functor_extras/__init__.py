"""Multi-level functors (functors of functors).

Containers holding containers are common: an awaitable that produces an
optional value, a list of optional results, a dict of lists. Mapping through
them by hand means one ``fmap`` per layer. This package provides the
multi-level forms, so

    fmap(lambda m: fmap(f, m), fetch())

becomes

    fmap2(f, fetch())      # or: f <<infix.fmap2>> fetch()
"""

from .combinators import (
    compose,
    fconst,
    fconst2,
    fconst3,
    fconst4,
    fconst5,
    ffor,
    ffor2,
    ffor3,
    ffor4,
    ffor5,
    fmap2,
    fmap3,
    fmap4,
    fmap5,
    freplace,
    freplace2,
    freplace3,
    freplace4,
    freplace5,
    holds_composition,
    holds_identity,
    identity,
    infix,
    void,
    void2,
    void3,
    void4,
    void5,
)
from .kernel import Functor, NotAFunctorError, fmap, is_functor, register_functor

__all__ = [
    # Capability
    "Functor",
    "fmap",
    "register_functor",
    "is_functor",
    "NotAFunctorError",
    # Single level
    "fconst",
    "freplace",
    "ffor",
    "void",
    # Two levels
    "fmap2",
    "fconst2",
    "freplace2",
    "ffor2",
    "void2",
    # Three levels
    "fmap3",
    "fconst3",
    "freplace3",
    "ffor3",
    "void3",
    # Four levels
    "fmap4",
    "fconst4",
    "freplace4",
    "ffor4",
    "void4",
    # Five levels
    "fmap5",
    "fconst5",
    "freplace5",
    "ffor5",
    "void5",
    # Laws
    "identity",
    "compose",
    "holds_identity",
    "holds_composition",
    # Operators
    "infix",
]
