"""Combinators - multi-level functor operations for nesting depths 1 to 5."""

from functor_extras.combinators import infix
from functor_extras.combinators.laws import compose, holds_composition, holds_identity, identity
from functor_extras.combinators.ops import (
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
    void,
    void2,
    void3,
    void4,
    void5,
)

__all__ = [
    "infix",
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
]
