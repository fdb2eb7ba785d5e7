"""Kernel layer - the single-layer functor capability."""

from functor_extras.kernel.errors import NotAFunctorError
from functor_extras.kernel.functor import Functor, fmap, is_functor, register_functor

__all__ = [
    "Functor",
    "fmap",
    "register_functor",
    "is_functor",
    "NotAFunctorError",
]
