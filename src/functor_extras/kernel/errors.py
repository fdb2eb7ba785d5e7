"""Error types for the functor capability."""

from __future__ import annotations


class NotAFunctorError(TypeError):
    """Error raised when fmap reaches a value with no functor instance.

    The offending value is kept on the error so callers can see which
    layer of a nested structure was not mappable.
    """

    def __init__(self, message: str, value: object) -> None:
        self.value = value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"NotAFunctorError({super().__repr__()}, value={self.value!r})"
