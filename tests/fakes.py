from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NamedTuple, TypeVar

from functor_extras import register_functor

A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")


@dataclass(frozen=True)
class Some(Generic[A]):
    value: A

    def map(self, f: Callable[[A], B]) -> Some[B]:
        return Some(f(self.value))


@dataclass(frozen=True)
class Nothing:
    def map(self, f: Callable[[Any], Any]) -> Nothing:
        _ = f
        return self


@dataclass(frozen=True)
class Left(Generic[E]):
    error: E

    def map(self, f: Callable[[Any], Any]) -> Left[E]:
        _ = f
        return self


@dataclass(frozen=True)
class Right(Generic[A]):
    value: A

    def map(self, f: Callable[[A], B]) -> Right[B]:
        return Right(f(self.value))


@dataclass(frozen=True)
class Pair(Generic[A]):
    """Two values of the same type. No map method: mapped via a registered instance."""

    first: A
    second: A


@register_functor(Pair)
def map_pair(f: Callable[[A], B], pair: Pair[A]) -> Pair[B]:
    return Pair(f(pair.first), f(pair.second))


@dataclass(frozen=True)
class Opaque:
    """A value that is not a functor."""

    payload: Any = None


def fetch_later(value: A) -> Any:
    """Coroutine that produces ``value`` when awaited."""
    async def _fetch() -> A:
        return value

    return _fetch()


class Point(NamedTuple):
    x: Any
    y: Any


class Stream(list):
    """List subclass with its own map; ``via`` records which path built it."""

    via = "constructor"

    def map(self, f: Callable[[Any], Any]) -> Stream:
        mapped = Stream(f(x) for x in self)
        mapped.via = "map"
        return mapped


class TaggedList(list):
    """List subclass without map, carrying instance state."""

    def __init__(self, items: Any = (), tag: str = "") -> None:
        super().__init__(items)
        self.tag = tag
