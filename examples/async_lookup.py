from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from functor_extras import fmap2, infix as op, register_functor, void2

logging.basicConfig(level=logging.DEBUG)


@dataclass(frozen=True)
class Found:
    value: Any


# Found has no map method; it becomes a functor through a registered instance.
@register_functor(Found)
def map_found(f: Callable[[Any], Any], found: Found) -> Found:
    return Found(f(found.value))


@dataclass(frozen=True)
class Missing:
    def map(self, f: Callable[[Any], Any]) -> Missing:
        _ = f
        return self


USERS = {1: "ada", 2: "grace"}


async def lookup(user_id: int) -> Found | Missing:
    await asyncio.sleep(0)
    if user_id in USERS:
        return Found(USERS[user_id])
    return Missing()


async def main() -> None:
    # Awaitable[Found[str]] -> Awaitable[Found[str]] without unwrapping either layer
    print(await fmap2(str.title, lookup(1)))
    print(await (lookup(3) |op.ffor2| str.title))
    print(await void2(lookup(2)))


if __name__ == "__main__":
    asyncio.run(main())
