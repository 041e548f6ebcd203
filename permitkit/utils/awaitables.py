from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Iterable, List, TypeVar

T = TypeVar("T")


async def resolve(value: Any) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


async def gather_flat(
    func: Callable[[Any], Awaitable[List[T]]], items: Iterable[Any]
) -> List[T]:
    """Run ``func`` over ``items`` concurrently and concatenate results in input order.

    Every item runs to completion. If any of them fails, the first failure in
    input order is raised once all have finished.
    """
    results = await asyncio.gather(
        *(func(item) for item in items), return_exceptions=True
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return [element for result in results for element in result]
