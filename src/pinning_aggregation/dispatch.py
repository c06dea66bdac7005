"""Concurrent fan-out helpers.

Two policies, kept apart so every call site states which one it wants:

- all_succeed: every call must succeed; the first failure propagates while
  the remaining calls keep running to completion on their own.
- best_effort: every call runs to completion; failures are collected and
  handed back instead of raised.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Iterable, TypeVar

T = TypeVar("T")


async def all_succeed(calls: Iterable[Awaitable[T]]) -> list[T]:
    """Run calls concurrently, return their results in input order."""
    return list(await asyncio.gather(*calls))


async def best_effort(calls: Iterable[Awaitable[Any]]) -> list[Exception]:
    """Run calls concurrently, wait for all to settle, return the failures."""
    results = await asyncio.gather(*calls, return_exceptions=True)
    return [r for r in results if isinstance(r, Exception)]
