"""Structured fan-out helper for independent awaitables."""

import asyncio
from collections.abc import Awaitable
from typing import Any


async def run_concurrently(*aws: Awaitable[Any]) -> list[Any]:
    """Run awaitables concurrently and return their results in argument order.

    All awaitables are started together inside a ``TaskGroup``. If any of
    them fails the remaining ones are cancelled and the first recorded
    failure is re-raised as-is (not wrapped in an ``ExceptionGroup``), so
    callers never observe a mix of results and errors.
    """
    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(_as_coroutine(aw)) for aw in aws]
    except ExceptionGroup as eg:
        raise eg.exceptions[0] from None

    return [task.result() for task in tasks]


async def _as_coroutine(aw: Awaitable[Any]) -> Any:
    return await aw
