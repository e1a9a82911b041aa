"""Helpers for calling user supplied predicates."""

import inspect
from typing import Any, Callable


async def call_predicate(predicate: Callable[..., Any], *args: Any) -> Any:
    """Call a predicate that may be a plain function or a coroutine function."""
    result = predicate(*args)
    if inspect.isawaitable(result):
        result = await result
    return result
