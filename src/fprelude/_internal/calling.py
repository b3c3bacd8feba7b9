"""Arity-aware invocation of handlers.

Combinators accept handlers that either consume the payload (``T -> U``) or
ignore it (``() -> U``). The handler's signature decides which form is used.
Callables without an introspectable signature receive the payload.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from typing import Any

__all__ = ['call', 'call_each', 'resolve', 'resolve_call', 'takes_argument']

_PLACEHOLDER = object()


def takes_argument(fn: Callable[..., Any]) -> bool:
    """Return True if fn can be called with a single positional argument."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(_PLACEHOLDER)
    except TypeError:
        return False
    return True


def call(fn: Callable[..., Any], value: Any) -> Any:
    """Call fn with value, or with no arguments if fn is nullary."""
    if takes_argument(fn):
        return fn(value)
    return fn()


def call_each(actions: Iterable[Callable[..., Any]], value: Any) -> None:
    """Run every action against value, in order."""
    for action in actions:
        call(action, value)


async def resolve(value: Any) -> Any:
    """Await value until a non-awaitable remains.

    An awaitable that produces another awaitable collapses to one level.
    Plain values pass through untouched.
    """
    while inspect.isawaitable(value):
        value = await value
    return value


async def resolve_call(fn: Callable[..., Any], value: Any) -> Any:
    """Call fn the way ``call`` does and resolve whatever it returns."""
    return await resolve(call(fn, value))
