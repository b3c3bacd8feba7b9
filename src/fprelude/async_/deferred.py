"""Deferred: a chainable handle over a pending Option, Result or value.

Deferred wraps one awaitable and exposes the async combinators as methods,
so a pipeline reads left to right and runs only when awaited.

Example:
    ```python
    async def fetch_user(user_id: int) -> Result[User, str]: ...
    async def load_orders(user: User) -> Result[list[Order], str]: ...

    orders = await (
        Deferred(fetch_user(1))
        .bind(load_orders)
        .map(len)
        .reduce(0)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import Any

from fprelude._internal.calling import resolve
from fprelude.async_ import combinators

__all__ = ['Deferred']


class Deferred[T]:
    """Chainable wrapper around an awaitable.

    Every method returns a new Deferred; nothing runs until the chain is
    awaited. ``await`` resolves nested awaitables, so the result is always
    a concrete value.

    Note:
        A Deferred is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same Deferred
        twice raises RuntimeError. Use ``Deferred.of`` for a ready value,
        or wrap a Task/Future to await more than once.

    Attributes:
        _awaitable: The underlying awaitable, or a ready value.
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[T] | T) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, T]:
        return resolve(self._awaitable).__await__()

    def __repr__(self) -> str:
        return f'Deferred({self._awaitable!r})'

    @classmethod
    def of(cls, value: T) -> Deferred[T]:
        """Wrap a ready value. The result can be awaited any number of times."""
        return cls(value)

    def _then(self, operation: Callable[..., Awaitable[Any]], *args: Any) -> Deferred[Any]:
        return Deferred(operation(self._awaitable, *args))

    def map(self, mapper: Callable[..., Any]) -> Deferred[Any]:
        """Chain ``map_async``."""
        return self._then(combinators.map_async, mapper)

    def map_failure(self, mapper: Callable[..., Any]) -> Deferred[Any]:
        """Chain ``map_failure_async``."""
        return self._then(combinators.map_failure_async, mapper)

    def bind(self, binder: Callable[..., Any]) -> Deferred[Any]:
        """Chain ``bind_async``."""
        return self._then(combinators.bind_async, binder)

    def filter(self, predicate: Callable[..., Any]) -> Deferred[Any]:
        """Chain ``filter_async``."""
        return self._then(combinators.filter_async, predicate)

    def reduce(self, alternate: Any) -> Deferred[Any]:
        """Chain ``reduce_async``."""
        return self._then(combinators.reduce_async, alternate)

    def match(self, *cases: Callable[..., Any]) -> Deferred[Any]:
        """Chain ``match_async``."""
        return self._then(combinators.match_async, *cases)

    def effect(self, *actions: Callable[..., Any]) -> Deferred[Any]:
        """Chain ``effect_async``."""
        return self._then(combinators.effect_async, *actions)

    def effect_some(self, *actions: Callable[..., Any]) -> Deferred[Any]:
        return self._then(combinators.effect_some_async, *actions)

    def effect_none(self, *actions: Callable[[], Any]) -> Deferred[Any]:
        return self._then(combinators.effect_none_async, *actions)

    def effect_success(self, *actions: Callable[..., Any]) -> Deferred[Any]:
        return self._then(combinators.effect_success_async, *actions)

    def effect_failure(self, *actions: Callable[..., Any]) -> Deferred[Any]:
        return self._then(combinators.effect_failure_async, *actions)

    def tap(self, *actions: Callable[..., Any]) -> Deferred[T]:
        """Chain ``tap_async``."""
        return self._then(combinators.tap_async, *actions)

    def tap_some(self, *actions: Callable[..., Any]) -> Deferred[T]:
        return self._then(combinators.tap_some_async, *actions)

    def tap_none(self, *actions: Callable[[], Any]) -> Deferred[T]:
        return self._then(combinators.tap_none_async, *actions)

    def tap_success(self, *actions: Callable[..., Any]) -> Deferred[T]:
        return self._then(combinators.tap_success_async, *actions)

    def tap_failure(self, *actions: Callable[..., Any]) -> Deferred[T]:
        return self._then(combinators.tap_failure_async, *actions)

    def pipe(self, *functions: Callable[..., Any]) -> Deferred[Any]:
        """Chain ``pipe_async``."""
        return self._then(combinators.pipe_async, *functions)

    def ignore(self) -> Deferred[Any]:
        """Chain ``ignore_async``."""
        return self._then(combinators.ignore_async)

    def unwrap(self) -> Deferred[Any]:
        """Chain ``unwrap_async``."""
        return self._then(combinators.unwrap_async)

    def unwrap_failure(self) -> Deferred[Any]:
        """Chain ``unwrap_failure_async``."""
        return self._then(combinators.unwrap_failure_async)
