"""Async counterparts of the Option, Result, Union and prelude combinators.

Every function accepts the subject as a plain value or as an awaitable, and
handlers that are sync or async. The subject is awaited until a concrete
value remains, the same branching as the sync combinator is applied, and
the chosen handler's result is awaited the same way when it is awaitable.
Handlers of the branch not taken are never called. Action lists run one
after another; nothing here runs concurrently.

Example:
    ```python
    async def fetch_user(user_id: int) -> Option[User]: ...
    async def load_profile(user: User) -> Profile: ...

    profile = await map_async(fetch_user(1), load_profile)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from fprelude._internal.calling import resolve, resolve_call
from fprelude._internal.dispatch import OPTION_TYPES, RESULT_TYPES, expect, takes_branch_handlers
from fprelude.option import Nothing, NothingType, Option, Some, optional
from fprelude.prelude import match
from fprelude.result import Failure, Result, Success, bind_all
from fprelude.unit import Unit, unit

__all__ = [
    'bind_all_async',
    'bind_async',
    'effect_async',
    'effect_failure_async',
    'effect_none_async',
    'effect_some_async',
    'effect_success_async',
    'filter_async',
    'ignore_async',
    'map_async',
    'map_failure_async',
    'match_async',
    'optional_async',
    'perform_async',
    'pipe_async',
    'reduce_async',
    'run_sequential',
    'tap_async',
    'tap_failure_async',
    'tap_none_async',
    'tap_some_async',
    'tap_success_async',
    'unwrap_async',
    'unwrap_failure_async',
]

_OPTION_OR_RESULT = (*OPTION_TYPES, *RESULT_TYPES)
_NO_VALUE: Any = object()


async def _run_each(actions: Iterable[Callable[..., Any]], value: Any) -> None:
    for action in actions:
        await resolve_call(action, value)


async def _run_each_nullary(actions: Iterable[Callable[[], Any]]) -> None:
    for action in actions:
        await resolve(action())


async def map_async(subject: Any, mapper: Callable[..., Any]) -> Option[Any] | Result[Any, Any]:
    """Map the Some or Success payload, awaiting the mapper's result if needed.

    Raises:
        TypeError: If subject does not resolve to an Option or Result.
    """
    value = await resolve(subject)
    expect('map_async', value, _OPTION_OR_RESULT, 'an Option or Result')
    if isinstance(value, Some):
        return Some(await resolve_call(mapper, value.value))
    if isinstance(value, Success):
        return Success(await resolve_call(mapper, value.value))
    return value


async def map_failure_async(subject: Any, mapper: Callable[..., Any]) -> Result[Any, Any]:
    """Map the Failure payload of a Result, leaving a Success untouched."""
    value = await resolve(subject)
    expect('map_failure_async', value, RESULT_TYPES, 'a Result')
    if isinstance(value, Failure):
        return Failure(await resolve_call(mapper, value.error))
    return value


async def bind_async(subject: Any, binder: Callable[..., Any]) -> Option[Any] | Result[Any, Any]:
    """Chain a computation returning an Option or Result, possibly asynchronously."""
    value = await resolve(subject)
    expect('bind_async', value, _OPTION_OR_RESULT, 'an Option or Result')
    if isinstance(value, Some | Success):
        return await resolve_call(binder, value.value)
    return value


async def filter_async(subject: Any, predicate: Callable[..., Any]) -> Option[Any]:
    """Keep a Some only if the predicate, possibly async, holds for its value."""
    value = await resolve(subject)
    expect('filter_async', value, OPTION_TYPES, 'an Option')
    if isinstance(value, Some) and not await resolve_call(predicate, value.value):
        return Nothing
    return value


async def reduce_async(subject: Any, alternate: Any) -> Any:
    """Return the payload, or the alternate when there is none.

    A callable alternate is called only when needed; on a Failure it
    receives the error if it accepts one. An awaitable alternate is awaited
    only when needed.
    """
    value = await resolve(subject)
    expect('reduce_async', value, _OPTION_OR_RESULT, 'an Option or Result')
    if isinstance(value, Some | Success):
        return value.value
    if isinstance(value, Failure) and callable(alternate):
        return await resolve_call(alternate, value.error)
    if callable(alternate):
        return await resolve(alternate())
    return await resolve(alternate)


async def match_async(subject: Any, *cases: Callable[..., Any]) -> Any:
    """Async form of ``match`` for bools, Options, Results and Unions."""
    value = await resolve(subject)
    return await resolve(match(value, *cases))


async def effect_async(subject: Any, *actions: Callable[..., Any]) -> Unit:
    """Async form of ``effect``.

    On an Option or Result given two actions, or on a Union given one action
    per case, the actions are branch handlers. Otherwise each action runs
    against the resolved value itself, in order.
    """
    value = await resolve(subject)
    if takes_branch_handlers(value, actions):
        await resolve(value.match(*actions))
    else:
        await _run_each(actions, value)
    return unit


async def tap_async(subject: Any, *actions: Callable[..., Any]) -> Any:
    """Async form of ``tap``: like ``effect_async`` but return the resolved value."""
    value = await resolve(subject)
    if takes_branch_handlers(value, actions):
        await resolve(value.match(*actions))
    else:
        await _run_each(actions, value)
    return value


async def effect_some_async(subject: Any, *actions: Callable[..., Any]) -> Unit:
    """Run actions against a Some payload, in order, and return Unit."""
    await tap_some_async(subject, *actions)
    return unit


async def effect_none_async(subject: Any, *actions: Callable[[], Any]) -> Unit:
    """Run nullary actions when the Option is Nothing and return Unit."""
    await tap_none_async(subject, *actions)
    return unit


async def effect_success_async(subject: Any, *actions: Callable[..., Any]) -> Unit:
    """Run actions against a Success payload, in order, and return Unit."""
    await tap_success_async(subject, *actions)
    return unit


async def effect_failure_async(subject: Any, *actions: Callable[..., Any]) -> Unit:
    """Run actions against a Failure payload, in order, and return Unit."""
    await tap_failure_async(subject, *actions)
    return unit


async def tap_some_async(subject: Any, *actions: Callable[..., Any]) -> Option[Any]:
    value = await resolve(subject)
    expect('tap_some_async', value, OPTION_TYPES, 'an Option')
    if isinstance(value, Some):
        await _run_each(actions, value.value)
    return value


async def tap_none_async(subject: Any, *actions: Callable[[], Any]) -> Option[Any]:
    value = await resolve(subject)
    expect('tap_none_async', value, OPTION_TYPES, 'an Option')
    if isinstance(value, NothingType):
        await _run_each_nullary(actions)
    return value


async def tap_success_async(subject: Any, *actions: Callable[..., Any]) -> Result[Any, Any]:
    value = await resolve(subject)
    expect('tap_success_async', value, RESULT_TYPES, 'a Result')
    if isinstance(value, Success):
        await _run_each(actions, value.value)
    return value


async def tap_failure_async(subject: Any, *actions: Callable[..., Any]) -> Result[Any, Any]:
    value = await resolve(subject)
    expect('tap_failure_async', value, RESULT_TYPES, 'a Result')
    if isinstance(value, Failure):
        await _run_each(actions, value.error)
    return value


async def pipe_async(subject: Any, *functions: Callable[..., Any]) -> Any:
    """Thread the resolved subject through sync or async functions, in order."""
    value = await resolve(subject)
    for function in functions:
        value = await resolve_call(function, value)
    return value


async def perform_async(*actions: Callable[[], Any]) -> Unit:
    """Run nullary sync or async actions one after another and return Unit."""
    await _run_each_nullary(actions)
    return unit


async def run_sequential(actions: Iterable[Callable[..., Any]], value: Any = _NO_VALUE) -> Unit:
    """Run sync or async actions one after another and return Unit.

    Each action, and whatever it returned, is awaited before the next one
    starts. When value is given it is resolved first and every action that
    accepts an argument receives it; otherwise the actions are called with
    no arguments.

    Example:
        ```python
        await run_sequential([save, notify], user)
        await run_sequential([flush_cache, close_pool])
        ```
    """
    if value is _NO_VALUE:
        await _run_each_nullary(actions)
    else:
        await _run_each(actions, await resolve(value))
    return unit


async def ignore_async(subject: Any) -> Unit:
    """Await subject, discard its value and return Unit."""
    await resolve(subject)
    return unit


async def unwrap_async(subject: Any) -> Any:
    """Resolve an Option or Result and unwrap it.

    Raises:
        OptionUnwrapError: If it resolves to Nothing.
        ResultUnwrapError: If it resolves to a Failure.
    """
    value = await resolve(subject)
    expect('unwrap_async', value, _OPTION_OR_RESULT, 'an Option or Result')
    return value.unwrap()


async def unwrap_failure_async(subject: Any) -> Any:
    """Resolve a Result and return its failure payload.

    Raises:
        ResultUnwrapFailureError: If it resolves to a Success.
    """
    value = await resolve(subject)
    expect('unwrap_failure_async', value, RESULT_TYPES, 'a Result')
    return value.unwrap_failure()


async def optional_async(subject: Awaitable[Any] | Any) -> Option[Any]:
    """Resolve subject and fold None into Nothing."""
    return optional(await resolve(subject))


async def bind_all_async(subjects: Iterable[Any]) -> Result[list[Any], list[Any]]:
    """Await each result in turn, then combine them like ``bind_all``."""
    results = [await resolve(subject) for subject in subjects]
    return bind_all(results)
