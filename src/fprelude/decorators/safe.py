"""@safe and @safe_async decorators, attempt and try_* helpers, for catching exceptions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from fprelude._internal.calling import resolve
from fprelude._internal.dispatch import OPTION_TYPES, RESULT_TYPES, expect
from fprelude._logging import get_logger
from fprelude.async_.combinators import bind_async, map_async
from fprelude.option import Option, optional
from fprelude.result import Failure, Result, Success

__all__ = [
    'attempt',
    'attempt_async',
    'inner_exception_message',
    'safe',
    'safe_async',
    'try_bind',
    'try_bind_async',
    'try_map',
    'try_map_async',
]

logger = get_logger(__name__)

_OPTION_OR_RESULT = (*OPTION_TYPES, *RESULT_TYPES)


def _captured(wrapped: Callable[..., Any], error: BaseException) -> Failure[Any]:
    logger.debug(
        'exception_captured',
        function=getattr(wrapped, '__qualname__', repr(wrapped)),
        error_type=type(error).__name__,
        error=str(error),
    )
    return Failure(error)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Success[T] | Failure[Exception]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Success[Any] | Failure[E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that turns raised exceptions into Failure.

    Wraps a function so that it returns Success(value) when it returns and
    Failure(exception) when it raises one of ``exceptions``. Anything else
    propagates.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Success(value=5.0)
        divide(10, 0)
        # Failure(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[Any]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            return _captured(wrapped, e)
        return Success(result)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Success[T] | Failure[Exception]]]: ...


@overload
def safe_async[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Success[Any] | Failure[E]]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Async decorator that turns raised exceptions into Failure.

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped async function that returns Result[T, E] instead of T.
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[Any]:
        try:
            result = await wrapped(*args, **kwargs)
        except catch as e:
            return _captured(wrapped, e)
        return Success(result)

    if func is not None:
        return wrapper(func)
    return wrapper


def attempt[T](func: Callable[..., T], *args: Any, **kwargs: Any) -> Success[T] | Failure[Exception]:
    """Call func once, returning Success of its result or Failure of what it raised.

    Example:
        ```python
        attempt(int, '42')  # Success(value=42)
        attempt(int, 'x')  # Failure(error=ValueError(...))
        ```
    """
    try:
        result = func(*args, **kwargs)
    except Exception as e:
        return _captured(func, e)
    return Success(result)


async def attempt_async[T](
    func: Callable[..., Awaitable[T] | T], *args: Any, **kwargs: Any
) -> Success[T] | Failure[Exception]:
    """Call func once and resolve its result, capturing any exception as Failure.

    func may be a coroutine function or a plain function returning an
    awaitable or a value.
    """
    try:
        result = await resolve(func(*args, **kwargs))
    except Exception as e:
        return _captured(func, e)
    return Success(result)


def _outcome(subject: Any, mapped: Any) -> Any:
    # An Option is nested in Success; a Result is already the outcome.
    if isinstance(subject, OPTION_TYPES):
        return Success(mapped)
    return mapped


def try_map(subject: Option[Any] | Result[Any, Any], mapper: Callable[..., Any]) -> Result[Any, Any]:
    """Map an Option or Result, capturing an exception raised by mapper as Failure.

    Args:
        subject: The Option or Result to map.
        mapper: Applied to the Some or Success payload.

    Returns:
        For an Option, Success of the mapped Option (``Success(Nothing)`` for
        Nothing). For a Result, the mapped Result, with a Failure subject
        passed through unchanged. Failure(exception) when mapper raises.

    Raises:
        TypeError: If subject is neither an Option nor a Result.

    Example:
        ```python
        try_map(Some('42'), int)  # Success(value=Some(value=42))
        try_map(Some('x'), int)  # Failure(error=ValueError(...))
        try_map(Success('x'), int)  # Failure(error=ValueError(...))
        ```
    """
    expect('try_map', subject, _OPTION_OR_RESULT, 'an Option or Result')
    try:
        mapped = subject.map(mapper)
    except Exception as e:
        return _captured(mapper, e)
    return _outcome(subject, mapped)


def try_bind(subject: Option[Any] | Result[Any, Any], binder: Callable[..., Any]) -> Result[Any, Any]:
    """Like ``try_map``, but binder returns an Option or Result itself.

    Raises:
        TypeError: If subject is neither an Option nor a Result.
    """
    expect('try_bind', subject, _OPTION_OR_RESULT, 'an Option or Result')
    try:
        bound = subject.bind(binder)
    except Exception as e:
        return _captured(binder, e)
    return _outcome(subject, bound)


async def try_map_async(subject: Any, mapper: Callable[..., Any]) -> Result[Any, Any]:
    """Async form of ``try_map``.

    The subject is awaited first; an exception raised while awaiting it
    propagates. Exceptions from mapper, or from awaiting its result, are
    captured.
    """
    value = await resolve(subject)
    expect('try_map_async', value, _OPTION_OR_RESULT, 'an Option or Result')
    try:
        mapped = await map_async(value, mapper)
    except Exception as e:
        return _captured(mapper, e)
    return _outcome(value, mapped)


async def try_bind_async(subject: Any, binder: Callable[..., Any]) -> Result[Any, Any]:
    """Async form of ``try_bind``."""
    value = await resolve(subject)
    expect('try_bind_async', value, _OPTION_OR_RESULT, 'an Option or Result')
    try:
        bound = await bind_async(value, binder)
    except Exception as e:
        return _captured(binder, e)
    return _outcome(value, bound)


def inner_exception_message(error: BaseException) -> Option[str]:
    """Return the message of the exception behind error, or Nothing.

    The explicit cause set by ``raise ... from`` is used first, then the
    exception that was being handled when error was raised. ``raise ... from
    None`` hides the latter.

    Example:
        ```python
        try:
            int('x')
        except ValueError as e:
            error = RuntimeError('bad config')
            error.__cause__ = e
        inner_exception_message(error)  # Some(value="invalid literal for int() with base 10: 'x'")
        ```
    """
    inner = error.__cause__
    if inner is None and not error.__suppress_context__:
        inner = error.__context__
    return optional(inner).map(str)
