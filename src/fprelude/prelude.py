"""Combinators that work on any value.

These are the free-function forms of chaining, side effects and folding.
``match`` on an Option, Result or Union hands the callables to the
subject's own method, so they act as branch handlers. ``tap`` and
``effect`` do the same only when given one callable per branch; otherwise
the subject is treated as a plain value.

Example:
    ```python
    from fprelude import cons, pipe, tap

    pipe(' 42 ', str.strip, int, lambda n: n + 1)  # 43
    tap([1, 2], print)  # prints [1, 2], returns the same list
    cons('1', '2').append('3', '4')  # Seq(['1', '2', '3', '4'])
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from fprelude._internal.calling import call, call_each
from fprelude._internal.dispatch import is_sum_type, takes_branch_handlers
from fprelude.unit import Unit, unit

__all__ = ['Seq', 'append', 'cons', 'effect', 'ignore', 'match', 'perform', 'pipe', 'tap', 'to_async']


def pipe(value: Any, *functions: Callable[..., Any]) -> Any:
    """Thread value through functions from left to right.

    Args:
        value: The starting value.
        *functions: Each receives the previous result. A nullary function
            ignores it.

    Returns:
        The result of the last function, or value when none are given.

    Example:
        ```python
        pipe(3, lambda x: x * 2, str)  # '6'
        ```
    """
    for function in functions:
        value = call(function, value)
    return value


def tap[T](value: T, *actions: Callable[..., Any]) -> T:
    """Run actions for their side effects and return value unchanged.

    On an Option or Result given two actions, or on a Union given one action
    per case, the actions are branch handlers and only the matching one runs.
    Any other call runs each action against value itself, in order.

    Example:
        ```python
        tap(Some(1), print, lambda: print('empty'))  # prints 1
        tap(Some(1), print)  # prints Some(value=1)
        ```
    """
    if takes_branch_handlers(value, actions):
        return value.tap(*actions)  # type: ignore[attr-defined]
    call_each(actions, value)
    return value


def effect(value: Any, *actions: Callable[..., Any]) -> Unit:
    """Like ``tap``, but return Unit."""
    if takes_branch_handlers(value, actions):
        return value.effect(*actions)
    call_each(actions, value)
    return unit


def perform(*actions: Callable[[], Any]) -> Unit:
    """Run nullary actions in order and return Unit."""
    for action in actions:
        action()
    return unit


def ignore(value: Any) -> Unit:  # noqa: ARG001
    """Discard value and return Unit."""
    return unit


def match(subject: Any, *cases: Callable[..., Any]) -> Any:
    """Fold subject with one handler per case.

    Args:
        subject: A bool, Option, Result or Union.
        *cases: For a bool, ``when_true`` and ``when_false`` thunks. For the
            sum types, the handlers their ``match`` method takes.

    Returns:
        The chosen handler's result.

    Raises:
        TypeError: If subject is none of the supported types, or a bool
            receives other than two handlers.
    """
    if isinstance(subject, bool):
        if len(cases) != 2:
            msg = f'match() on a bool expects 2 handlers, got {len(cases)}'
            raise TypeError(msg)
        when_true, when_false = cases
        return when_true() if subject else when_false()
    if is_sum_type(subject):
        return subject.match(*cases)
    msg = f'match() expects a bool, Option, Result or Union, got {type(subject).__name__}'
    raise TypeError(msg)


class Seq[T](tuple[T, ...]):
    """Immutable sequence returned by ``cons``.

    Appending never modifies the receiver; it returns a new Seq.
    """

    __slots__ = ()

    def append(self, *items: T) -> Seq[T]:
        """Return a new Seq with items added at the end."""
        return Seq((*self, *items))

    def concat(self, items: Iterable[T]) -> Seq[T]:
        """Return a new Seq with every element of items added at the end."""
        return Seq((*self, *items))

    def __repr__(self) -> str:
        return f'Seq({list(self)!r})'


def cons[T](*items: T) -> Seq[T]:
    """Build a Seq from the given items."""
    return Seq(items)


def append[T](sequence: Iterable[T], *items: T) -> Seq[T]:
    """Return a new Seq of sequence followed by items."""
    return Seq((*sequence, *items))


async def to_async[T](value: T) -> T:
    """Return value from a coroutine, lifting it into the async world."""
    return value
