"""Option type: Some[T] | Nothing for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeIs

import msgspec

from fprelude._internal.calling import call, call_each
from fprelude.errors import OptionUnwrapError
from fprelude.unit import Unit, unit

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'collect_some',
    'filter_options',
    'none',
    'optional',
    'some',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option holding a value of type T.

    Handlers passed to the combinators may take the value or ignore it:
    ``Some(2).map(lambda x: x * 2)`` and ``Some(2).map(lambda: 0)`` are both
    valid.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(42).filter(lambda x: x > 100)
        NothingType()
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def map[U](self, mapper: Callable[[T], U] | Callable[[], U]) -> Some[U]:
        """Apply mapper to the value and wrap the result in Some."""
        return Some(call(mapper, self.value))

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep the value only if predicate holds for it."""
        if call(predicate, self.value):
            return self
        return Nothing

    def reduce(self, alternate: T | Callable[[], T]) -> T:  # noqa: ARG002
        """Return the value, ignoring the alternate."""
        return self.value

    def bind[U](self, binder: Callable[[T], Option[U]] | Callable[[], Option[U]]) -> Option[U]:
        """Apply a function returning an Option and return its result unwrapped one level.

        Also known as flatmap or and_then.
        """
        return call(binder, self.value)

    def match[R](self, when_some: Callable[[T], R] | Callable[[], R], when_none: Callable[[], R]) -> R:  # noqa: ARG002
        """Fold the option: call when_some with the value."""
        return call(when_some, self.value)

    def effect(self, when_some: Callable[..., Any], when_none: Callable[[], Any]) -> Unit:  # noqa: ARG002
        """Run when_some for its side effect and return Unit."""
        call(when_some, self.value)
        return unit

    def effect_some(self, *actions: Callable[..., Any]) -> Unit:
        """Run every action against the value, in order, and return Unit."""
        call_each(actions, self.value)
        return unit

    def effect_none(self, *actions: Callable[[], Any]) -> Unit:  # noqa: ARG002
        """Return Unit without running anything since this is Some."""
        return unit

    def tap(self, when_some: Callable[..., Any], when_none: Callable[[], Any]) -> Some[T]:  # noqa: ARG002
        """Run when_some for its side effect and return self."""
        call(when_some, self.value)
        return self

    def tap_some(self, *actions: Callable[..., Any]) -> Some[T]:
        """Run every action against the value, in order, and return self."""
        call_each(actions, self.value)
        return self

    def tap_none(self, *actions: Callable[[], Any]) -> Some[T]:  # noqa: ARG002
        """Return self unchanged since this is Some."""
        return self


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing an absent value.

    Use the ``Nothing`` singleton rather than instantiating this class.
    Handlers given to Nothing's combinators are never called, except the
    none-branch ones.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.reduce(0)
        0
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> Any:
        """Raise since there is no value.

        Raises:
            OptionUnwrapError: Always.
        """
        raise OptionUnwrapError

    def map(self, mapper: Callable[..., Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling mapper."""
        return self

    def filter(self, predicate: Callable[..., bool]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling predicate."""
        return self

    def reduce[T](self, alternate: T | Callable[[], T]) -> T:
        """Return the alternate, calling it first if it is callable.

        Any callable counts, so a class or builtin is called too.

        Examples:
            >>> Nothing.reduce(list)
            []
            >>> Nothing.reduce(lambda: list) is list
            True
        """
        if callable(alternate):
            return alternate()
        return alternate

    def bind(self, binder: Callable[..., Any]) -> NothingType:  # noqa: ARG002
        """Return Nothing without calling binder."""
        return self

    def match[R](self, when_some: Callable[..., R], when_none: Callable[[], R]) -> R:  # noqa: ARG002
        """Fold the option: call when_none."""
        return when_none()

    def effect(self, when_some: Callable[..., Any], when_none: Callable[[], Any]) -> Unit:  # noqa: ARG002
        """Run when_none for its side effect and return Unit."""
        when_none()
        return unit

    def effect_some(self, *actions: Callable[..., Any]) -> Unit:  # noqa: ARG002
        """Return Unit without running anything since this is Nothing."""
        return unit

    def effect_none(self, *actions: Callable[[], Any]) -> Unit:
        """Run every action, in order, and return Unit."""
        for action in actions:
            action()
        return unit

    def tap(self, when_some: Callable[..., Any], when_none: Callable[[], Any]) -> NothingType:  # noqa: ARG002
        """Run when_none for its side effect and return self."""
        when_none()
        return self

    def tap_some(self, *actions: Callable[..., Any]) -> NothingType:  # noqa: ARG002
        """Return self unchanged since this is Nothing."""
        return self

    def tap_none(self, *actions: Callable[[], Any]) -> NothingType:
        """Run every action, in order, and return self."""
        for action in actions:
            action()
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Option[T]:
    """Wrap value in Some, even when value is None."""
    return Some(value)


def none() -> NothingType:
    """Return Nothing."""
    return Nothing


def optional[T](value: T | None) -> Option[T]:
    """Convert a possibly-absent value into an Option.

    None becomes Nothing, anything else becomes Some.

    Examples:
        >>> optional(None)
        NothingType()
        >>> optional(0)
        Some(value=0)
    """
    if value is None:
        return Nothing
    return Some(value)


def collect_some[T](options: Iterable[Option[T]]) -> list[T]:
    """Return the values of every Some, in order, skipping Nothing."""
    return [option.value for option in options if isinstance(option, Some)]


def filter_options[T](options: Iterable[Option[T]], predicate: Callable[[T], bool]) -> list[Option[T]]:
    """Apply ``filter`` to every option, keeping positions."""
    return [option.filter(predicate) for option in options]
