"""Result type: Success[S] | Failure[F] for explicit success and failure.

Failures are ordinary values. Map and bind short-circuit on Failure and
pass the same failure value along instead of raising.

Example:
    ```python
    from fprelude import Failure, Result, Success, bind_all

    def parse(text: str) -> Result[int, str]:
        return Success(int(text)) if text.isdigit() else Failure(f'{text!r} is not a number')

    parse('41').map(lambda n: n + 1)  # Success(value=42)
    parse('x').map(lambda n: n + 1)  # Failure(error="'x' is not a number")

    bind_all([parse('1'), parse('a'), parse('2'), parse('b')])
    # Failure(error=["'a' is not a number", "'b' is not a number"])
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NoReturn, TypeIs

import msgspec

from fprelude._internal.calling import call, call_each
from fprelude.errors import ResultUnwrapError, ResultUnwrapFailureError
from fprelude.unit import Unit, unit

__all__ = ['Failure', 'Result', 'Success', 'bind_all', 'failure', 'success']


class Success[S](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result holding a value of type S.

    Attributes:
        value: The successful value.
    """

    value: S

    def is_success(self) -> TypeIs[Success[S]]:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> TypeIs[Failure[Any]]:
        """Return False since this is Success."""
        return False

    def unwrap(self) -> S:
        """Return the success value."""
        return self.value

    def unwrap_failure(self) -> NoReturn:
        """Raise since there is no failure value.

        Raises:
            ResultUnwrapFailureError: Always.
        """
        raise ResultUnwrapFailureError

    def map[U](self, mapper: Callable[[S], U] | Callable[[], U]) -> Success[U]:
        """Apply mapper to the value and wrap the result in Success."""
        return Success(call(mapper, self.value))

    def map_failure(self, mapper: Callable[..., Any]) -> Success[S]:  # noqa: ARG002
        """Return self unchanged since this is Success."""
        return self

    def bind[U, F](self, binder: Callable[[S], Result[U, F]] | Callable[[], Result[U, F]]) -> Result[U, F]:
        """Chain a computation that may fail.

        Args:
            binder: Function taking the value (or nothing) and returning a Result.

        Returns:
            The Result returned by binder.
        """
        return call(binder, self.value)

    def reduce(self, alternate: Any) -> S:  # noqa: ARG002
        """Return the value, ignoring the alternate."""
        return self.value

    def match[R](self, on_success: Callable[[S], R] | Callable[[], R], on_failure: Callable[..., R]) -> R:  # noqa: ARG002
        """Fold the result: call on_success with the value."""
        return call(on_success, self.value)

    def effect(self, on_success: Callable[..., Any], on_failure: Callable[..., Any]) -> Unit:  # noqa: ARG002
        """Run on_success for its side effect and return Unit."""
        call(on_success, self.value)
        return unit

    def effect_success(self, *actions: Callable[..., Any]) -> Unit:
        """Run every action against the value, in order, and return Unit."""
        call_each(actions, self.value)
        return unit

    def effect_failure(self, *actions: Callable[..., Any]) -> Unit:  # noqa: ARG002
        """Return Unit without running anything since this is Success."""
        return unit

    def tap(self, on_success: Callable[..., Any], on_failure: Callable[..., Any]) -> Success[S]:  # noqa: ARG002
        """Run on_success for its side effect and return self."""
        call(on_success, self.value)
        return self

    def tap_success(self, *actions: Callable[..., Any]) -> Success[S]:
        """Run every action against the value, in order, and return self."""
        call_each(actions, self.value)
        return self

    def tap_failure(self, *actions: Callable[..., Any]) -> Success[S]:  # noqa: ARG002
        """Return self unchanged since this is Success."""
        return self


class Failure[F](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result holding an error of type F.

    Attributes:
        error: The failure payload. Any type, not only exceptions.
    """

    error: F

    def is_success(self) -> TypeIs[Success[Any]]:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[F]]:
        """Return True since this is Failure."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since there is no success value.

        Raises:
            ResultUnwrapError: Always.
        """
        raise ResultUnwrapError

    def unwrap_failure(self) -> F:
        """Return the failure value."""
        return self.error

    def map(self, mapper: Callable[..., Any]) -> Failure[F]:  # noqa: ARG002
        """Return self unchanged without calling mapper."""
        return self

    def map_failure[G](self, mapper: Callable[[F], G] | Callable[[], G]) -> Failure[G]:
        """Apply mapper to the error and wrap the result in Failure."""
        return Failure(call(mapper, self.error))

    def bind(self, binder: Callable[..., Any]) -> Failure[F]:  # noqa: ARG002
        """Return self unchanged without calling binder."""
        return self

    def reduce[S](self, alternate: S | Callable[[F], S] | Callable[[], S]) -> S:
        """Return the alternate.

        A callable alternate is called here, with the error if it accepts one.
        Wrap a callable in a lambda to get it back as the value itself.

        Examples:
            >>> Failure('ab').reduce(0)
            0
            >>> Failure('ab').reduce(list)
            ['a', 'b']
            >>> Failure('ab').reduce(lambda: list) is list
            True
        """
        if callable(alternate):
            return call(alternate, self.error)
        return alternate

    def match[R](self, on_success: Callable[..., R], on_failure: Callable[[F], R] | Callable[[], R]) -> R:  # noqa: ARG002
        """Fold the result: call on_failure with the error."""
        return call(on_failure, self.error)

    def effect(self, on_success: Callable[..., Any], on_failure: Callable[..., Any]) -> Unit:  # noqa: ARG002
        """Run on_failure for its side effect and return Unit."""
        call(on_failure, self.error)
        return unit

    def effect_success(self, *actions: Callable[..., Any]) -> Unit:  # noqa: ARG002
        """Return Unit without running anything since this is Failure."""
        return unit

    def effect_failure(self, *actions: Callable[..., Any]) -> Unit:
        """Run every action against the error, in order, and return Unit."""
        call_each(actions, self.error)
        return unit

    def tap(self, on_success: Callable[..., Any], on_failure: Callable[..., Any]) -> Failure[F]:  # noqa: ARG002
        """Run on_failure for its side effect and return self."""
        call(on_failure, self.error)
        return self

    def tap_success(self, *actions: Callable[..., Any]) -> Failure[F]:  # noqa: ARG002
        """Return self unchanged since this is Failure."""
        return self

    def tap_failure(self, *actions: Callable[..., Any]) -> Failure[F]:
        """Run every action against the error, in order, and return self."""
        call_each(actions, self.error)
        return self


type Result[S, F = Exception] = Success[S] | Failure[F]


def success[S](value: S) -> Success[S]:
    """Wrap value in Success."""
    return Success(value)


def failure[F](error: F) -> Failure[F]:
    """Wrap error in Failure."""
    return Failure(error)


def bind_all[S, F](results: Iterable[Result[S, F]]) -> Result[list[S], list[F]]:
    """Combine results, collecting every failure rather than the first.

    Args:
        results: Results to combine.

    Returns:
        Success with all values when every result succeeded, otherwise
        Failure with all errors in their original order.

    Raises:
        TypeError: If an element is not a Result.

    Examples:
        >>> bind_all([Success(1), Success(2)])
        Success(value=[1, 2])
        >>> bind_all([Success(1), Failure('a'), Success(2), Failure('b')])
        Failure(error=['a', 'b'])
    """
    values: list[S] = []
    errors: list[F] = []
    for result in results:
        if isinstance(result, Success):
            values.append(result.value)
        elif isinstance(result, Failure):
            errors.append(result.error)
        else:
            msg = f'bind_all() expects Result values, got {type(result).__name__}'
            raise TypeError(msg)
    if errors:
        return Failure(errors)
    return Success(values)
