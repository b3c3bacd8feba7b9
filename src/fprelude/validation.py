"""Validation results that accumulate every failure message.

Unlike Result.bind, which stops at the first failure, ``bind_validation``
always runs the next validator and collects the messages of every failed
step, so a caller sees all problems at once.

Example:
    ```python
    from fprelude import (
        as_validation_result,
        bind_validation,
        match_default,
        validation_failure,
        validation_success,
    )

    def named(user):
        return validation_success(user) if user.name else validation_failure('name is required')

    def adult(user):
        return validation_success(user) if user.age >= 18 else validation_failure('must be an adult')

    checked = as_validation_result(user)
    checked = bind_validation(checked, user, named)
    checked = bind_validation(checked, user, adult)
    match_default(checked)  # Failure(error=('name is required', 'must be an adult'))
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import msgspec

from fprelude._internal.calling import call
from fprelude._logging import get_logger
from fprelude.errors import InvalidStateError
from fprelude.result import Failure, Result, Success

__all__ = [
    'ValidationFailure',
    'ValidationResult',
    'ValidationSuccess',
    'as_validation_result',
    'bind_validation',
    'match_default',
    'validation_failure',
    'validation_success',
]

logger = get_logger(__name__)


class ValidationSuccess[T](msgspec.Struct, frozen=True, gc=False):
    """A passed validation carrying the validated contents."""

    contents: T

    def match[R](self, on_success: Callable[..., R], on_failure: Callable[..., R]) -> R:  # noqa: ARG002
        return call(on_success, self.contents)


class ValidationFailure(msgspec.Struct, frozen=True, gc=False):
    """A failed validation carrying every failure message so far."""

    failure_messages: tuple[str, ...]

    def match[R](self, on_success: Callable[..., R], on_failure: Callable[..., R]) -> R:  # noqa: ARG002
        return call(on_failure, self.failure_messages)


type ValidationResult[T] = ValidationSuccess[T] | ValidationFailure


def validation_success[T](contents: T) -> ValidationSuccess[T]:
    """Wrap contents in a passed validation."""
    return ValidationSuccess(contents)


def validation_failure(messages: str | Iterable[str]) -> ValidationFailure:
    """Build a failed validation from one message or several."""
    if isinstance(messages, str):
        return ValidationFailure((messages,))
    return ValidationFailure(tuple(messages))


def as_validation_result[T](value: T) -> ValidationSuccess[T]:
    """Start a validation chain from a plain value."""
    return ValidationSuccess(value)


def _check_variant(value: Any) -> None:
    if not isinstance(value, ValidationSuccess | ValidationFailure):
        raise InvalidStateError('ValidationSuccess or ValidationFailure', value)


def bind_validation[T, U](
    previous: ValidationResult[Any],
    value: T,
    validator: Callable[[T], ValidationResult[U]],
) -> ValidationResult[U]:
    """Run validator on value and merge its outcome with previous.

    Args:
        previous: The result of the earlier steps.
        value: The value the next step validates.
        validator: Returns a ValidationResult for value.

    Returns:
        The new contents when both succeeded. Otherwise a failure holding the
        previous messages followed by the new ones.

    Raises:
        InvalidStateError: If previous or the validator's result is neither
            variant.
    """
    _check_variant(previous)
    current = validator(value)
    _check_variant(current)

    if isinstance(current, ValidationSuccess):
        if isinstance(previous, ValidationFailure):
            return ValidationFailure(previous.failure_messages)
        return ValidationSuccess(current.contents)

    if isinstance(previous, ValidationFailure):
        messages = (*previous.failure_messages, *current.failure_messages)
    else:
        messages = current.failure_messages
    logger.debug('validation_failed', messages=messages)
    return ValidationFailure(messages)


def match_default[T](validation: ValidationResult[T]) -> Result[T, tuple[str, ...]]:
    """Project a validation result onto a plain Result.

    Raises:
        InvalidStateError: If validation is neither variant.
    """
    if isinstance(validation, ValidationSuccess):
        return Success(validation.contents)
    if isinstance(validation, ValidationFailure):
        return Failure(validation.failure_messages)
    raise InvalidStateError('ValidationSuccess or ValidationFailure', validation)
