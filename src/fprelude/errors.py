"""Error types raised for misuse, never for domain failures.

Domain failures travel through the failure channel of Result and
ValidationResult. The exceptions here signal a caller bug: unwrapping the
wrong branch, or handing a closed sum type something outside its variants.
"""

from __future__ import annotations

__all__ = [
    'AmbiguousUnionError',
    'InvalidStateError',
    'OptionUnwrapError',
    'ResultUnwrapError',
    'ResultUnwrapFailureError',
    'UnwrapError',
]

OPTION_UNWRAP_MESSAGE = (
    "An option was unwrapped when the value was None. Be sure to check the option first with 'is_some'."
)
RESULT_UNWRAP_MESSAGE = (
    "A result was unwrapped when the value was a Failure. Be sure to check the result first with 'is_success'."
)
RESULT_UNWRAP_FAILURE_MESSAGE = (
    'A result was unwrapped as a failure when the value was a Success. '
    "Be sure to check the result first with 'is_failure'."
)


class UnwrapError(RuntimeError):
    """Base class for unwrapping the branch a value does not hold."""


class OptionUnwrapError(UnwrapError):
    """Nothing was unwrapped."""

    def __init__(self) -> None:
        super().__init__(OPTION_UNWRAP_MESSAGE)


class ResultUnwrapError(UnwrapError):
    """A Failure was unwrapped as a success."""

    def __init__(self) -> None:
        super().__init__(RESULT_UNWRAP_MESSAGE)


class ResultUnwrapFailureError(UnwrapError):
    """A Success was unwrapped as a failure."""

    def __init__(self) -> None:
        super().__init__(RESULT_UNWRAP_FAILURE_MESSAGE)


class InvalidStateError(RuntimeError):
    """A closed sum type received a value that is none of its variants."""

    def __init__(self, expected: str, value: object) -> None:
        self.expected = expected
        self.value_type = type(value)
        super().__init__(f'Invalid state: expected {expected}, got {self.value_type.__name__}')


class AmbiguousUnionError(TypeError):
    """Type-directed union construction did not match exactly one case."""

    def __init__(self, value: object, candidates: tuple[type, ...], matches: int) -> None:
        self.value_type = type(value)
        self.candidates = candidates
        self.matches = matches
        names = ', '.join(t.__name__ for t in candidates)
        super().__init__(
            f"Value of type '{self.value_type.__name__}' matches {matches} of ({names}); "
            'use a case constructor such as .first() to pick one'
        )
