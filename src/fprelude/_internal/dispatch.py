"""Type groups used to route generic combinators to sum-type methods."""

from __future__ import annotations

from typing import Any

from fprelude.option import NothingType, Some
from fprelude.result import Failure, Success
from fprelude.union import UnionBase

__all__ = ['OPTION_TYPES', 'RESULT_TYPES', 'SUM_TYPES', 'expect', 'is_sum_type', 'takes_branch_handlers']

OPTION_TYPES = (Some, NothingType)
RESULT_TYPES = (Success, Failure)
SUM_TYPES = (*OPTION_TYPES, *RESULT_TYPES, UnionBase)


def is_sum_type(value: object) -> bool:
    """Return True for Option, Result and Union values."""
    return isinstance(value, SUM_TYPES)


def expect(operation: str, value: Any, types: tuple[type, ...], expected: str) -> None:
    """Raise TypeError unless value is an instance of one of types."""
    if not isinstance(value, types):
        msg = f'{operation}() expects {expected}, got {type(value).__name__}'
        raise TypeError(msg)


def takes_branch_handlers(value: object, handlers: tuple[Any, ...]) -> bool:
    """Return True when handlers are one per branch of a sum-type value.

    Option and Result have two branches and a Union has one per case. Any
    other handler count means the handlers are actions on the value itself.
    """
    if isinstance(value, UnionBase):
        return len(handlers) == value.arity
    return is_sum_type(value) and len(handlers) == 2
