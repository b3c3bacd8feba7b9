"""Unit: the value that carries no information."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = ['Unit', 'unit']


class Unit(msgspec.Struct, frozen=True, order=True, gc=False):
    """The zero-information value returned by side-effecting combinators.

    Every Unit equals every other Unit, so ordering is total and trivial.

    Examples:
        >>> Unit() == Unit()
        True
        >>> str(Unit())
        '()'
        >>> Unit() + Unit()
        Unit()
    """

    @staticmethod
    def default() -> Unit:
        """Return the shared Unit instance."""
        return unit

    def compare_to(self, other: Unit) -> int:
        """Three-way comparison, always 0 against another Unit."""
        if not isinstance(other, Unit):
            msg = f'Cannot compare Unit to {type(other).__name__}'
            raise TypeError(msg)
        return 0

    def __add__(self, other: Any) -> Unit:
        if isinstance(other, Unit):
            return self
        return NotImplemented

    def __str__(self) -> str:
        return '()'


unit: Unit = Unit()
"""Shared Unit instance."""
