"""Discriminated unions of two to nine cases.

A union value holds exactly one case, identified by its position among the
type parameters. Cases are chosen with tag-qualified constructors, so
repeated type parameters such as ``Union2[int, int]`` stay unambiguous:

Example:
    ```python
    from fprelude import Union2

    def parse(text: str) -> Union2[int, str]:
        if text.isdigit():
            return Union2.first(int(text))
        return Union2.second(text)

    parse('42').match(lambda n: n + 1, len)  # 43
    parse('abc').match(lambda n: n + 1, len)  # 3
    ```

``UnionN.of(value, *types)`` picks the case from the runtime type of the
value instead and refuses to guess when more than one type fits.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar, Self

from fprelude._internal.calling import call
from fprelude.errors import AmbiguousUnionError
from fprelude.unit import Unit, unit

__all__ = [
    'Union2',
    'Union3',
    'Union4',
    'Union5',
    'Union6',
    'Union7',
    'Union8',
    'Union9',
    'UnionBase',
]

_ORDINALS = ('first', 'second', 'third', 'fourth', 'fifth', 'sixth', 'seventh', 'eighth', 'ninth')


class UnionBase:
    """Shared behavior of the fixed-arity union classes.

    Instances are immutable. The active case and its value are reachable
    only through ``match``, ``effect`` and ``tap``.
    """

    __slots__ = ('_case', '_value')

    arity: ClassVar[int] = 0

    _case: int
    _value: Any

    def __init__(self) -> None:
        raise TypeError(f'Use a case constructor such as {type(self).__name__}.first() or {type(self).__name__}.of()')

    @classmethod
    def _create(cls, case: int, value: Any) -> Self:
        instance = object.__new__(cls)
        object.__setattr__(instance, '_case', case)
        object.__setattr__(instance, '_value', value)
        return instance

    @classmethod
    def of(cls, value: Any, *types: type) -> Self:
        """Build a union whose case is the one type parameter value belongs to.

        Args:
            value: The value to hold.
            *types: The union's type parameters, in order.

        Returns:
            A union holding value in the case of the matching type.

        Raises:
            TypeError: If the number of types differs from the arity.
            AmbiguousUnionError: If value matches no type or several.
        """
        if len(types) != cls.arity:
            msg = f'{cls.__name__}.of() expects {cls.arity} types, got {len(types)}'
            raise TypeError(msg)
        matches = [index for index, candidate in enumerate(types, start=1) if isinstance(value, candidate)]
        if len(matches) != 1:
            raise AmbiguousUnionError(value, types, len(matches))
        return cls._create(matches[0], value)

    def _check_handlers(self, operation: str, handlers: tuple[Callable[..., Any], ...]) -> None:
        if len(handlers) != self.arity:
            msg = f'{type(self).__name__}.{operation}() expects {self.arity} handlers, got {len(handlers)}'
            raise TypeError(msg)

    def match[R](self, *cases: Callable[..., R]) -> R:
        """Call the handler for the active case and return its result.

        Args:
            *cases: One handler per case, in case order.

        Raises:
            TypeError: If the number of handlers differs from the arity.
        """
        self._check_handlers('match', cases)
        return call(cases[self._case - 1], self._value)

    def effect(self, *actions: Callable[..., Any]) -> Unit:
        """Run the action for the active case and return Unit."""
        self._check_handlers('effect', actions)
        call(actions[self._case - 1], self._value)
        return unit

    def tap(self, *actions: Callable[..., Any]) -> Self:
        """Run the action for the active case and return self."""
        self._check_handlers('tap', actions)
        call(actions[self._case - 1], self._value)
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._case == other._case and self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._case, self._value))

    def __repr__(self) -> str:
        return f'{type(self).__name__}.{_ORDINALS[self._case - 1]}({self._value!r})'

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild, (type(self), self._case, self._value))


def _rebuild(cls: type[UnionBase], case: int, value: Any) -> UnionBase:
    return cls._create(case, value)


def _case_constructor(case: int) -> Any:
    def construct(cls: type[UnionBase], value: Any) -> UnionBase:
        return cls._create(case, value)

    construct.__name__ = construct.__qualname__ = _ORDINALS[case - 1]
    construct.__doc__ = f'Build a union holding value as case {case}.'
    return classmethod(construct)


class Union2[T1, T2](UnionBase):
    """Union of two cases."""

    __slots__ = ()
    arity = 2

    first = _case_constructor(1)
    second = _case_constructor(2)


class Union3[T1, T2, T3](UnionBase):
    """Union of three cases."""

    __slots__ = ()
    arity = 3

    first = _case_constructor(1)
    second = _case_constructor(2)
    third = _case_constructor(3)


class Union4[T1, T2, T3, T4](UnionBase):
    """Union of four cases."""

    __slots__ = ()
    arity = 4

    first = _case_constructor(1)
    second = _case_constructor(2)
    third = _case_constructor(3)
    fourth = _case_constructor(4)


class Union5[T1, T2, T3, T4, T5](UnionBase):
    """Union of five cases."""

    __slots__ = ()
    arity = 5

    first = _case_constructor(1)
    second = _case_constructor(2)
    third = _case_constructor(3)
    fourth = _case_constructor(4)
    fifth = _case_constructor(5)


class Union6[T1, T2, T3, T4, T5, T6](UnionBase):
    """Union of six cases."""

    __slots__ = ()
    arity = 6

    first = _case_constructor(1)
    second = _case_constructor(2)
    third = _case_constructor(3)
    fourth = _case_constructor(4)
    fifth = _case_constructor(5)
    sixth = _case_constructor(6)


class Union7[T1, T2, T3, T4, T5, T6, T7](UnionBase):
    """Union of seven cases."""

    __slots__ = ()
    arity = 7

    first = _case_constructor(1)
    second = _case_constructor(2)
    third = _case_constructor(3)
    fourth = _case_constructor(4)
    fifth = _case_constructor(5)
    sixth = _case_constructor(6)
    seventh = _case_constructor(7)


class Union8[T1, T2, T3, T4, T5, T6, T7, T8](UnionBase):
    """Union of eight cases."""

    __slots__ = ()
    arity = 8

    first = _case_constructor(1)
    second = _case_constructor(2)
    third = _case_constructor(3)
    fourth = _case_constructor(4)
    fifth = _case_constructor(5)
    sixth = _case_constructor(6)
    seventh = _case_constructor(7)
    eighth = _case_constructor(8)


class Union9[T1, T2, T3, T4, T5, T6, T7, T8, T9](UnionBase):
    """Union of nine cases."""

    __slots__ = ()
    arity = 9

    first = _case_constructor(1)
    second = _case_constructor(2)
    third = _case_constructor(3)
    fourth = _case_constructor(4)
    fifth = _case_constructor(5)
    sixth = _case_constructor(6)
    seventh = _case_constructor(7)
    eighth = _case_constructor(8)
    ninth = _case_constructor(9)
