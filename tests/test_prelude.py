"""Tests for the value-level combinators: pipe, tap, effect, match, cons."""

import msgspec
import pytest
from hypothesis import given
from msgspec import structs

from fprelude import (
    Failure,
    Nothing,
    Seq,
    Some,
    Success,
    Union2,
    Union3,
    append,
    cons,
    effect,
    ignore,
    match,
    perform,
    pipe,
    tap,
    to_async,
    unit,
)
from tests.strategies import integers


class TestPipe:
    """Tests for pipe."""

    def test_pipe_threads_value(self):
        """Functions run left to right on the previous result."""
        assert pipe(3, lambda x: x * 2, str) == '6'

    def test_pipe_without_functions(self):
        """pipe(value) returns value."""
        assert pipe(5) == 5

    def test_pipe_with_nullary_step(self):
        """A nullary step ignores its input."""
        assert pipe(1, lambda: 10, lambda x: x + 1) == 11

    def test_pipe_into_option(self):
        """pipe composes with the Option factories."""
        assert pipe(4, Some, lambda o: o.map(lambda x: x + 1)) == Some(5)

    @given(integers)
    def test_pipe_identity(self, value):
        """Piping through the identity returns the value."""
        assert pipe(value, lambda x: x) == value


class TestTapAndEffect:
    """Tests for tap, effect, perform and ignore."""

    def test_tap_plain_value(self, calls):
        """On a plain value the actions run in order and the value is returned."""
        value = [1, 2]
        assert tap(value, lambda v: calls.append(('a', len(v))), lambda: calls.append('b')) is value
        assert calls == [('a', 2), 'b']

    def test_tap_option_uses_branch_handlers(self, calls):
        """On an Option the actions are its branch handlers."""
        option = Some(1)
        assert tap(option, calls.append, lambda: calls.append('none')) is option
        assert tap(Nothing, calls.append, lambda: calls.append('none')) is Nothing
        assert calls == [1, 'none']

    def test_tap_result_and_union(self, calls):
        """Results and Unions dispatch to their own tap."""
        result = Failure('e')
        union = Union2.second('u')
        assert tap(result, calls.append, lambda e: calls.append(f'f:{e}')) is result
        assert tap(union, calls.append, lambda v: calls.append(f's:{v}')) is union
        assert calls == ['f:e', 's:u']

    def test_effect_returns_unit(self, calls):
        """effect discards the value."""
        assert effect(5, calls.append) == unit
        assert effect(Success(2), calls.append, calls.append) == unit
        assert calls == [5, 2]

    def test_tap_single_action_sees_whole_option(self, calls):
        """One action on an Option or Result receives the wrapper itself."""
        option = Some(1)
        assert tap(option, calls.append) is option
        assert tap(Nothing, calls.append) is Nothing
        assert tap(Failure('e'), calls.append) == Failure('e')
        assert calls == [Some(1), Nothing, Failure('e')]

    def test_tap_union_needs_one_action_per_case(self, calls):
        """A Union only dispatches when given exactly arity actions."""
        union = Union3.second('u')
        assert tap(union, calls.append) is union
        assert tap(union, calls.append, calls.append) is union
        assert tap(union, lambda v: calls.append(f'1:{v}'), lambda v: calls.append(f'2:{v}'), calls.append) is union
        assert calls == [union, union, union, '2:u']

    def test_tap_without_actions_returns_value(self):
        """No actions means nothing runs, even on a sum type."""
        option = Some(1)
        union = Union2.first(1)
        assert tap(option) is option
        assert tap(union) is union
        assert effect(Success(1)) == unit

    def test_effect_single_action_on_result(self, calls):
        """effect follows the same dispatch as tap."""
        assert effect(Success(2), calls.append) == unit
        assert calls == [Success(2)]

    def test_tap_leaves_struct_unchanged(self):
        """Building a modified copy inside an action does not touch the original."""

        class Point(msgspec.Struct, frozen=True):
            x: int
            y: int

        point = Point(1, 2)
        copies = []
        assert tap(point, lambda p: copies.append(structs.replace(p, x=99))) is point
        assert (point.x, point.y) == (1, 2)
        assert copies == [Point(99, 2)]

    def test_perform(self, calls):
        """perform runs nullary actions in order."""
        assert perform(lambda: calls.append(1), lambda: calls.append(2)) == unit
        assert calls == [1, 2]

    def test_ignore(self):
        """ignore discards any value."""
        assert ignore('anything') == unit


class TestMatch:
    """Tests for match on bools and sum types."""

    def test_match_bool(self):
        """A bool selects one of two thunks."""
        assert match(True, lambda: 'yes', lambda: 'no') == 'yes'
        assert match(False, lambda: 'yes', lambda: 'no') == 'no'

    def test_match_bool_is_lazy(self, calls):
        """The other thunk is not called."""
        match(True, lambda: calls.append('t'), lambda: calls.append('f'))
        assert calls == ['t']

    def test_match_bool_requires_two_handlers(self):
        """A bool needs exactly two handlers."""
        with pytest.raises(TypeError):
            match(True, lambda: 1)

    def test_match_delegates_to_sum_types(self):
        """Option, Result and Union subjects use their own match."""
        assert match(Some(2), lambda x: x * 2, lambda: 0) == 4
        assert match(Failure('e'), lambda x: x, lambda e: e.upper()) == 'E'
        assert match(Union2.first(1), lambda v: 'first', lambda v: 'second') == 'first'

    def test_match_rejects_other_subjects(self):
        """Plain values cannot be matched."""
        with pytest.raises(TypeError):
            match(1, lambda: 'a', lambda: 'b')


class TestSeq:
    """Tests for cons and append."""

    def test_cons_append(self):
        """cons then append gives the concatenation."""
        assert cons('1', '2').append('3', '4') == ('1', '2', '3', '4')

    def test_append_is_persistent(self):
        """append never modifies the receiver."""
        base = cons(1, 2)
        extended = base.append(3)
        assert base == (1, 2)
        assert extended == (1, 2, 3)
        assert isinstance(extended, Seq)

    def test_concat(self):
        """concat appends every element of an iterable."""
        assert cons(1).concat(range(2, 4)) == (1, 2, 3)

    def test_free_append_on_any_iterable(self):
        """append works on lists and generators."""
        assert append([1, 2], 3) == (1, 2, 3)
        assert append((x for x in 'ab'), 'c') == ('a', 'b', 'c')

    def test_empty_cons(self):
        """cons() is an empty Seq."""
        assert cons() == ()
        assert repr(cons(1)) == 'Seq([1])'


class TestToAsync:
    """Tests for to_async."""

    @pytest.mark.asyncio
    async def test_to_async(self):
        """to_async lifts a value into a coroutine."""
        assert await to_async(5) == 5
