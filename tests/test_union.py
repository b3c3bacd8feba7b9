"""Tests for the fixed-arity Union types."""

import pickle

import pytest

from fprelude import (
    AmbiguousUnionError,
    Union2,
    Union3,
    Union9,
    unit,
)


class TestConstruction:
    """Tests for tag-qualified and type-directed construction."""

    def test_tag_qualified_constructors(self):
        """Each ordinal constructor selects its case."""
        assert Union3.first(1).match(lambda v: 'a', lambda v: 'b', lambda v: 'c') == 'a'
        assert Union3.second(1).match(lambda v: 'a', lambda v: 'b', lambda v: 'c') == 'b'
        assert Union3.third(1).match(lambda v: 'a', lambda v: 'b', lambda v: 'c') == 'c'

    def test_repeated_type_parameters(self):
        """Union2[int, int] keeps the two cases apart."""
        left = Union2.first(1)
        right = Union2.second(1)
        assert left != right
        assert left.match(lambda v: 'first', lambda v: 'second') == 'first'
        assert right.match(lambda v: 'first', lambda v: 'second') == 'second'

    def test_ordinal_past_arity_does_not_exist(self):
        """Union2 has no third case."""
        assert not hasattr(Union2, 'third')
        assert hasattr(Union9, 'ninth')

    def test_direct_instantiation_is_rejected(self):
        """Unions are only built through case constructors."""
        with pytest.raises(TypeError):
            Union2()

    def test_of_picks_matching_type(self):
        """of() selects the case whose type the value belongs to."""
        value = Union2.of('text', int, str)
        assert value == Union2.second('text')

    def test_of_rejects_repeated_types(self):
        """Repeated type parameters are ambiguous."""
        with pytest.raises(AmbiguousUnionError) as excinfo:
            Union2.of(1, int, int)
        assert excinfo.value.matches == 2

    def test_of_rejects_no_match(self):
        """A value of none of the types is rejected."""
        with pytest.raises(AmbiguousUnionError):
            Union2.of(1.5, int, str)

    def test_of_rejects_wrong_type_count(self):
        """of() requires one type per case."""
        with pytest.raises(TypeError):
            Union3.of(1, int, str)

    def test_ambiguous_union_error_is_type_error(self):
        """AmbiguousUnionError can be caught as TypeError."""
        assert issubclass(AmbiguousUnionError, TypeError)


class TestMatch:
    """Tests for match and effect exhaustiveness."""

    def test_match_passes_value(self):
        """The active handler receives the value."""
        assert Union2.second('abc').match(lambda n: n + 1, len) == 3

    def test_match_calls_only_active_handler(self, calls):
        """Only the active case's handler runs."""
        Union3.second('x').match(
            lambda v: calls.append(('first', v)),
            lambda v: calls.append(('second', v)),
            lambda v: calls.append(('third', v)),
        )
        assert calls == [('second', 'x')]

    def test_match_requires_every_handler(self):
        """Too few or too many handlers raise TypeError."""
        with pytest.raises(TypeError):
            Union3.first(1).match(lambda v: v, lambda v: v)
        with pytest.raises(TypeError):
            Union2.first(1).match(lambda v: v, lambda v: v, lambda v: v)

    def test_effect(self, calls):
        """effect runs the active action and returns unit."""
        assert Union2.first(7).effect(calls.append, lambda v: calls.append('never')) == unit
        assert calls == [7]

    def test_effect_requires_every_handler(self):
        """effect has the same arity requirement as match."""
        with pytest.raises(TypeError):
            Union2.first(1).effect(print)

    def test_tap_returns_same_instance(self, calls):
        """tap runs the active action and returns self."""
        value = Union2.second('v')
        assert value.tap(calls.append, calls.append) is value
        assert calls == ['v']

    def test_nine_cases(self):
        """Union9 dispatches its ninth case."""
        handlers = [lambda v, i=i: i for i in range(1, 10)]
        assert Union9.ninth(None).match(*handlers) == 9


class TestValueSemantics:
    """Tests for immutability, equality and hashing."""

    def test_immutable(self):
        """Attributes cannot be set or deleted."""
        value = Union2.first(1)
        with pytest.raises(AttributeError):
            value._value = 2
        with pytest.raises(AttributeError):
            del value._case

    def test_equality_includes_class(self):
        """Different arities are never equal."""
        assert Union2.first(1) == Union2.first(1)
        assert Union2.first(1) != Union3.first(1)

    def test_hashable(self):
        """Equal unions hash equally."""
        assert len({Union2.first(1), Union2.first(1), Union2.second(1)}) == 2

    def test_repr(self):
        """repr shows the case constructor."""
        assert repr(Union3.third('x')) == "Union3.third('x')"

    def test_pickle(self):
        """Unions survive a pickle round trip."""
        value = Union2.second([1, 2])
        assert pickle.loads(pickle.dumps(value)) == value
