"""
Tests for argument adapters.
"""

from types import SimpleNamespace

import pytest

from fn_adapter import (
    ContextLookupError,
    Failure,
    MissingKey,
    MissingTransformError,
    Success,
    ary,
    call,
    collect_into,
    flip,
    over,
    over_args,
    spread_over,
    try_call,
)


def capture(*args, **kwargs):
    return args, kwargs


class TestAry:
    """Tests for the arity limiter."""

    def test_limits_max_to_two_arguments(self):
        first_two_max = ary(max, 2)
        assert first_two_max(2, 6, 9) == 6

    def test_maps_over_argument_lists(self):
        first_two_max = ary(max, 2)
        assert [first_two_max(*x) for x in [[2, 6, 9], [8, 4, 6], [10, 1]]] == [6, 8, 10]

    def test_fewer_arguments_than_n_is_fine(self):
        assert ary(capture, 3)(1) == ((1,), {})

    def test_zero_drops_everything(self):
        assert ary(capture, 0)(1, 2, 3) == ((), {})

    def test_keyword_arguments_pass_through(self):
        assert ary(capture, 1)(1, 2, key="v") == ((1,), {"key": "v"})

    def test_negative_n_raises(self):
        with pytest.raises(ValueError):
            ary(capture, -1)

    @pytest.mark.parametrize("n", [1.5, "2", True, None])
    def test_non_int_n_raises(self, n):
        with pytest.raises(TypeError):
            ary(capture, n)


class TestCall:
    """Tests for context method dispatch."""

    def test_dispatches_to_mapping_entry(self):
        context = {"greet": lambda name: "hi " + name}
        assert call("greet", "sam")(context) == "hi sam"

    def test_dispatches_to_object_attribute(self):
        assert call("upper")("abc") == "ABC"
        assert call("split", ",")("a,b") == ["a", "b"]

    def test_same_dispatcher_over_different_contexts(self):
        describe = call("describe", 3)
        loud = SimpleNamespace(describe=lambda n: "!" * n)
        quiet = {"describe": lambda n: "." * n}
        assert [describe(loud), describe(quiet)] == ["!!!", "..."]

    def test_keyword_arguments_are_stored(self):
        context = {"fmt": lambda value, sep="-": sep.join(value)}
        assert call("fmt", "ab", sep="+")(context) == "a+b"

    def test_missing_key_raises_lookup_error(self):
        with pytest.raises(ContextLookupError) as excinfo:
            call("greet", "sam")({})
        assert excinfo.value.key == "greet"
        assert isinstance(excinfo.value, LookupError)

    def test_missing_attribute_raises_lookup_error(self):
        with pytest.raises(ContextLookupError):
            call("nope")(object())

    def test_unhashable_key_raises_lookup_error(self):
        with pytest.raises(ContextLookupError, match="unhashable key"):
            call(["k"])({})

    def test_non_callable_value_raises_lookup_error(self):
        with pytest.raises(ContextLookupError, match="not callable"):
            call("greet")({"greet": "hello"})

    def test_invoked_callable_errors_propagate(self):
        def fail():
            raise ZeroDivisionError("inner")

        with pytest.raises(ZeroDivisionError, match="inner"):
            call("fail")({"fail": fail})


class TestTryCall:
    """Tests for dispatch with a lookup-failure result."""

    def test_success(self):
        assert try_call("greet", "sam")({"greet": lambda n: "hi " + n}) == Success("hi sam")

    def test_missing_key_is_failure(self):
        assert try_call("greet")({}) == Failure(MissingKey("greet"))

    def test_unhashable_key_is_failure(self):
        result = try_call(["k"])({"k": len})
        assert result == Failure(MissingKey(["k"], "unhashable key"))

    def test_non_callable_is_failure(self):
        result = try_call("value")({"value": 1})
        assert result == Failure(MissingKey("value", "not callable"))


class TestCollectAndSpread:
    """Tests for sequence <-> variadic adapters."""

    def test_collect_into_gathers_arguments(self):
        assert collect_into(sum)(1, 2, 3) == 6
        assert collect_into(list)() == []

    def test_collect_into_preserves_order(self):
        assert collect_into(lambda xs: xs)(3, 1, 2) == [3, 1, 2]

    def test_spread_over_spreads_sequence(self):
        assert spread_over(max)([1, 9, 4]) == 9
        assert spread_over(capture)((1, 2)) == ((1, 2), {})

    def test_spread_over_accepts_any_iterable(self):
        assert spread_over(capture)(iter("ab")) == (("a", "b"), {})


class TestFlip:
    """Tests for argument flipping."""

    def test_first_argument_moves_last(self):
        subtract = lambda a, b, c: a - b - c
        assert flip(subtract)(1, 2, 3) == subtract(2, 3, 1)

    def test_single_argument(self):
        assert flip(capture)(1) == ((1,), {})

    def test_no_arguments(self):
        assert flip(capture)() == ((), {})

    def test_merge_from_pattern(self):
        merge_from = flip(lambda target, source: {**target, **source})
        assert merge_from({"name": "John"}, {"age": 3}) == {"age": 3, "name": "John"}


class TestOver:
    """Tests for multi-function fan-out."""

    def test_min_max(self):
        assert over(min, max)(1, 5, 3) == [1, 5]

    def test_function_order_preserved(self):
        assert over(max, min)(1, 5, 3) == [5, 1]

    def test_no_functions(self):
        assert over()(1, 2) == []

    def test_every_function_gets_same_arguments(self):
        assert over(capture, capture)(1, k=2) == [((1,), {"k": 2}), ((1,), {"k": 2})]


class TestOverArgs:
    """Tests for per-argument transforms."""

    def test_transforms_by_position(self):
        square = lambda n: n * n
        double = lambda n: n * 2
        fn = over_args(lambda x, y: [x, y], [square, double])
        assert fn(9, 3) == [81, 6]

    def test_extra_transforms_are_ignored(self):
        fn = over_args(capture, [str, str, str])
        assert fn(1) == (("1",), {})

    def test_missing_transform_raises(self):
        applied = []

        def track(x):
            applied.append(x)
            return x

        fn = over_args(capture, [track])
        with pytest.raises(MissingTransformError) as excinfo:
            fn(1, 2)
        assert excinfo.value.index == 1
        assert isinstance(excinfo.value, IndexError)
        assert applied == []

    def test_keyword_arguments_untouched(self):
        fn = over_args(capture, [abs])
        assert fn(-1, flag=-2) == ((1,), {"flag": -2})
