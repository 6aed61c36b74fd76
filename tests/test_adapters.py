import pytest
from pydantic import ValidationError
import lazyseq
from lazyseq import Iterable, IteratorResult, Restartable


def make_pull(values):
    """Build a raw pull function over values returning value/done records"""
    it = iter(values)

    def pull():
        for value in it:
            return {"value": value, "done": False}
        return {"value": None, "done": True}

    return pull


class TestIterable:
    """Test adapting raw pull functions"""

    def test_iterable_from_mappings(self):
        result = list(Iterable(make_pull([1, 2, 3])))
        assert result == [1, 2, 3], f"Unexpected result: {result}"

    def test_iterable_from_models(self):
        state = {"i": 0}

        def pull():
            state["i"] += 1
            if state["i"] > 2:
                return IteratorResult(done=True)
            return IteratorResult(value=state["i"])

        assert list(Iterable(pull)) == [1, 2]

    def test_done_value_is_dropped(self):
        results = iter([{"value": "a"}, {"value": "final", "done": True}])
        result = list(Iterable(lambda: next(results)))
        assert result == ["a"], f"Value of the done record should be dropped, got {result}"

    def test_none_values_are_yielded(self):
        result = list(Iterable(make_pull([None, 0, None])))
        assert result == [None, 0, None], f"Unexpected result: {result}"

    def test_iterable_joins_combinators(self):
        """Test an unbounded custom producer inside a pipeline"""
        counter = {"n": 0}

        def pull():
            counter["n"] += 1
            return {"value": counter["n"]}

        evens = lazyseq.filter(Iterable(pull), lambda x: x % 2 == 0)
        result = list(lazyseq.take_n(3, evens))
        assert result == [2, 4, 6], f"Unexpected result: {result}"
        assert counter["n"] == 6, f"Expected 6 pulls, got {counter['n']}"

    def test_shared_pull_function(self):
        """Test that a second pass continues from the pull function's state"""
        adapted = Iterable(make_pull([1, 2, 3]))
        assert list(lazyseq.take_n(2, adapted)) == [1, 2]
        assert list(adapted) == [3]
        assert list(adapted) == []

    def test_adapter_is_its_own_iterator(self):
        adapted = Iterable(make_pull([1]))
        assert iter(adapted) is adapted
        assert next(adapted) == 1
        with pytest.raises(StopIteration):
            next(adapted)

    def test_malformed_result_raises(self):
        with pytest.raises(ValidationError):
            list(Iterable(lambda: 42))


class TestIteratorResult:
    """Test the pull record model"""

    def test_defaults(self):
        result = IteratorResult()
        assert result.value is None
        assert result.done is False

    def test_frozen(self):
        result = IteratorResult(value=1)
        with pytest.raises(ValidationError):
            result.done = True

    def test_any_value_type_accepted(self):
        """Test that arbitrary objects validate as values with a frozen model"""
        marker = object()
        result = IteratorResult.coerce({"value": marker})
        assert result.value is marker
        assert IteratorResult.model_config.get("arbitrary_types_allowed") is None

    def test_coerce_keeps_instances(self):
        result = IteratorResult(value=object())
        assert IteratorResult.coerce(result) is result


class TestRestartable:
    """Test re-invoking a generator factory on every pass"""

    def test_each_pass_is_fresh(self):
        source = Restartable(lazyseq.repeat, 3, lambda i: i + 1)
        assert list(source) == [1, 2, 3]
        assert list(source) == [1, 2, 3], "Second pass should restart"

    def test_kwargs_are_forwarded(self):
        source = Restartable(lazyseq.range, 0, step=2, stop=6)
        assert list(source) == [0, 2, 4]
