from __future__ import annotations

import pytest

from mockcore import Arguments, Cardinality, CardinalityViolation, Expectation, Mock


def make(method_name: str = "greet") -> Expectation:
    return Expectation(Mock(name="m"), method_name, backtrace=())


class TestMatch:
    def test_matches_name_with_any_parameters(self):
        e = make()
        assert e.match("greet", Arguments())
        assert e.match("greet", Arguments.of(1, 2, key="v"))
        assert not e.match("other", Arguments())

    def test_with_args_requires_equal_arguments(self):
        e = make().with_args(1, key="v")
        assert e.match("greet", Arguments.of(1, key="v"))
        assert not e.match("greet", Arguments.of(1))
        assert not e.match("greet", Arguments.of(1, key="w"))
        assert not e.match("greet", Arguments.of(1, "v"))

    def test_with_args_matching_predicate(self):
        e = make().with_args_matching(lambda *args, **kwargs: len(args) == 2)
        assert e.match("greet", Arguments.of("a", "b"))
        assert not e.match("greet", Arguments.of("a"))

    def test_with_args_matching_predicate_arity_mismatch_is_no_match(self):
        e = make().with_args_matching(lambda n: n > 0)
        assert not e.match("greet", Arguments.of(1, 2))
        assert not e.match("greet", Arguments.of(n=1, extra=2))
        assert e.match("greet", Arguments.of(n=1))

    def test_with_args_matching_predicate_errors_propagate(self):
        def explode(value):
            raise TypeError("bad comparison")

        e = make().with_args_matching(explode)
        with pytest.raises(TypeError, match="bad comparison"):
            e.match("greet", Arguments.of(1))

    def test_match_has_no_side_effects(self):
        e = make()
        e.match("greet", Arguments())
        assert e.invocation_count == 0


class TestOutcomes:
    def test_default_returns_none(self):
        assert make().invoke() is None

    def test_returns_sequence_repeats_last(self):
        e = make().returns(1, 2)
        assert [e.invoke(), e.invoke(), e.invoke()] == [1, 2, 2]

    def test_returns_replaces_previous_values(self):
        e = make().returns(1).returns(2)
        assert e.invoke() == 2

    def test_then_appends(self):
        e = make().returns(1).then().raises(ValueError, "done")
        assert e.invoke() == 1
        with pytest.raises(ValueError, match="done"):
            e.invoke()

    def test_raises_instance(self):
        error = KeyError("missing")
        e = make().raises(error)
        with pytest.raises(KeyError) as exc_info:
            e.invoke()
        assert exc_info.value is error

    def test_raises_defaults_to_runtime_error(self):
        with pytest.raises(RuntimeError):
            make().raises().invoke()

    def test_invoke_counts_even_when_raising(self):
        e = make().raises(ValueError)
        with pytest.raises(ValueError):
            e.invoke()
        assert e.invocation_count == 1

    def test_yields_to_block(self):
        received: list[tuple] = []
        e = make().yields("a", 1)
        e.invoke(lambda *params: received.append(params))
        assert received == [("a", 1)]

    def test_multiple_yields(self):
        received: list[int] = []
        e = make().multiple_yields((1,), (2,), (3,))
        e.invoke(received.append)
        assert received == [1, 2, 3]

    def test_yields_without_block_is_ignored(self):
        e = make().yields(1).returns("done")
        assert e.invoke() == "done"

    def test_block_without_yields_is_not_called(self):
        called: list[object] = []
        make().invoke(called.append)
        assert called == []


class TestCardinality:
    def test_default_is_exactly_once(self):
        assert make().cardinality == Cardinality.exactly(1)

    @pytest.mark.parametrize(
        ("configure", "expected"),
        [
            (lambda e: e.once(), Cardinality(1, 1)),
            (lambda e: e.twice(), Cardinality(2, 2)),
            (lambda e: e.never(), Cardinality(0, 0)),
            (lambda e: e.times(3), Cardinality(3, 3)),
            (lambda e: e.times(range(1, 4)), Cardinality(1, 3)),
            (lambda e: e.at_least(2), Cardinality(2, None)),
            (lambda e: e.at_least_once(), Cardinality(1, None)),
            (lambda e: e.at_most(2), Cardinality(0, 2)),
            (lambda e: e.at_most_once(), Cardinality(0, 1)),
        ],
    )
    def test_configuration(self, configure, expected):
        e = make()
        assert configure(e) is e
        assert e.cardinality == expected

    def test_times_rejects_stepped_range(self):
        with pytest.raises(ValueError):
            make().times(range(0, 10, 2))

    def test_never_called_passes_verify(self):
        make().never().verify()

    def test_never_is_only_checked_at_verify(self):
        e = make().never().returns("still answered")
        assert e.invoke() == "still answered"
        with pytest.raises(CardinalityViolation, match="expected calls: never"):
            e.verify()

    def test_at_least_once(self):
        e = make().at_least_once()
        with pytest.raises(CardinalityViolation):
            e.verify()
        e.invoke()
        e.invoke()
        e.verify()


class TestVerify:
    def test_message(self):
        e = make().with_args("ann")
        with pytest.raises(CardinalityViolation) as exc_info:
            e.verify()
        assert str(exc_info.value) == (
            "not all expectations were satisfied\n"
            "Mock:m.greet('ann') - expected calls: exactly once, actual calls: 0"
        )

    def test_context_called_before_check(self):
        e = make()
        seen: list[Expectation] = []
        with pytest.raises(CardinalityViolation):
            e.verify(seen.append)
        assert seen == [e]


def test_method_signature_describes_parameters() -> None:
    assert make().method_signature() == "Mock:m.greet(<any parameters>)"

    def is_admin(user: str) -> bool:
        return user == "root"

    assert make().with_args_matching(is_admin).method_signature() == "Mock:m.greet(<matching is_admin>)"
