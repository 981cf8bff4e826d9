import pytest

from mockcore import Arguments, Mock, MissingExpectation, UnexpectedInvocation, config


def test_verify_always_raises() -> None:
    m = Mock(name="m")
    missing = MissingExpectation(m, "greet").with_args("ann", loud=True)
    with pytest.raises(UnexpectedInvocation) as exc_info:
        missing.verify()
    assert str(exc_info.value) == "unexpected invocation: Mock:m.greet('ann', loud=True)"
    assert exc_info.value.arguments == Arguments.of("ann", loud=True)


def test_lists_similar_expectations_only() -> None:
    m = Mock(name="m")
    m.expects("greet").with_args("bob")
    m.stubs("greet").with_args("eve")
    m.stubs("other")
    missing = MissingExpectation(m, "greet").with_args("ann")
    assert [e.method_name for e in missing.similar_expectations()] == ["greet", "greet"]
    with pytest.raises(UnexpectedInvocation) as exc_info:
        missing.verify()
    assert str(exc_info.value) == (
        "unexpected invocation: Mock:m.greet('ann')\n"
        "similar expectations:\n"
        "  Mock:m.greet('bob')\n"
        "  Mock:m.greet('eve')"
    )


def test_similar_expectations_can_be_hidden() -> None:
    m = Mock(name="m")
    m.expects("greet").with_args("bob")
    with config.override(show_similar_expectations=False):
        with pytest.raises(UnexpectedInvocation) as exc_info:
            m.greet("ann")
    assert "similar expectations" not in str(exc_info.value)


def test_is_not_registered_on_the_mock() -> None:
    m = Mock()
    with pytest.raises(UnexpectedInvocation):
        m.greet()
    assert m.expectations == ()
    assert not m.responds_to("greet")
