from mockcore import Arguments, Mock
from mockcore.formatting import format_arguments, format_call, inspect_value


def test_inspect_value_uses_repr() -> None:
    assert inspect_value("a") == "'a'"
    assert inspect_value([1, None]) == "[1, None]"


def test_inspect_value_renders_mocks_by_identity() -> None:
    assert inspect_value(Mock(name="db")) == "Mock:db"


def test_format_arguments() -> None:
    assert format_arguments(Arguments()) == ""
    assert format_arguments(Arguments.of(1, "a", key=Mock(name="k"))) == "1, 'a', key=Mock:k"


def test_format_call() -> None:
    assert format_call(Mock(name="m"), "save", Arguments.of(3)) == "Mock:m.save(3)"
