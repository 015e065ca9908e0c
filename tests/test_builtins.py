import pytest

from symbelix.interpreter import run
from symbelix.types.errors import ArgumentTypeError, ArityError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(add)", 0),
        ("(add 1 2 3.5)", 6.5),
        ("(subtract 10 3 2)", 5),
        ("(subtract 4)", -4),
        ("(multiply 2 3 4)", 24),
        ("(divide 12 3 2)", 2.0),
        ("(mod 10 3)", 1),
        ("(max 3 9 2)", 9),
        ("(min 3 9 2)", 2),
    ]
)
def test_math(source, expected):
    assert run(source, "math") == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(first [1 2])", 1),
        ("(last [1 2])", 2),
        ("(rest [1 2 3])", [2, 3]),
        ("(rest [])", []),
        ("(count [a b c])", 3),
        ("(reverse [1 2 3])", [3, 2, 1]),
        ("(nth [a b c] 1)", "b"),
        ("(append [1] [] [2 3])", [1, 2, 3]),
    ]
)
def test_lists(source, expected):
    assert run(source, "list") == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(concat "a" b 1)', "ab1"),
        ('(upcase "abc")', "ABC"),
        ('(downcase "ABC")', "abc"),
        ('(length "four")', 4),
        ('(split "a b  c")', ["a", "b", "c"]),
        ('(split "a,b" ",")', ["a", "b"]),
    ]
)
def test_strings(source, expected):
    assert run(source, "string") == expected


def test_standard_combines_everything():
    assert run("(add (first [1 2]) (length \"abc\"))", "standard") == 4
    assert run("(identity [1])", "standard") == [1]
    assert run("(equal 1 1 1)", "standard") is True
    assert run("(equal 1 2)", "standard") is False


@pytest.mark.parametrize(
    "source,library,expected",
    [
        ("(mod 1)", "math", ArityError("mod", "2", 1)),
        ("(subtract)", "math", ArityError("subtract", "at least 1", 0)),
        ('(add 1 "x")', "math", ArgumentTypeError("add", "expected a number, got 'x'")),
        ("(first [])", "list", ArgumentTypeError("first", "empty list")),
        ("(first 1)", "list", ArgumentTypeError("first", "expected a list, got 1")),
        ("(nth [1] 5)", "list", ArgumentTypeError("nth", "index 5 out of range")),
        ("(upcase 1)", "string", ArgumentTypeError("upcase", "expected a string, got 1")),
        ("(identity 1 2)", "standard", ArityError("identity", "1", 2)),
    ]
)
def test_builtin_errors_are_returned(source, library, expected):
    assert run(source, library) == expected


def test_errors_inside_compile_time_eval_are_returned():
    assert run("(eval (identity (proc first [])))", "standard") == ArgumentTypeError("first", "empty list")


def test_host_exceptions_propagate():
    with pytest.raises(ZeroDivisionError):
        run("(divide 1 0)", "math")
