import pytest
from hypothesis import given, settings, HealthCheck, strategies as st

from symbelix.reader.parser import lex, read
from symbelix.types.errors import ParseFailure
from symbelix.types.literals import ListLit, Number, StringLit
from symbelix.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a", 1)]),
        ("(add 1 2)", [("lparen", "(", 1), ("atom", "add", 1), ("atom", "1", 1), ("atom", "2", 1), ("rparen", ")", 1)]),
        ("[1 2]", [("lbracket", "[", 1), ("atom", "1", 1), ("atom", "2", 1), ("rbracket", "]", 1)]),
        ('"hello"', [("string", '"hello"', 1)]),
        (" ; comment\n a b", [("atom", "a", 2), ("atom", "b", 2)]),
        ("a\n\nb", [("atom", "a", 1), ("atom", "b", 3)]),
        ("1,2", [("atom", "1", 1), ("atom", "2", 1)]),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


def test_lexer_counts_lines_inside_strings():
    tokens = list(lex('"a\nb" c'))
    assert tokens[-1] == ("atom", "c", 2)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", Number(1, 42)),
        ("-7", Number(1, -7)),
        ("3.5", Number(1, 3.5)),
        ("1e3", Number(1, 1000.0)),
        ("add", Symbol(1, "add")),
        ("-", Symbol(1, "-")),
        ('"two words"', StringLit(1, "two words")),
        ('"say \\"hi\\"\\n"', StringLit(1, 'say "hi"\n')),
        ("[1 a]", ListLit((Number(1, 1), Symbol(1, "a")))),
        ("[]", ListLit(())),
        ("()", ()),
    ]
)
def test_read_atoms_and_literals(source, expected):
    assert read(source) == expected


def test_read_nested_form_keeps_lines():
    code = read("(sub\n  (add 1 2)\n  [3 (first [4])])")
    assert code == (
        Symbol(1, "sub"),
        (Symbol(2, "add"), Number(2, 1), Number(2, 2)),
        ListLit((Number(3, 3), (Symbol(3, "first"), ListLit((Number(3, 4),))))),
    )


def test_forms_are_tuples():
    assert isinstance(read("(a (b))"), tuple)
    assert isinstance(read("(a (b))")[1], tuple)


@pytest.mark.parametrize(
    "source,reason,line",
    [
        ("", "empty program", 1),
        ("   ; nothing here", "empty program", 1),
        ("(add 1 2", "unbalanced brackets opened at line 1", 1),
        ("(add\n[1 2)", "unexpected ')'", 2),
        ("(add 1 2))", "unexpected ')' after end of expression", 1),
        ("1 2", "unexpected '2' after end of expression", 1),
        (")", "unexpected ')'", 1),
        ('(concat "abc)', "unterminated string", 1),
    ]
)
def test_read_errors(source, reason, line):
    with pytest.raises(ParseFailure) as exc:
        read(source)
    assert exc.value == ParseFailure(reason, line)


def test_parse_failure_message():
    assert ParseFailure("empty program", 3).message == "Syntax error at line 3: empty program"


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(st.integers())
def test_integer_literals_read_as_numbers(n):
    assert read(str(n)) == Number(1, n)


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(st.text(alphabet=st.characters(exclude_characters='"\\', exclude_categories=("Cs",))))
def test_plain_strings_read_verbatim(text):
    assert read(f'"{text}"') == StringLit(1, text)
