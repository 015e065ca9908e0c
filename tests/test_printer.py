import pytest

from symbelix.reader.parser import read
from symbelix.reader.printer import render, show
from symbelix.types.literals import ListLit, Number, StringLit
from symbelix.types.symbol import Symbol


@pytest.mark.parametrize(
    "node,expected",
    [
        (Number(1, 3), "3"),
        (Number(1, 2.5), "2.5"),
        (Symbol(1, "built"), "built"),
        (StringLit(1, "two words"), "two words"),
        (ListLit((Number(1, 1), Number(1, 2))), "[1 2]"),
        (ListLit(()), "[]"),
        ((Symbol(1, "add"), Number(1, 1), Number(1, 2)), "(add 1 2)"),
        ((), "()"),
    ]
)
def test_show(node, expected):
    assert show(node) == expected


def test_render_wraps_parameters():
    assert render([Number(1, 1), Number(1, 2)]) == "(1 2)"
    assert render([]) == "()"


def test_render_nested_forms_uncompiled():
    _, *params = read("(sub (add 1 2) [x (first [1])] \"s\")")
    assert render(params) == "((add 1 2) [x (first [1])] s)"
