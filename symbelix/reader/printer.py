"""Render uncompiled nodes back to source-like text.

Used for unresolved-call messages, which must show the parameters exactly as
they were written (nested calls included, never their compiled form).
"""
from __future__ import annotations

from typing import Iterable

from symbelix import Node
from symbelix.types.literals import ListLit, Number, StringLit, is_form
from symbelix.types.symbol import Symbol


def show(node: Node) -> str:
    if isinstance(node, Number):
        return str(node.value)
    if isinstance(node, (Symbol, StringLit)):
        return str(node)
    if isinstance(node, ListLit):
        return "[" + " ".join(show(x) for x in node.elements) + "]"
    if is_form(node):
        return render(node)
    return str(node)


def render(nodes: Iterable[Node]) -> str:
    """Space-separated, parenthesized rendering of a sequence of nodes."""
    return "(" + " ".join(show(x) for x in nodes) + ")"
