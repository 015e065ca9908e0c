from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from symbelix.types.symbol import Symbol


@dataclass(frozen=True)
class Number:
    line: int
    value: Union[int, float]

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class StringLit:
    line: int
    value: str

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class ListLit:
    """A literal ``[...]`` list. Never treated as a call, whatever its elements are."""

    elements: tuple[Any, ...] = ()


def is_form(node: Any) -> bool:
    """A Form is a bare sequence of nodes: head first, then the argument nodes."""
    return isinstance(node, (tuple, list))


def node_kind(node: Any) -> str:
    """Name of the node type, as reported in unresolved-call errors."""
    if isinstance(node, Symbol):
        return "symbol"
    if isinstance(node, Number):
        return "number"
    if isinstance(node, StringLit):
        return "string"
    if isinstance(node, ListLit):
        return "list"
    return "form"


def node_line(node: Any) -> int:
    """Source line of a node; for lists and Forms the first line found inside, else 0."""
    if isinstance(node, ListLit):
        node = node.elements
    if is_form(node):
        for child in node:
            line = node_line(child)
            if line:
                return line
        return 0
    return getattr(node, "line", 0)
