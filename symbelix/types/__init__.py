from symbelix.types.symbol import Symbol
from symbelix.types.literals import Number, StringLit, ListLit, is_form, node_kind, node_line
from symbelix.types.deferred import Deferred

__all__ = [
    "Symbol",
    "Number",
    "StringLit",
    "ListLit",
    "Deferred",
    "is_form",
    "node_kind",
    "node_line",
]
