from __future__ import annotations

from symbelix import Node
from symbelix.types.deferred import Deferred
from symbelix.types.symbol import Symbol


def proc_form(
    head: Symbol,
    params: list[Node],
    ctx,
    compile_fn,
    evaluate_fn,
) -> Deferred:
    # Capture the raw nodes; neither the parameters nor the library are looked at
    return Deferred(tuple(params))
