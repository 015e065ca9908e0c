"""``eval``: run code captured by ``proc``.

Two shapes are handled:

- ``(eval (proc code...))`` is a static unwrap. It compiles exactly as
  ``(code...)`` would, with no indirection at run time.
- ``(eval expr)`` is two-stage. ``expr`` is compiled and run immediately; it
  must produce a Deferred value, whose code is then compiled against the same
  library and run. The final value becomes the compiled result.

Any other number of parameters is not the special form; the call is then
resolved against the library like any other.
"""
from __future__ import annotations

import logging

from symbelix import Node
from symbelix.compiler.chunk import Chunk, constant_chunk
from symbelix.types.deferred import Deferred
from symbelix.types.errors import EvalTargetNotDeferred
from symbelix.types.literals import is_form
from symbelix.types.symbol import Symbol

logger = logging.getLogger(__name__)


def is_proc_form(node: Node) -> bool:
    return is_form(node) and len(node) > 0 and isinstance(node[0], Symbol) and node[0].name == "proc"


def captured_body(code: tuple) -> tuple:
    """The Form to compile for captured code.

    ``(proc add 1 2)`` captures the call itself; ``(proc (add 1 2))`` captures
    a single nested Form, which is the call to run.
    """
    if len(code) == 1 and is_form(code[0]):
        return tuple(code[0])
    return tuple(code)


def eval_form(
    head: Symbol,
    params: list[Node],
    ctx,
    compile_fn,
    evaluate_fn,
) -> Chunk | Deferred:
    if len(params) != 1:
        return NotImplemented
    target = params[0]
    if is_proc_form(target):
        logger.debug("unwrapping literal (eval (proc ...)) at line %d", head.line)
        return compile_fn(captured_body(target[1:]), ctx)

    captured = evaluate_fn(compile_fn(target, ctx))
    if not isinstance(captured, Deferred):
        raise EvalTargetNotDeferred(captured, head.line)
    logger.debug("evaluating captured code at line %d", head.line)
    result = evaluate_fn(compile_fn(captured_body(captured.code), ctx))
    if isinstance(result, Deferred):
        return result
    return constant_chunk(result)
