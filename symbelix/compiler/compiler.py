from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from symbelix import CompiledValue, Node
from symbelix.evaluation.evaluator import evaluate
from symbelix.evaluation.special_forms import SPECIAL_FORMS, is_proc_form
from symbelix.library.loader import library_name, load_library
from symbelix.library.registry import LibraryRegistry
from symbelix.reader.printer import render, show
from symbelix.types.deferred import Deferred
from symbelix.types.errors import LibraryContractViolation, SymbelixError, UnresolvedCall
from symbelix.types.literals import ListLit, Number, StringLit, is_form, node_kind, node_line
from symbelix.types.symbol import Symbol

from .chunk import Chunk, constant_chunk


@dataclass
class CompileCtx:
    """State of one top-level compile call.

    The library is looked up and checked the first time a Form needs it and
    reused for the rest of this call only.
    """

    library_ref: Any
    registry: LibraryRegistry | None = None
    _library: Any = None

    def library(self) -> Any:
        if self._library is None:
            self._library = load_library(self.library_ref, self.registry)
        return self._library


def compile(nodes: Node, library: Any, registry: LibraryRegistry | None = None) -> Chunk | Deferred | SymbelixError:
    """Compile a node tree against library.

    Returns a Chunk ready for the evaluator, a Deferred value when the program
    is a top-level ``proc``, or the error that stopped compilation.
    """
    try:
        return compile_node(nodes, CompileCtx(library, registry))
    except SymbelixError as err:
        return err


def compile_node(nodes: Node, ctx: CompileCtx) -> Chunk | Deferred:
    if is_form(nodes):
        return compile_form(nodes, ctx)
    # A lone literal is a program that evaluates to itself
    return constant_chunk(value_of(nodes, ctx))


def compile_form(form: Node, ctx: CompileCtx) -> Chunk | Deferred:
    if not form:
        return constant_chunk([])
    head, *params = form
    if isinstance(head, Symbol):
        handler = SPECIAL_FORMS.get(head.name)
        if handler is not None:
            result = handler(head, params, ctx, compile_node, evaluate)
            if result is not NotImplemented:
                return result
    return compile_call(head, params, ctx)


def compile_call(head: Node, params: list[Node], ctx: CompileCtx) -> Chunk:
    library = ctx.library()
    args = [value_of(p, ctx) for p in params]
    name = show(head)
    fragment = library.resolve(name, args)
    if fragment is NotImplemented:
        raise UnresolvedCall(node_kind(head), name, node_line(head), len(params), render(params))
    if not isinstance(fragment, Chunk):
        raise LibraryContractViolation(library_name(ctx.library_ref))
    return fragment


def value_of(node: Node, ctx: CompileCtx) -> CompiledValue:
    """Compiled value of a call argument.

    Literals become their values and a bare symbol is its name (data, never a
    call). Nested Forms are compiled, so inner calls run before the outer call
    receives their results; a nested ``proc`` is captured as it stands.
    """
    if isinstance(node, (Number, StringLit)):
        return node.value
    if isinstance(node, Symbol):
        return node.name
    if isinstance(node, ListLit):
        return [value_of(x, ctx) for x in node.elements]
    if is_proc_form(node):
        return Deferred(tuple(node[1:]))
    if is_form(node):
        return compile_form(node, ctx)
    raise TypeError(f"not a node: {node!r}")
