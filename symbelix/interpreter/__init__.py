from __future__ import annotations

import logging
from typing import Any

from symbelix import SymbelixValue, TraceHook
from symbelix.compiler.compiler import compile
from symbelix.config import get_default_library
from symbelix.evaluation.evaluator import evaluate
from symbelix.library.registry import LibraryRegistry
from symbelix.reader.parser import read
from symbelix.types.deferred import Deferred
from symbelix.types.errors import SymbelixError

logger = logging.getLogger(__name__)


def identity(artifact: Any, label: str) -> Any:
    return artifact


class Interpreter:
    """
    Orchestrates reading, compiling and evaluating Symbelix programs against a
    pluggable function library.
    Holds no state between runs: the library is looked up again on every run.
    """

    def __init__(
        self,
        library: Any = None,
        trace: TraceHook | None = None,
        registry: LibraryRegistry | None = None,
    ):
        self.library = library
        self.trace: TraceHook = trace or identity
        self.registry = registry

    def run(self, source: str) -> SymbelixValue | SymbelixError:
        """Run source and return its value, or the error that stopped it.

        The trace hook sees the parsed code ("code"), the compiled unit
        ("unit") and the final value or error ("result").
        """
        library = self.library if self.library is not None else get_default_library()
        try:
            result = self._run(source, library)
        except SymbelixError as err:
            # reader failures and errors raised by builtin library functions
            logger.debug("run failed: %s", err)
            result = err
        self.trace(result, "result")
        return result

    def _run(self, source: str, library: Any) -> SymbelixValue | SymbelixError:
        code = read(source)
        self.trace(code, "code")
        unit = compile(code, library, self.registry)
        if isinstance(unit, SymbelixError):
            return unit
        self.trace(unit, "unit")
        # A top-level proc yields the captured code itself
        if isinstance(unit, Deferred):
            return unit
        return evaluate(unit)


def run(
    source: str,
    library: Any = None,
    trace: TraceHook | None = None,
    registry: LibraryRegistry | None = None,
) -> SymbelixValue | SymbelixError:
    return Interpreter(library, trace, registry).run(source)
