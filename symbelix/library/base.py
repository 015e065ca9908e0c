"""Base class for function libraries.

Subclasses expose functions as public methods taking exactly one positional
argument: the list of evaluated call arguments. The set of such methods is
collected once per subclass and is the library's registry of names.

    class Mathematician(Library):
        name = "math"

        def add(self, args):
            return sum(args)
"""
from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, ClassVar

from symbelix import CompiledValue
from symbelix.compiler.chunk import Chunk, emit_call

# Methods of the protocol itself, never callable from programs
_RESERVED = frozenset({"resolve", "functions"})


def _takes_one_argument(fn: Any) -> bool:
    try:
        params = list(inspect.signature(fn).parameters.values())
    except (TypeError, ValueError):
        return False
    # drop self
    params = params[1:]
    return len(params) == 1 and params[0].kind in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    )


@dataclass(frozen=True, repr=False)
class LibraryCall:
    """Call target stored in a compiled chunk.

    Two calls are equal when they name the same function of the same library
    class, so compiling a program twice gives equal chunks even when each
    compile instantiates the library afresh.
    """

    owner: type
    function: str
    library: Any = field(compare=False)

    def __call__(self, args: list) -> Any:
        return getattr(self.library, self.function)(args)

    def __repr__(self):
        return f"<call {self.owner.__name__}.{self.function}>"


class Library:
    name: ClassVar[str] = "library"
    exported: ClassVar[frozenset[str]] = frozenset()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        found = set()
        for attr in dir(cls):
            if attr.startswith("_") or attr in _RESERVED:
                continue
            value = inspect.getattr_static(cls, attr)
            if inspect.isfunction(value) and _takes_one_argument(value):
                found.add(attr)
        cls.exported = frozenset(found)

    def functions(self) -> list[str]:
        return sorted(self.exported)

    def resolve(self, name: str, args: list[CompiledValue]) -> Chunk | Any:
        if name not in self.exported:
            return NotImplemented
        return emit_call(LibraryCall(type(self), name, self), args)

    def __repr__(self):
        return f"<{type(self).__name__} library {self.name!r}>"
