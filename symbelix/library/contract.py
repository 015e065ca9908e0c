"""The interface a function library must satisfy.

A library turns a function name and the compiled arguments of a call into an
executable chunk, or answers ``NotImplemented`` when it has no such function.
Anything with a conforming ``resolve`` method is a library: an instance, a
class, or a plain Python module.
"""
from __future__ import annotations

import inspect
from typing import Any, Protocol, runtime_checkable

from symbelix import CompiledValue
from symbelix.compiler.chunk import Chunk


@runtime_checkable
class LibraryContract(Protocol):
    def resolve(self, name: str, args: list[CompiledValue]) -> Chunk | Any: ...


def conforms(library: Any) -> bool:
    """Probe whether library exposes resolve(name, args) at run time."""
    if not isinstance(library, LibraryContract):
        return False
    resolve = getattr(library, "resolve")
    if not callable(resolve):
        return False
    try:
        inspect.signature(resolve).bind("name", [])
    except TypeError:
        return False
    except ValueError:
        # No signature available (builtins, some extension types): trust the attribute
        return True
    return True
