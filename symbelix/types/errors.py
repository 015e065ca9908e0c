"""Error values produced by the reader and the compiler.

Errors are raised internally at the point of detection so that a failure
anywhere in a nested compilation aborts the whole of it. The public entry
points (``compile`` and ``run``) catch them and hand them back as ordinary
return values. Each error is a dataclass, so two errors with the same fields
compare equal.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


class SymbelixError(Exception):
    """ Base class for all Symbelix errors"""

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __post_init__(self):
        # args holds the field values, so type(self)(*self.args) rebuilds the error
        super().__init__(*(getattr(self, f.name) for f in fields(self)))

    def __str__(self):
        return self.message


@dataclass(eq=True)
class UnresolvedCall(SymbelixError):
    """ Returned when the library has no function for a call head"""
    kind: str
    name: str
    line: int
    arg_count: int
    arg_repr: str

    @property
    def message(self) -> str:
        return (
            f"Unknown function ({self.kind}) '{self.name}' at line {self.line} "
            f"with {self.arg_count} parameter(s): {self.arg_repr}"
        )


@dataclass(eq=True)
class LibraryNotFound(SymbelixError):
    """ Returned when a library reference cannot be resolved or imported"""
    name: str

    @property
    def message(self) -> str:
        return f"The library {self.name} doesn't exist"


@dataclass(eq=True)
class LibraryContractViolation(SymbelixError):
    """ Returned when a library exists but has no usable resolve(name, args)"""
    name: str

    @property
    def message(self) -> str:
        return f"The library {self.name} doesn't implement the library contract"


@dataclass(eq=True)
class EvalTargetNotDeferred(SymbelixError):
    """ Returned when the argument of eval does not evaluate to code captured by proc"""
    value: Any
    line: int

    @property
    def message(self) -> str:
        return f"eval expects code captured by proc at line {self.line}, got {self.value!r}"


@dataclass(eq=True)
class ParseFailure(SymbelixError):
    """ Returned when source text cannot be read into nodes"""
    reason: str
    line: int

    @property
    def message(self) -> str:
        return f"Syntax error at line {self.line}: {self.reason}"


@dataclass(eq=True)
class ArityError(SymbelixError):
    """ Raised by builtin library functions called with the wrong number of arguments"""
    function: str
    expected: str
    got: int

    @property
    def message(self) -> str:
        return f"{self.function} expects {self.expected} argument(s), got {self.got}"


@dataclass(eq=True)
class ArgumentTypeError(SymbelixError):
    """ Raised by builtin library functions called with arguments of the wrong type"""
    function: str
    reason: str

    @property
    def message(self) -> str:
        return f"{self.function}: {self.reason}"

