"""Arithmetic functions over int and float arguments."""
from __future__ import annotations

from functools import reduce
from typing import Any

from symbelix.library.base import Library
from symbelix.types.errors import ArgumentTypeError, ArityError


def _numbers(function: str, args: list[Any], at_least: int = 0) -> list[Any]:
    if len(args) < at_least:
        raise ArityError(function, f"at least {at_least}", len(args))
    for value in args:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ArgumentTypeError(function, f"expected a number, got {value!r}")
    return args


class MathLibrary(Library):
    name = "math"

    def add(self, args):
        """Sum of all arguments; 0 when there are none."""
        return sum(_numbers("add", args))

    def subtract(self, args):
        """First argument minus the rest; negation with a single argument."""
        first, *rest = _numbers("subtract", args, at_least=1)
        if not rest:
            return -first
        return first - sum(rest)

    def multiply(self, args):
        return reduce(lambda a, b: a * b, _numbers("multiply", args), 1)

    def divide(self, args):
        """First argument divided by each of the rest in turn."""
        first, *rest = _numbers("divide", args, at_least=2)
        return reduce(lambda a, b: a / b, rest, first)

    def mod(self, args):
        if len(args) != 2:
            raise ArityError("mod", "2", len(args))
        a, b = _numbers("mod", args)
        return a % b

    def max(self, args):
        return max(_numbers("max", args, at_least=1))

    def min(self, args):
        return min(_numbers("min", args, at_least=1))
