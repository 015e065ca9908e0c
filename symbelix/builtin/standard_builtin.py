from __future__ import annotations

from symbelix.builtin.list_builtin import ListLibrary
from symbelix.builtin.math_builtin import MathLibrary
from symbelix.builtin.string_builtin import StringLibrary
from symbelix.types.errors import ArityError


class StandardLibrary(MathLibrary, ListLibrary, StringLibrary):
    """Every builtin function in one library, plus a few general helpers."""

    name = "standard"

    def identity(self, args):
        if len(args) != 1:
            raise ArityError("identity", "1", len(args))
        return args[0]

    def equal(self, args):
        """True when all arguments are equal (trivially so for zero or one)."""
        return all(a == b for a, b in zip(args, args[1:]))
