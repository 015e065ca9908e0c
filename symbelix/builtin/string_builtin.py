from __future__ import annotations

from typing import Any

from symbelix.library.base import Library
from symbelix.types.errors import ArgumentTypeError, ArityError


def _one_string(function: str, args: list[Any]) -> str:
    if len(args) != 1:
        raise ArityError(function, "1", len(args))
    if not isinstance(args[0], str):
        raise ArgumentTypeError(function, f"expected a string, got {args[0]!r}")
    return args[0]


class StringLibrary(Library):
    name = "string"

    def concat(self, args):
        """Join the text of every argument; numbers are written as read."""
        return "".join(str(x) for x in args)

    def upcase(self, args):
        return _one_string("upcase", args).upper()

    def downcase(self, args):
        return _one_string("downcase", args).lower()

    def length(self, args):
        return len(_one_string("length", args))

    def split(self, args):
        """Split a string on whitespace, or on the separator given as second argument."""
        if len(args) not in (1, 2):
            raise ArityError("split", "1 or 2", len(args))
        text = _one_string("split", args[:1])
        if len(args) == 2:
            return text.split(_one_string("split", args[1:]))
        return text.split()
