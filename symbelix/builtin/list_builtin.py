"""List processing functions. Lists are plain Python lists."""
from __future__ import annotations

from typing import Any

from symbelix.library.base import Library
from symbelix.types.errors import ArgumentTypeError, ArityError


def _one_list(function: str, args: list[Any]) -> list[Any]:
    if len(args) != 1:
        raise ArityError(function, "1", len(args))
    value = args[0]
    if not isinstance(value, list):
        raise ArgumentTypeError(function, f"expected a list, got {value!r}")
    return value


class ListLibrary(Library):
    name = "list"

    def first(self, args):
        items = _one_list("first", args)
        if not items:
            raise ArgumentTypeError("first", "empty list")
        return items[0]

    def last(self, args):
        items = _one_list("last", args)
        if not items:
            raise ArgumentTypeError("last", "empty list")
        return items[-1]

    def rest(self, args):
        """Everything but the first element; the empty list stays empty."""
        return _one_list("rest", args)[1:]

    def count(self, args):
        return len(_one_list("count", args))

    def reverse(self, args):
        return _one_list("reverse", args)[::-1]

    def nth(self, args):
        if len(args) != 2:
            raise ArityError("nth", "2", len(args))
        items, index = args
        if not isinstance(items, list):
            raise ArgumentTypeError("nth", f"expected a list, got {items!r}")
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(items):
            raise ArgumentTypeError("nth", f"index {index!r} out of range")
        return items[index]

    def append(self, args):
        """Concatenation of all list arguments."""
        result: list[Any] = []
        for items in args:
            if not isinstance(items, list):
                raise ArgumentTypeError("append", f"expected a list, got {items!r}")
            result.extend(items)
        return result
