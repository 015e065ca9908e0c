"""Builtin function libraries, registered by name at startup."""
from __future__ import annotations

from symbelix.builtin.list_builtin import ListLibrary
from symbelix.builtin.math_builtin import MathLibrary
from symbelix.builtin.standard_builtin import StandardLibrary
from symbelix.builtin.string_builtin import StringLibrary

BUILTIN_LIBRARIES = (MathLibrary, ListLibrary, StringLibrary, StandardLibrary)


def register(registry) -> None:
    for cls in BUILTIN_LIBRARIES:
        registry.register(cls.name, cls())
