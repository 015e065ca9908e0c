"""Find the library a compile call refers to and check it can be used.

A reference is one of:

- a name registered in a LibraryRegistry (e.g. ``"math"``),
- a dotted import path, ``package.module`` or ``package.module:attribute``,
  for libraries shipped as plugins,
- the library object itself (an instance, a class, or a module).

Classes are instantiated with no arguments. A class that cannot be, or a
module that fails to import, is reported as a library that doesn't exist.
Nothing is cached: every call looks the reference up again.
"""
from __future__ import annotations

import importlib
import logging
import types
from typing import Any

from symbelix.library.contract import conforms
from symbelix.library.registry import LibraryRegistry, get_registry
from symbelix.types.errors import LibraryContractViolation, LibraryNotFound

logger = logging.getLogger(__name__)


def library_name(ref: Any) -> str:
    """Name of a library reference, as used in error messages."""
    if isinstance(ref, str):
        return ref
    if isinstance(ref, types.ModuleType):
        return ref.__name__
    if isinstance(ref, type):
        return ref.__name__
    name = getattr(ref, "name", None)
    return name if isinstance(name, str) else type(ref).__name__


def _import_object(path: str) -> Any:
    module_path, _, attr_path = path.partition(":")
    if not module_path or module_path.startswith("."):
        raise LibraryNotFound(path)
    try:
        obj: Any = importlib.import_module(module_path)
    except ImportError as err:
        # A plugin that fails to import is as unusable as a missing one
        logger.debug("cannot import library %s: %s", path, err)
        raise LibraryNotFound(path) from err
    for attr in filter(None, attr_path.split(".")):
        try:
            obj = getattr(obj, attr)
        except AttributeError as err:
            raise LibraryNotFound(path) from err
    return obj


def find_library(ref: Any, registry: LibraryRegistry | None = None) -> Any:
    """Resolve ref to a library object. Raises LibraryNotFound."""
    if ref is None:
        raise LibraryNotFound("None")
    if isinstance(ref, str):
        registry = registry if registry is not None else get_registry()
        obj = registry.get(ref)
        if obj is None:
            obj = _import_object(ref)
            logger.debug("loaded library %s from import path", ref)
    else:
        obj = ref
    if isinstance(obj, type):
        try:
            obj = obj()
        except TypeError as err:
            logger.debug("cannot instantiate library %s: %s", library_name(ref), err)
            raise LibraryNotFound(library_name(ref)) from err
    return obj


def load_library(ref: Any, registry: LibraryRegistry | None = None) -> Any:
    """Resolve ref and check it implements the library contract.

    Raises LibraryNotFound or LibraryContractViolation.
    """
    library = find_library(ref, registry)
    if not conforms(library):
        raise LibraryContractViolation(library_name(ref))
    return library
