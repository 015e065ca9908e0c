from symbelix.library.base import Library
from symbelix.library.contract import LibraryContract, conforms
from symbelix.library.loader import find_library, load_library, library_name
from symbelix.library.registry import LibraryRegistry, get_registry

__all__ = [
    "Library",
    "LibraryContract",
    "LibraryRegistry",
    "conforms",
    "find_library",
    "get_registry",
    "library_name",
    "load_library",
]
