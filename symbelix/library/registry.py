from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class LibraryRegistry:
    """Maps library identifiers to library objects, populated at startup."""

    def __init__(self):
        self._libraries: Dict[str, Any] = {}

    def get(self, name: str) -> Optional[Any]:
        return self._libraries.get(name)

    def register(self, name: str, library: Any) -> Any:
        logger.debug("registering library %r as %r", library, name)
        self._libraries[name] = library
        return library

    def unregister(self, name: str) -> None:
        self._libraries.pop(name, None)

    def names(self) -> List[str]:
        return sorted(self._libraries)

    def __contains__(self, name: str) -> bool:
        return name in self._libraries


# Module-level singleton
_registry: Optional[LibraryRegistry] = None


def get_registry() -> LibraryRegistry:
    global _registry
    if _registry is None:
        _registry = LibraryRegistry()
        # Lazy import to avoid circular dependency at module load time
        from symbelix.builtin import register
        register(_registry)
    return _registry
