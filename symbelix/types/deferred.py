from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Deferred:
    """Code captured by ``proc``: the raw, uncompiled Form.

    Holds no compiled representation so that the same code can be compiled
    again later, possibly against a different library.
    """

    code: tuple[Any, ...]

    def __post_init__(self):
        if isinstance(self.code, list):
            object.__setattr__(self, "code", tuple(self.code))
