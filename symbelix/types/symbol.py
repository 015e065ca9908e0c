from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Symbol:
    """A bare identifier read from source, tagged with its line.

    Used either as the head of a Form (a call) or as a literal value when it
    appears in argument position.
    """

    line: int
    name: str

    def __post_init__(self):
        # Intern to ensure fast equality/hash on repeated heads
        object.__setattr__(self, "name", sys.intern(self.name))

    def __str__(self):
        return self.name
