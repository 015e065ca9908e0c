"""Run compiled units on the bytecode VM.

The VM implementation is picked per call from configuration: the pure-Python
dispatch-table VM, or the Cython build of the same loop.
"""
from __future__ import annotations

import logging
from typing import Literal

from symbelix import SymbelixValue
from symbelix.compiler.chunk import Chunk
from symbelix.compiler.disasm import disassemble_chunk
from symbelix.config import disasm_enabled, get_vm_backend
from symbelix.types.deferred import Deferred

logger = logging.getLogger(__name__)


def evaluate(unit: Chunk | Deferred, backend: Literal['py', 'cy'] | None = None) -> SymbelixValue:
    # Captured code is a value in its own right
    if isinstance(unit, Deferred):
        return unit
    if disasm_enabled():
        print("=== DISASM ===")
        print(disassemble_chunk(unit))
        print("=== END DISASM ===")
    mode = backend or get_vm_backend()
    logger.debug("evaluating chunk on %s VM", mode)
    if mode == 'cy':
        from symbelix.compiler.vm_cy import run_chunk
    else:
        from symbelix.compiler.vm import run_chunk
    return run_chunk(unit)
