from __future__ import annotations

# Public surface for the compiler package
from .opcodes import Opcode
from .chunk import Chunk, constant_chunk, emit_call
from .disasm import disassemble_chunk

__all__ = [
    "Opcode",
    "Chunk",
    "constant_chunk",
    "emit_call",
    "disassemble_chunk",
]
