from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List

from symbelix import CompiledValue
from symbelix.compiler.opcodes import Opcode


@dataclass
class Chunk:
    """An executable fragment: bytecode plus its constants table.

    Operands are u16, stored big-endian. Nested fragments (compiled call
    arguments) live in the constants table and are run with RUN_CHUNK.
    Two chunks built from the same nodes against the same library compare equal.
    """

    code: bytearray = field(default_factory=bytearray)
    constants: List[Any] = field(default_factory=list)

    def add_const(self, value: Any) -> int:
        # Compare by type too: 1, 1.0 and True are distinct constants
        for idx, existing in enumerate(self.constants):
            if type(existing) is type(value) and existing == value:
                return idx
        self.constants.append(value)
        return len(self.constants) - 1

    # --- Emit helpers ---
    def emit_op(self, op: Opcode) -> int:
        self.code.append(int(op))
        return len(self.code) - 1

    def emit_u16(self, v: int) -> None:
        if not 0 <= v <= 0xFFFF:
            raise OverflowError(f"operand {v} does not fit in u16")
        self.code.extend(((v >> 8) & 0xFF, v & 0xFF))

    # --- high-level convenience ---
    def emit_const(self, value: Any) -> None:
        idx = self.add_const(value)
        self.emit_op(Opcode.PUSH_CONST)
        self.emit_u16(idx)

    def emit_value(self, value: CompiledValue) -> None:
        """Emit code pushing a compiled argument value."""
        if isinstance(value, Chunk):
            self.emit_op(Opcode.RUN_CHUNK)
            self.emit_u16(self.add_const(value))
        elif isinstance(value, list):
            for item in value:
                self.emit_value(item)
            self.emit_op(Opcode.LIST)
            self.emit_u16(len(value))
        else:
            self.emit_const(value)

    def emit_return(self) -> "Chunk":
        self.emit_op(Opcode.RETURN)
        return self


def constant_chunk(value: CompiledValue) -> Chunk:
    """A chunk that evaluates to value."""
    chunk = Chunk()
    chunk.emit_value(value)
    return chunk.emit_return()


def emit_call(fn: Callable[[list], Any], args: Iterable[CompiledValue]) -> Chunk:
    """A chunk calling fn with the runtime values of args as one list argument."""
    args = list(args)
    chunk = Chunk()
    chunk.emit_value(args)
    chunk.emit_op(Opcode.CALL)
    chunk.emit_u16(chunk.add_const(fn))
    return chunk.emit_return()
