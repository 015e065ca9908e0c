from __future__ import annotations

from enum import IntEnum


class Opcode(IntEnum):
    # Constants
    PUSH_CONST = 0x05  # u16 index

    # Calls
    CALL = 0x40  # u16 callable index; pops one list, pushes the result
    RUN_CHUNK = 0x41  # u16 chunk index; runs a nested chunk, pushes its result

    # Lists
    LIST = 0x51  # u16 count

    # Control flow
    RETURN = 0x24


# Operand width in bytes, per opcode
OPERAND_WIDTH: dict[int, int] = {
    Opcode.PUSH_CONST: 2,
    Opcode.CALL: 2,
    Opcode.RUN_CHUNK: 2,
    Opcode.LIST: 2,
    Opcode.RETURN: 0,
}
