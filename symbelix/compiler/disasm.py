from __future__ import annotations

from .chunk import Chunk
from .opcodes import Opcode, OPERAND_WIDTH


def _describe_const(value) -> str:
    fn = getattr(value, "__func__", None)
    owner = getattr(value, "__self__", None)
    if fn is not None and owner is not None:
        return f"<call {type(owner).__name__}.{fn.__name__}>"
    return repr(value)


def disassemble_chunk(chunk: Chunk, indent: str = "") -> str:
    code = chunk.code
    consts = chunk.constants
    out = []
    i = 0
    while i < len(code):
        op = code[i]
        try:
            opname = Opcode(op).name
        except ValueError:
            opname = f"OP_{op:02X}"
        line = f"{indent}{i:04d}: {opname}"
        i += 1
        if OPERAND_WIDTH.get(op, 0) == 2:
            val = (code[i] << 8) | code[i + 1]
            i += 2
            if op == Opcode.LIST:
                line += f" count={val}"
            else:
                line += f" {val}"
        out.append(line)
    # Append constants info
    out.append(f"{indent}-- constants --")
    for idx, c in enumerate(consts):
        if isinstance(c, Chunk):
            out.append(f"{indent}[{idx}] <Chunk>")
            out.append(disassemble_chunk(c, indent + "    "))
        else:
            out.append(f"{indent}[{idx}] {_describe_const(c)}")
    return "\n".join(out)
