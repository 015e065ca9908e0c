from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

from symbelix.compiler.chunk import Chunk
from symbelix.compiler.opcodes import Opcode


@dataclass
class Frame:
    chunk: Chunk
    ip: int
    base: int


class VM:
    class RunSignal:
        NORMAL = 0
        RETURN = 1

    def __init__(self):
        self.stack: List[Any] = []
        self.frames: List[Frame] = []
        # Opcode dispatch table
        self._dispatch: dict[int, Callable[[Frame, int], Tuple[int, Any | None]]] = {}
        self._init_dispatch()

    def _init_dispatch(self) -> None:
        d = self._dispatch
        d[Opcode.PUSH_CONST] = self.op_push_const
        d[Opcode.LIST] = self.op_list
        d[Opcode.CALL] = self.op_call
        d[Opcode.RUN_CHUNK] = self.op_run_chunk
        d[Opcode.RETURN] = self.op_return

    def _read_u16(self, frame: Frame) -> int:
        code = frame.chunk.code
        v = (code[frame.ip] << 8) | code[frame.ip + 1]
        frame.ip += 2
        return v

    # --- Per-op handlers ---
    def op_push_const(self, frame: Frame, op: int) -> Tuple[int, Any | None]:
        idx = self._read_u16(frame)
        self.push(frame.chunk.constants[idx])
        return VM.RunSignal.NORMAL, None

    def op_list(self, frame: Frame, op: int) -> Tuple[int, Any | None]:
        count = self._read_u16(frame)
        if count:
            items = self.stack[-count:]
            del self.stack[-count:]
        else:
            items = []
        self.push(items)
        return VM.RunSignal.NORMAL, None

    def op_call(self, frame: Frame, op: int) -> Tuple[int, Any | None]:
        fn = frame.chunk.constants[self._read_u16(frame)]
        args = self.pop()
        self.push(fn(args))
        return VM.RunSignal.NORMAL, None

    def op_run_chunk(self, frame: Frame, op: int) -> Tuple[int, Any | None]:
        nested = frame.chunk.constants[self._read_u16(frame)]
        self.frames.append(Frame(chunk=nested, ip=0, base=len(self.stack)))
        return VM.RunSignal.NORMAL, None

    def op_return(self, frame: Frame, op: int) -> Tuple[int, Any | None]:
        value = self.pop()
        del self.stack[frame.base:]
        self.frames.pop()
        if not self.frames:
            return VM.RunSignal.RETURN, value
        # Hand the result to the calling frame
        self.push(value)
        return VM.RunSignal.NORMAL, None

    # --- Stack helpers ---
    def push(self, v: Any) -> None:
        self.stack.append(v)

    def pop(self) -> Any:
        return self.stack.pop()

    # --- Execution ---
    def run(self, chunk: Chunk) -> Any:
        self.frames.append(Frame(chunk=chunk, ip=0, base=len(self.stack)))

        while True:
            frame = self.frames[-1]
            code = frame.chunk.code
            if frame.ip >= len(code):
                raise RuntimeError("chunk ended without RETURN")
            op = code[frame.ip]
            frame.ip += 1

            handler = self._dispatch.get(op)
            if handler is None:
                raise RuntimeError(f"Unknown opcode: {op}")
            signal, value = handler(frame, op)
            if signal == VM.RunSignal.RETURN:
                return value


def run_chunk(chunk: Chunk) -> Any:
    vm = VM()
    return vm.run(chunk)
