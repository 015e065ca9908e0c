import pytest

from symbelix.compiler.chunk import Chunk, constant_chunk, emit_call
from symbelix.compiler.disasm import disassemble_chunk
from symbelix.compiler.opcodes import Opcode
from symbelix.evaluation.evaluator import evaluate
from symbelix.types.deferred import Deferred
from symbelix.types.symbol import Symbol


def total(args):
    return sum(args)


def test_constant_chunk_returns_value():
    assert evaluate(constant_chunk(42)) == 42
    assert evaluate(constant_chunk("text")) == "text"


def test_list_values_are_built_at_run_time():
    chunk = constant_chunk([1, [2, 3], []])
    first = evaluate(chunk)
    assert first == [1, [2, 3], []]
    # every run builds a new list
    assert evaluate(chunk) is not first


def test_call_receives_arguments_as_one_list():
    seen = []

    def spy(args):
        seen.append(args)
        return "done"

    assert evaluate(emit_call(spy, [1, "a", [2]])) == "done"
    assert seen == [[1, "a", [2]]]


def test_nested_chunks_run_innermost_first():
    order = []

    def tag(name):
        def fn(args):
            order.append(name)
            return sum(args)
        return fn

    inner = emit_call(tag("inner"), [1, 2])
    outer = emit_call(tag("outer"), [inner, 10, inner])
    assert evaluate(outer) == 16
    assert order == ["inner", "inner", "outer"]


def test_chunk_inside_list_argument():
    inner = emit_call(total, [4, 5])
    assert evaluate(emit_call(lambda args: args[0], [[3, inner]])) == [3, 9]


def test_deferred_constant_is_pushed_unchanged():
    captured = Deferred((Symbol(1, "add"), ))
    assert evaluate(emit_call(lambda args: args[0], [captured])) == captured


def test_evaluate_returns_deferred_as_is():
    captured = Deferred((Symbol(1, "add"),))
    assert evaluate(captured) is captured


def test_add_const_distinguishes_types():
    chunk = Chunk()
    assert chunk.add_const(1) == 0
    assert chunk.add_const(1.0) == 1
    assert chunk.add_const(True) == 2
    assert chunk.add_const(1) == 0


def test_emit_u16_rejects_large_operands():
    with pytest.raises(OverflowError):
        Chunk().emit_u16(0x10000)


def test_unknown_opcode_raises():
    chunk = Chunk(code=bytearray([0xEE]))
    with pytest.raises(RuntimeError):
        evaluate(chunk)


def test_chunk_without_return_raises():
    chunk = Chunk()
    chunk.emit_const(1)
    with pytest.raises(RuntimeError):
        evaluate(chunk)


def test_library_exceptions_propagate():
    def boom(args):
        raise ZeroDivisionError("boom")

    with pytest.raises(ZeroDivisionError):
        evaluate(emit_call(boom, []))


def test_disassemble_shows_ops_and_nested_chunks():
    inner = emit_call(total, [1, 2])
    text = disassemble_chunk(emit_call(total, [inner, [7]]))
    assert "RUN_CHUNK" in text
    assert "LIST count=1" in text
    assert "CALL" in text
    assert "RETURN" in text
    assert "<Chunk>" in text
    assert "-- constants --" in text


def test_disasm_env_flag_prints(monkeypatch, capsys):
    monkeypatch.setenv("SYMBELIX_DISASM", "1")
    assert evaluate(constant_chunk(5)) == 5
    out = capsys.readouterr().out
    assert "=== DISASM ===" in out
    assert Opcode.PUSH_CONST.name in out
