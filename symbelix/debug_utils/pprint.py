"""Pretty printing and tracing of intermediate artifacts.

``inspect_hook`` builds a trace hook for the driver that prints every stage
(parsed code, compiled unit, result) with ANSI colouring.
"""
import sys
from typing import Any, Optional, TextIO

from symbelix import TraceHook
from symbelix.compiler.chunk import Chunk
from symbelix.compiler.disasm import disassemble_chunk
from symbelix.evaluation.special_forms import SPECIAL_FORMS
from symbelix.types.deferred import Deferred
from symbelix.types.errors import SymbelixError
from symbelix.types.literals import ListLit, Number, StringLit, is_form
from symbelix.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_NUMBER = "\033[92m"
COLOR_STRING = "\033[93m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_DEFERRED = "\033[96m"
COLOR_ERROR = "\033[91m"
COLOR_LABEL = "\033[95m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "max_depth": 8,
    "color": True,
}


def _paint(text: str, color: str, options: dict) -> str:
    if options.get("color", True):
        return f"{color}{text}{RESET}"
    return text


# ----------------- Node printer -----------------
def pprint_node(node, indent: int = 0, options: dict = DEFAULT_OPTIONS, _current_depth: int = 0) -> str:
    if _current_depth >= options.get("max_depth", 8):
        return "…"
    if isinstance(node, Symbol):
        color = COLOR_SPECIAL_FORM if node.name in SPECIAL_FORMS else COLOR_SYMBOL
        return _paint(node.name, color, options)
    if isinstance(node, Number):
        return _paint(str(node.value), COLOR_NUMBER, options)
    if isinstance(node, StringLit):
        return _paint(f'"{node.value}"', COLOR_STRING, options)
    if isinstance(node, ListLit):
        parts = [pprint_node(x, indent + 1, options, _current_depth + 1) for x in node.elements]
        return "[" + " ".join(parts) + "]"
    if not is_form(node):
        return repr(node)
    if not node:
        return "()"

    parts = [pprint_node(x, indent + 1, options, _current_depth + 1) for x in node]
    single_line = "(" + " ".join(parts) + ")"
    # colour codes do not take up room on screen
    visible = single_line if not options.get("color", True) else _strip_ansi(single_line)
    if len(visible) + indent * 2 <= options.get("max_line_length", 80):
        return single_line

    aligned_lines = ["(" + parts[0]]
    for part in parts[1:]:
        aligned_lines.append("  " * (indent + 1) + part)
    aligned_lines[-1] += ")"
    return "\n".join(aligned_lines)


def _strip_ansi(text: str) -> str:
    for code in (RESET, COLOR_SYMBOL, COLOR_NUMBER, COLOR_STRING, COLOR_SPECIAL_FORM):
        text = text.replace(code, "")
    return text


def pformat(artifact: Any, options: dict = DEFAULT_OPTIONS) -> str:
    """Format any artifact the driver produces: nodes, chunks, values or errors."""
    if isinstance(artifact, SymbelixError):
        return _paint(f"{type(artifact).__name__}: {artifact.message}", COLOR_ERROR, options)
    if isinstance(artifact, Deferred):
        return _paint("#proc", COLOR_DEFERRED, options) + pprint_node(artifact.code, 0, options)
    if isinstance(artifact, Chunk):
        return "\n" + disassemble_chunk(artifact)
    if isinstance(artifact, (Symbol, Number, StringLit, ListLit, tuple)):
        return pprint_node(artifact, 0, options)
    return repr(artifact)


def inspect_hook(stream: Optional[TextIO] = None, options: dict = DEFAULT_OPTIONS) -> TraceHook:
    """A trace hook printing ``label: artifact`` to stream (stdout by default)."""

    def hook(artifact: Any, label: str) -> Any:
        out = stream if stream is not None else sys.stdout
        print(f"{_paint(label, COLOR_LABEL, options)}: {pformat(artifact, options)}", file=out)
        return artifact

    return hook
