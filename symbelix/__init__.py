# Core type aliases for Symbelix's data model.
# Source code is read into a tree of line-tagged nodes (see symbelix.types); a bare
# tuple of nodes is a Form (head first). Compiled code is a bytecode Chunk or a
# Deferred value; runtime values are plain Python objects.
#
# Naming guidance:
# - Node:           a single parse-tree node or a Form, used by the reader and compiler.
# - SymbelixValue:  an evaluated runtime value produced by the VM or a library.
# - CompiledValue:  what value_of produces for an argument (literal, list, Chunk or Deferred).

from typing import Any, Callable

# Runtime value alias
SymbelixValue = Any
# Parse tree node or Form
Node = Any
# Argument value handed to a library's resolve()
CompiledValue = Any

# Trace hook type: called with an intermediate artifact and a label
TraceHook = Callable[[Any, str], Any]
