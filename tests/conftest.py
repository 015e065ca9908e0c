import pytest

from symbelix.builtin import register as register_builtins
from symbelix.library.registry import LibraryRegistry

from helper_libraries import Java, ListProcessor, Mathematician, Recorder

# This test configuration runs every test twice:
# 1) on the pure-Python dispatch-table VM ["py"]
# 2) on the Cython build of the VM, when the extension is built ["cy"]
# The evaluator reads SYMBELIX_VM on every call, so setting the variable is enough.


@pytest.fixture(params=["py", "cy"])
def vm_backend(request):
    if request.param == "cy":
        pytest.importorskip("symbelix.compiler.vm_cy")
    return request.param


@pytest.fixture(autouse=True)
def _force_vm_backend(vm_backend, monkeypatch):
    monkeypatch.setenv("SYMBELIX_VM", vm_backend)
    monkeypatch.delenv("SYMBELIX_DISASM", raising=False)
    monkeypatch.delenv("SYMBELIX_DEFAULT_LIBRARY", raising=False)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def registry(recorder):
    """A fresh registry with the builtins and the test libraries."""
    reg = LibraryRegistry()
    register_builtins(reg)
    reg.register("Mathematician", Mathematician())
    reg.register("ListProcessor", ListProcessor())
    reg.register("NonConformingModule", Java())
    reg.register("Recorder", recorder)
    return reg
