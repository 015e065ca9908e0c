from __future__ import annotations
import os
from typing import Literal


# Defaults
_DEFAULT_LIBRARY = 'standard'
_DEFAULT_VM = 'py'


def flag_from_env(var: str) -> bool:
    raw = os.environ.get(var, '').strip().lower()
    return raw not in ('', '0', 'false', 'no')


def get_default_library() -> str:
    return os.environ.get('SYMBELIX_DEFAULT_LIBRARY') or _DEFAULT_LIBRARY


def get_vm_backend() -> Literal['py', 'cy']:
    raw = (os.environ.get('SYMBELIX_VM') or _DEFAULT_VM).strip().lower()
    if raw not in ('py', 'cy'):
        raise ValueError(f"SYMBELIX_VM must be 'py' or 'cy', not {raw!r}")
    return raw


def disasm_enabled() -> bool:
    return flag_from_env('SYMBELIX_DISASM')
