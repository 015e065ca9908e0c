"""Registry of special forms for the Symbelix compiler.

Maps head names to handlers that compile a Form structurally instead of
dispatching it to the library. The compiler consults this table before
ordinary library resolution. A handler returns ``NotImplemented`` when the
Form does not have its shape, in which case the call goes to the library.
"""

from symbelix.evaluation.special_forms.eval_form import eval_form, is_proc_form
from symbelix.evaluation.special_forms.proc_form import proc_form

SPECIAL_FORMS = {
    "eval": eval_form,
    "proc": proc_form,
}

__all__ = ["SPECIAL_FORMS", "eval_form", "proc_form", "is_proc_form"]
