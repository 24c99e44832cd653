"""Registry of builtin calls.

Maps call names to handler functions ``handler(call, state) -> Node``. The
evaluator consults this table before falling back to user-defined functions
and macros, so builtins cannot be shadowed by `def`.
"""

from lust.builtin.arithmetic_forms import (
    add_form,
    div_form,
    eq_form,
    gt_form,
    lt_form,
    mul_form,
    sub_form,
)
from lust.builtin.control_forms import apply_form, eval_form, gensym_form, if_form
from lust.builtin.load_form import load_form
from lust.builtin.namespace_forms import in_ns_form, refer_form
from lust.builtin.quote_forms import quote_form, unquote_form, unquote_splicing_form

BUILTINS = {
    "+": add_form,
    "-": sub_form,
    "*": mul_form,
    "/": div_form,
    "<": lt_form,
    ">": gt_form,
    "=": eq_form,
    "if": if_form,
    "quote": quote_form,
    "syntax-quote": quote_form,
    "unquote": unquote_form,
    "unquote-splicing": unquote_splicing_form,
    "eval": eval_form,
    "apply": apply_form,
    "gensym": gensym_form,
    "in-ns": in_ns_form,
    "load": load_form,
    "refer": refer_form,
}
