"""Control builtins: if, eval, apply, gensym."""
from __future__ import annotations

from typing import TYPE_CHECKING

from lust.errors import IncorrectNumberOfArgumentsError, IncorrectTypeOfArgumentError
from lust.types.nodes import Call, Node, String, Symbol, Vec, is_truthy

if TYPE_CHECKING:
    from lust.state import State


def _check_arity(call: Call, n: int) -> None:
    if len(call.args) != n:
        raise IncorrectNumberOfArgumentsError(call)


def if_form(call: Call, state: State) -> Node:
    """(if cond then else): only the selected branch is evaluated."""
    _check_arity(call, 3)
    cond, then_branch, else_branch = call.args
    if is_truthy(state.evaluate(cond)):
        return state.evaluate(then_branch)
    return state.evaluate(else_branch)


def eval_form(call: Call, state: State) -> Node:
    """(eval e): evaluate e, then expand and evaluate the resulting data."""
    _check_arity(call, 1)
    code = state.evaluate(call.args[0])
    return state.eval(code)


def apply_form(call: Call, state: State) -> Node:
    """(apply f [args...]): call f with the vector's elements as arguments."""
    _check_arity(call, 2)
    fn_sym, args_expr = call.args
    if not isinstance(fn_sym, Symbol):
        raise IncorrectTypeOfArgumentError(fn_sym)
    args = state.evaluate(args_expr)
    if not isinstance(args, Vec):
        raise IncorrectTypeOfArgumentError(args)
    return state.evaluate(Call(fn_sym.ns, fn_sym.name, args.items))


def gensym_form(call: Call, state: State) -> Node:
    """(gensym "prefix"): a fresh symbol, unique across the whole state chain."""
    _check_arity(call, 1)
    prefix = state.evaluate(call.args[0])
    if not isinstance(prefix, String):
        raise IncorrectTypeOfArgumentError(prefix)
    return Symbol(None, f"{prefix.value}{state.next_id()}")
