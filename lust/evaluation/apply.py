"""Application engine for user-defined functions and macros.

- Fn: arguments are evaluated in the caller's state, bound positionally in a
  fresh chained state, and the body runs there.
- Macro: arguments are bound unevaluated; the body computes code, which is
  expanded once more in the macro's chained state before being returned.

Both require an exact arity match.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from lust.errors import DispatchError, IncorrectNumberOfArgumentsError
from lust.types.nodes import NIL, Call, Fn, Macro, Node

if TYPE_CHECKING:
    from lust.state import State

logger = logging.getLogger(__name__)


def eval_body(body: Iterable[Node], state: State) -> Node:
    """Evaluate forms in order and return the last value, () when empty."""
    result = NIL
    for form in body:
        result = state.eval(form)
    return result


def _bind(params, values, scope: State) -> None:
    for param, value in zip(params, values):
        scope.insert(param.name, value)


def apply_fn(fn: Fn, call: Call, state: State) -> Node:
    args = [state.evaluate(arg) for arg in call.args]
    scope = state.chained(call)
    _bind(fn.params, args, scope)
    return eval_body(fn.body, scope)


def apply_macro(macro: Macro, call: Call, state: State) -> Node:
    scope = state.chained(call)
    _bind(macro.params, call.args, scope)
    code = eval_body(macro.body, scope)
    logger.debug("macro %s produced %s", call.name, code)
    return scope.expand(code)


def apply_custom(call: Call, state: State) -> Node:
    target = state.resolve(call.ns, call.name)
    if not isinstance(target, (Fn, Macro)):
        raise DispatchError(call)
    if len(call.args) != len(target.params):
        raise IncorrectNumberOfArgumentsError(call)
    if isinstance(target, Fn):
        return apply_fn(target, call, state)
    return apply_macro(target, call, state)
