"""Core evaluator for Lust.

Evaluates nodes that have already been through the expander: symbols are
resolved through the scope chain, Def/Let/Call are executed, everything else
evaluates to itself.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lust.builtin import BUILTINS
from lust.evaluation.apply import apply_custom, eval_body
from lust.types.nodes import Call, Def, Let, Node, Symbol

if TYPE_CHECKING:
    from lust.state import State

logger = logging.getLogger(__name__)


def evaluate(node: Node, state: State) -> Node:
    if isinstance(node, Symbol):
        return state.resolve(node.ns, node.name)
    if isinstance(node, Call):
        return eval_call(node, state)
    if isinstance(node, Def):
        return eval_def(node, state)
    if isinstance(node, Let):
        return eval_let(node, state)
    # Fn, Macro, atoms, List, Vec, Keyword and Alias
    return node


def eval_def(node: Def, state: State) -> Node:
    value = evaluate(node.expr, state)
    state.insert(node.sym, value)
    logger.debug("defined %s/%s", state.current, node.sym)
    return value


def eval_let(node: Let, state: State) -> Node:
    scope = state.chained(node)
    for sym, expr in zip(node.bindings[0::2], node.bindings[1::2]):
        scope.insert(sym.name, scope.eval(expr))
    return eval_body(node.body, scope)


def eval_call(node: Call, state: State) -> Node:
    builtin = BUILTINS.get(node.name)
    if builtin is not None:
        return builtin(node, state)
    return apply_custom(node, state)
