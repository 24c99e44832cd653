"""Macro expander for Lust.

Rewrites reader-level lists into canonical nodes (Def, Fn, Macro, Let, Call).
Nothing is computed here except deciding whether a call head names a macro;
when it does, the macro runs immediately and its expanded output replaces the
call. Expansion therefore happens once per form, before evaluation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from lust.errors import (
    DispatchError,
    IncorrectNumberOfArgumentsError,
    IncorrectTypeOfArgumentError,
)
from lust.types.nodes import Call, Def, Fn, Let, List, Macro, Node, Symbol, Vec

if TYPE_CHECKING:
    from lust.state import State

logger = logging.getLogger(__name__)

SymbolRewrite = Callable[[Symbol], Node]


def expand(node: Node, state: State) -> Node:
    """Expand `node` in `state`; non-lists and () expand to themselves."""
    if not isinstance(node, List) or not node.items:
        return node
    head = node.items[0]
    if not isinstance(head, Symbol):
        raise DispatchError(node)
    special = SPECIAL_FORMS.get(head.name)
    if special is not None:
        return special(node, state)
    return expand_call(node, state)


def expand_call(node: List, state: State) -> Node:
    head = node.items[0]
    args = [expand(arg, state) for arg in node.items[1:]]
    call = Call(head.ns, head.name, args)
    if isinstance(state.get(head.ns, head.name), Macro):
        logger.debug("expanding macro call %s", call)
        return state.eval(call)
    return call


# -------------------------------
# Special forms
# -------------------------------
def _expect_symbol(node: Node) -> Symbol:
    if not isinstance(node, Symbol):
        raise IncorrectTypeOfArgumentError(node)
    return node


def _expand_params_and_body(node: List, state: State) -> tuple[list[Node], list[Node]]:
    if len(node.items) < 3:
        raise IncorrectNumberOfArgumentsError(node)
    params = node.items[1]
    if not isinstance(params, Vec):
        raise IncorrectTypeOfArgumentError(params)
    expanded_params = [expand(_expect_symbol(p), state) for p in params.items]
    body = [expand(form, state) for form in node.items[2:]]
    return expanded_params, body


def expand_def(node: List, state: State) -> Node:
    if len(node.items) != 3:
        raise IncorrectNumberOfArgumentsError(node)
    sym = _expect_symbol(node.items[1])
    return Def(sym.name, expand(node.items[2], state))


def expand_fn(node: List, state: State) -> Node:
    params, body = _expand_params_and_body(node, state)
    return Fn(params, body)


def expand_macro(node: List, state: State) -> Node:
    params, body = _expand_params_and_body(node, state)
    return Macro(params, body)


def expand_let(node: List, state: State) -> Node:
    if len(node.items) < 2:
        raise IncorrectNumberOfArgumentsError(node)
    bindings = node.items[1]
    if not isinstance(bindings, Vec):
        raise IncorrectTypeOfArgumentError(bindings)
    if len(bindings.items) % 2 != 0:
        raise IncorrectNumberOfArgumentsError(bindings)
    expanded: list[Node] = []
    for sym, expr in zip(bindings.items[0::2], bindings.items[1::2]):
        expanded.append(_expect_symbol(sym))
        expanded.append(expand(expr, state))
    body = [expand(form, state) for form in node.items[2:]]
    return Let(expanded, body)


def _single_arg(node: List) -> Node:
    if len(node.items) != 2:
        raise IncorrectNumberOfArgumentsError(node)
    return node.items[1]


def expand_quote(node: List, state: State) -> Node:
    quoted = expand_quoted(_single_arg(node), state, lambda sym: sym)
    return Call(None, "quote", [quoted])


def expand_syntax_quote(node: List, state: State) -> Node:
    ns = state.current

    def qualify(sym: Symbol) -> Node:
        return sym if sym.ns is not None else Symbol(ns, sym.name)

    quoted = expand_quoted(_single_arg(node), state, qualify)
    return Call(None, "syntax-quote", [quoted])


def expand_unquote(node: List, state: State) -> Node:
    name = node.items[0].name
    return Call(None, name, [expand(_single_arg(node), state)])


def expand_quoted(node: Node, state: State, rewrite: SymbolRewrite) -> Node:
    """Rebuild quoted data verbatim, re-entering `expand` at unquotes."""
    if isinstance(node, Symbol):
        return rewrite(node)
    if isinstance(node, Vec):
        return Vec([expand_quoted(item, state, rewrite) for item in node.items])
    if not isinstance(node, List) or not node.items:
        return node
    head = node.items[0]
    if isinstance(head, Symbol) and head.name in UNQUOTE_FORMS:
        return expand_unquote(node, state)
    return List([expand_quoted(item, state, rewrite) for item in node.items])


UNQUOTE_FORMS = ("unquote", "unquote-splicing")

SPECIAL_FORMS = {
    "def": expand_def,
    "fn": expand_fn,
    "macro": expand_macro,
    "let": expand_let,
    "quote": expand_quote,
    "syntax-quote": expand_syntax_quote,
    "unquote": expand_unquote,
    "unquote-splicing": expand_unquote,
}
