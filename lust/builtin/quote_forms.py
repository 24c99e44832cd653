from __future__ import annotations

from typing import TYPE_CHECKING

from lust.errors import IncorrectNumberOfArgumentsError, IncorrectTypeOfArgumentError
from lust.types.nodes import Call, List, Node, Vec, is_call_of

if TYPE_CHECKING:
    from lust.state import State


def _single_arg(call: Call) -> Node:
    if len(call.args) != 1:
        raise IncorrectNumberOfArgumentsError(call)
    return call.args[0]


def _spliced(call: Call, state: State) -> tuple[Node, ...]:
    value = state.evaluate(_single_arg(call))
    if not isinstance(value, List):
        raise IncorrectTypeOfArgumentError(value)
    return value.items


def fill_template(node: Node, state: State) -> Node:
    """Walk quoted data, evaluating embedded unquotes in `state`."""
    if is_call_of(node, "unquote"):
        return state.evaluate(_single_arg(node))
    if is_call_of(node, "unquote-splicing"):
        # Nothing to splice into at the top of a template.
        return List(_spliced(node, state))
    if not isinstance(node, (List, Vec)):
        return node
    items: list[Node] = []
    for item in node.items:
        if is_call_of(item, "unquote-splicing"):
            items.extend(_spliced(item, state))
        else:
            items.append(fill_template(item, state))
    return type(node)(items)


def quote_form(call: Call, state: State) -> Node:
    """(quote e) and (syntax-quote e); the expander already prepared `e`."""
    return fill_template(_single_arg(call), state)


def unquote_form(call: Call, state: State) -> Node:
    return state.evaluate(_single_arg(call))


def unquote_splicing_form(call: Call, state: State) -> Node:
    return List(_spliced(call, state))
