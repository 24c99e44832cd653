from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lust.errors import IncorrectNumberOfArgumentsError, IncorrectTypeOfArgumentError
from lust.types.nodes import Alias, Call, Node, Symbol

if TYPE_CHECKING:
    from lust.state import State

logger = logging.getLogger(__name__)


def in_ns_form(call: Call, state: State) -> Node:
    """(in-ns 'name): switch the current namespace, returning the previous one."""
    if len(call.args) != 1:
        raise IncorrectNumberOfArgumentsError(call)
    target = state.evaluate(call.args[0])
    if not isinstance(target, Symbol):
        raise IncorrectTypeOfArgumentError(target)
    previous = state.switch_namespace(target.name)
    return Symbol(None, previous)


def refer_form(call: Call, state: State) -> Node:
    """(refer local ns/name): make `local` an alias of `ns/name`.

    Both arguments are taken as written. An unqualified target refers to the
    current namespace.
    """
    if len(call.args) != 2:
        raise IncorrectNumberOfArgumentsError(call)
    local, other = call.args
    for arg in (local, other):
        if not isinstance(arg, Symbol):
            raise IncorrectTypeOfArgumentError(arg)
    alias = Alias(other.ns if other.ns is not None else state.current, other.name)
    state.insert(local.name, alias)
    logger.debug("referred %s/%s -> %s", state.current, local.name, alias)
    return Symbol(alias.ns, alias.name)
