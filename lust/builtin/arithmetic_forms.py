"""Arithmetic and comparison builtins.

All operands are doubles. Division follows IEEE-754 (x/0 is +-inf, 0/0 is
NaN) rather than raising.
"""
from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Callable

import numpy as np

from lust.errors import IncorrectNumberOfArgumentsError, IncorrectTypeOfArgumentError
from lust.types.nodes import FALSE, TRUE, Call, Node, Number

if TYPE_CHECKING:
    from lust.state import State


def _number(arg: Node, state: State) -> float:
    value = state.evaluate(arg)
    if not isinstance(value, Number):
        raise IncorrectTypeOfArgumentError(value)
    return value.value


def _divide(a: float, b: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(a) / np.float64(b))


# -------------------------------
# Arithmetic
# -------------------------------
def add_form(call: Call, state: State) -> Node:
    """(+ a ...): sum of the arguments, 0 when there are none."""
    total = 0.0
    for arg in call.args:
        total += _number(arg, state)
    return Number(total)


def mul_form(call: Call, state: State) -> Node:
    """(* a ...): product of the arguments, 1 when there are none."""
    product = 1.0
    for arg in call.args:
        product *= _number(arg, state)
    return Number(product)


def _fold_left(call: Call, state: State, unary: Callable, binary: Callable) -> Node:
    if not call.args:
        raise IncorrectNumberOfArgumentsError(call)
    first = _number(call.args[0], state)
    if len(call.args) == 1:
        return Number(unary(first))
    result = first
    for arg in call.args[1:]:
        result = binary(result, _number(arg, state))
    return Number(result)


def sub_form(call: Call, state: State) -> Node:
    """(- a) negates; (- a b c) is ((a - b) - c)."""
    return _fold_left(call, state, operator.neg, operator.sub)


def div_form(call: Call, state: State) -> Node:
    """(/ a) is the reciprocal; (/ a b c) is ((a / b) / c)."""
    return _fold_left(call, state, lambda x: _divide(1.0, x), _divide)


# -------------------------------
# Comparison
# -------------------------------
def _compare_chain(call: Call, state: State, op: Callable[[float, float], bool]) -> Node:
    # Stops evaluating arguments at the first failing pair.
    if not call.args:
        raise IncorrectNumberOfArgumentsError(call)
    current = _number(call.args[0], state)
    for arg in call.args[1:]:
        value = _number(arg, state)
        if not op(current, value):
            return FALSE
        current = value
    return TRUE


def lt_form(call: Call, state: State) -> Node:
    return _compare_chain(call, state, operator.lt)


def gt_form(call: Call, state: State) -> Node:
    return _compare_chain(call, state, operator.gt)


def eq_form(call: Call, state: State) -> Node:
    return _compare_chain(call, state, operator.eq)
