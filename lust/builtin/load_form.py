from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lust.errors import (
    EvalIoError,
    EvalParserError,
    IncorrectNumberOfArgumentsError,
    IncorrectTypeOfArgumentError,
    ParserError,
)
from lust.reader.parser import Parser
from lust.types.nodes import NIL, Call, Node, String

if TYPE_CHECKING:
    from lust.state import State

logger = logging.getLogger(__name__)


def read_source(path: String, state: State) -> str:
    host = state.host
    if not (host.exists(path.value) and host.is_file(path.value)):
        raise IncorrectTypeOfArgumentError(path)
    try:
        return host.read_text(path.value)
    except (OSError, UnicodeDecodeError) as exc:
        raise EvalIoError(f"Unable to read {path.value}: {exc}") from exc


def load_form(call: Call, state: State) -> Node:
    """(load "path"): evaluate every form of a file in this state, return the last."""
    if len(call.args) != 1:
        raise IncorrectNumberOfArgumentsError(call)
    path = state.evaluate(call.args[0])
    if not isinstance(path, String):
        raise IncorrectTypeOfArgumentError(path)

    source = read_source(path, state)
    logger.info("loading %s into namespace %s", path.value, state.current)

    result = NIL
    forms = Parser(source)
    while True:
        try:
            form = next(forms, None)
        except ParserError as exc:
            raise EvalParserError(exc) from exc
        if form is None:
            return result
        result = state.eval(form)
