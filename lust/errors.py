from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lust.reader.lexer import Token
    from lust.types.nodes import Node


class LustError(Exception):
    """ Base class for all Lust errors"""
    pass


class LexerError(LustError):
    """ Raised when the lexer meets a malformed character sequence"""

    def __init__(self, line: int, col: int):
        super().__init__(line, col)
        self.line = line
        self.col = col

    def __str__(self) -> str:
        return f"Invalid syntax at {self.line}:{self.col}"


# -------------------------------
# Parser errors
# -------------------------------
class ParserError(LustError):
    """ Base class for errors raised while building nodes from tokens"""

    description = "Parser error"

    def __str__(self) -> str:
        return f"{self.description} detected"


class UnexpectedToken(ParserError):
    """ Raised for a token that cannot start or continue a form"""

    def __init__(self, token: Token):
        super().__init__(token)
        self.token = token

    def __str__(self) -> str:
        return f'Unexpected token "{self.token}" at {self.token.span.start} detected'


class UnexpectedEndOfInput(ParserError):
    """ Raised when input ends in the middle of a form"""

    description = "Unexpected end of file"


class NestingTooDeepError(ParserError):
    """ Raised when forms nest deeper than the host stack allows"""

    description = "Too deeply nested form"


class ParserLexerError(ParserError):
    """ Wraps a LexerError met while parsing"""

    def __init__(self, inner: LexerError):
        super().__init__(inner)
        self.inner = inner

    def __str__(self) -> str:
        return str(self.inner)


# -------------------------------
# Evaluation errors
# -------------------------------
class EvalError(LustError):
    """ Base class for errors raised by expansion and evaluation"""
    pass


class ResolveError(EvalError):
    """ Raised when a symbol is not bound anywhere in the scope chain"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f'Unable to resolve symbol "{self.name}"'


class _NodeError(EvalError):
    template = "{}"

    def __init__(self, node: Node):
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return self.template.format(self.node)


class DispatchError(_NodeError):
    """ Raised for a structurally malformed form, e.g. a non-symbol call head"""

    template = 'Unable to dispatch expression "{}"'


class IncorrectTypeOfArgumentError(_NodeError):
    """ Raised when an argument has the wrong node type"""

    template = 'Incorrect type of argument "{}"'


class IncorrectNumberOfArgumentsError(_NodeError):
    """ Raised when a form or call receives the wrong number of arguments"""

    template = "Incorrect number of arguments {}"


class RecursionDepthError(_NodeError):
    """ Raised when nested calls exceed the configured maximum depth"""

    template = 'Maximum recursion depth exceeded in "{}"'


class EvalIoError(EvalError):
    """ Raised when `load` cannot read a file"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class EvalParserError(EvalError):
    """ Wraps a ParserError met while loading a file"""

    def __init__(self, inner: ParserError):
        super().__init__(inner)
        self.inner = inner

    def __str__(self) -> str:
        return str(self.inner)
