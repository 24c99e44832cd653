"""
  Lust Parser

Recursive descent over the token stream with one token of lookahead. Iterating
a Parser yields one Node per top-level form; reader macros are desugared:

    'e    -> (quote e)
    ~e    -> (unquote e)
    ~@e   -> (unquote-splicing e)
    `e    -> (syntax-quote e)
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from lust.errors import (
    LexerError,
    NestingTooDeepError,
    ParserLexerError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from lust.reader.lexer import Lexer, Token, TokenKind
from lust.types.nodes import Keyword, List, Node, Number, String, Symbol, Vec


READER_MACROS = {
    TokenKind.QUOTE: "quote",
    TokenKind.UNQUOTE: "unquote",
    TokenKind.UNQUOTE_SPLICING: "unquote-splicing",
    TokenKind.SYNTAX_QUOTE: "syntax-quote",
}


class Parser:
    """Lazy sequence of top-level forms read from `source`."""

    def __init__(self, source: Iterable[str]):
        self.lexer = Lexer(source)
        self.token: Optional[Token] = None

    def __iter__(self) -> Iterator[Node]:
        return self

    def __next__(self) -> Node:
        self.bump()
        if self.token is None:
            raise StopIteration
        try:
            return self.parse_expr()
        except RecursionError as exc:
            raise NestingTooDeepError() from exc

    def bump(self) -> None:
        try:
            self.token = next(self.lexer, None)
        except LexerError as exc:
            self.token = None
            raise ParserLexerError(exc) from exc

    def parse_expr(self) -> Node:
        tok = self.token
        if tok is None:
            raise UnexpectedEndOfInput()

        kind = tok.kind
        if kind is TokenKind.NUMBER:
            return Number(tok.value)
        if kind is TokenKind.STRING:
            return String(tok.value)
        if kind is TokenKind.SYMBOL:
            return Symbol.parse(tok.value)
        if kind is TokenKind.KEYWORD:
            return Keyword.parse(tok.value)
        if kind is TokenKind.LIST_START:
            return self.parse_list()
        if kind is TokenKind.VEC_START:
            return self.parse_vec()
        if kind in READER_MACROS:
            self.bump()
            return List([Symbol(None, READER_MACROS[kind]), self.parse_expr()])

        # A closer with no matching opener
        raise UnexpectedToken(tok)

    def _parse_seq(self, end: TokenKind) -> list[Node]:
        items = []
        while True:
            self.bump()
            if self.token is not None and self.token.kind is end:
                return items
            items.append(self.parse_expr())

    def parse_list(self) -> List:
        return List(self._parse_seq(TokenKind.LIST_END))

    def parse_vec(self) -> Vec:
        return Vec(self._parse_seq(TokenKind.VEC_END))


def parse(source: Iterable[str]) -> list[Node]:
    """Parse every top-level form of `source` eagerly."""
    return list(Parser(source))
