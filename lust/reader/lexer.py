"""
  Lust Lexer

- Streaming: one token per `next()`, pulled lazily from any iterable of chars.
- Positions are 1-based lines; the column counter starts at 0 and is bumped
  for every character read, a newline moves to the next line at column 1.
- The first malformed character raises a positioned LexerError, after which
  the lexer is exhausted.

Recognised tokens:

    -1 +2.5 64     -> NUMBER (float)
    "raw text"     -> STRING (no escape processing)
    foo ns/bar <=  -> SYMBOL
    :key :ns/key   -> KEYWORD
    ( ) [ ]        -> LIST_START LIST_END VEC_START VEC_END
    ' ` ~ ~@       -> QUOTE SYNTAX_QUOTE UNQUOTE UNQUOTE_SPLICING
    ; ...          -> comment up to end of line
"""

from __future__ import annotations

import enum
import math
import string
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from lust.errors import LexerError
from lust.types.nodes import format_number


DIGITS = frozenset("0123456789")
WHITESPACE = frozenset(" \t\r\n")
SYMBOL_START = frozenset(string.ascii_letters + "/*%><=")
SIGNS = frozenset("+-")
CLOSERS = frozenset(")]")
COMMENT = ";"


class TokenKind(enum.Enum):
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"
    KEYWORD = "keyword"
    LIST_START = "("
    LIST_END = ")"
    VEC_START = "["
    VEC_END = "]"
    QUOTE = "'"
    UNQUOTE = "~"
    UNQUOTE_SPLICING = "~@"
    SYNTAX_QUOTE = "`"


_PUNCTUATION = {
    "(": TokenKind.LIST_START,
    ")": TokenKind.LIST_END,
    "[": TokenKind.VEC_START,
    "]": TokenKind.VEC_END,
    "'": TokenKind.QUOTE,
    "`": TokenKind.SYNTAX_QUOTE,
}


@dataclass(frozen=True)
class Pos:
    line: int
    col: int

    def __str__(self) -> str:
        return f"{self.line}:{self.col}"


@dataclass(frozen=True)
class Span:
    start: Pos
    end: Pos

    @classmethod
    def of(cls, start_line: int, start_col: int, end_line: int, end_col: int) -> Span:
        return cls(Pos(start_line, start_col), Pos(end_line, end_col))


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    span: Span
    value: float | str | None = None

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return format_number(self.value)
        if self.kind is TokenKind.STRING:
            return f'"{self.value}"'
        if self.kind is TokenKind.SYMBOL:
            return self.value
        if self.kind is TokenKind.KEYWORD:
            return f":{self.value}"
        return self.kind.value


class Lexer:
    """Iterator over the tokens of a character stream."""

    def __init__(self, source: Iterable[str]):
        self._chars: Iterator[str] = iter(source)
        self._lookahead: list[str] = []
        self._exhausted = False
        self.char: Optional[str] = None
        self.line = 1
        self.col = 0
        self._bump()

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        if self._exhausted:
            raise StopIteration
        self._skip_whitespace_and_comments()
        if self.char is None:
            self._exhausted = True
            raise StopIteration
        try:
            return self._read_token()
        except LexerError:
            self._exhausted = True
            raise

    # ----------------------
    # Character stream
    # ----------------------
    def _bump(self) -> None:
        if self._lookahead:
            self.char = self._lookahead.pop()
        else:
            self.char = next(self._chars, None)
        if self.char == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1

    def _peek(self) -> Optional[str]:
        if not self._lookahead:
            nxt = next(self._chars, None)
            if nxt is None:
                return None
            self._lookahead.append(nxt)
        return self._lookahead[0]

    def _pos(self) -> Pos:
        return Pos(self.line, self.col)

    def _error(self) -> LexerError:
        return LexerError(self.line, self.col)

    def _at_boundary(self) -> bool:
        c = self.char
        return c is None or c in WHITESPACE or c in CLOSERS or c == COMMENT

    def _skip_whitespace_and_comments(self) -> None:
        while self.char is not None:
            if self.char in WHITESPACE:
                self._bump()
            elif self.char == COMMENT:
                while self.char is not None and self.char != "\n":
                    self._bump()
            else:
                break

    # ----------------------
    # Token readers
    # ----------------------
    def _read_token(self) -> Token:
        c = self.char
        if c in SIGNS:
            nxt = self._peek()
            if nxt is not None and nxt in DIGITS:
                return self._read_number()
            return self._read_symbol()
        if c in SYMBOL_START:
            return self._read_symbol()
        if c in DIGITS:
            return self._read_number()
        if c == '"':
            return self._read_string()
        if c == "~":
            return self._read_unquote()
        if c == ":":
            return self._read_keyword()
        if c in _PUNCTUATION:
            start = self._pos()
            self._bump()
            return Token(_PUNCTUATION[c], Span(start, self._pos()))
        raise self._error()

    def _read_word(self) -> str:
        chars = []
        while not self._at_boundary():
            chars.append(self.char)
            self._bump()
        return "".join(chars)

    def _read_symbol(self) -> Token:
        start = self._pos()
        text = self._read_word()
        return Token(TokenKind.SYMBOL, Span(start, self._pos()), text)

    def _read_keyword(self) -> Token:
        start = self._pos()
        self._bump()  # consume ':'
        c = self.char
        if c is None or not (c in SYMBOL_START or c in DIGITS or c in SIGNS):
            raise self._error()
        text = self._read_word()
        return Token(TokenKind.KEYWORD, Span(start, self._pos()), text)

    def _read_number(self) -> Token:
        start = self._pos()
        negative = self.char == "-"
        if self.char in SIGNS:
            self._bump()

        # Digits are kept as an exact integer and divided once, so the result
        # is the correctly rounded double for the literal.
        digits = 0
        scale = 0
        seen_dot = False
        while not self._at_boundary():
            c = self.char
            if c in DIGITS:
                digits = digits * 10 + int(c)
                if seen_dot:
                    scale += 1
            elif c == "." and not seen_dot:
                seen_dot = True
            else:
                raise self._error()
            self._bump()

        try:
            value = digits / 10 ** scale
        except OverflowError:
            value = math.inf
        if negative:
            value = -value
        return Token(TokenKind.NUMBER, Span(start, self._pos()), value)

    def _read_string(self) -> Token:
        start = self._pos()
        self._bump()  # opening quote
        chars = []
        while self.char != '"':
            if self.char is None:
                raise self._error()
            chars.append(self.char)
            self._bump()
        self._bump()  # closing quote
        return Token(TokenKind.STRING, Span(start, self._pos()), "".join(chars))

    def _read_unquote(self) -> Token:
        start = self._pos()
        self._bump()
        if self.char == "@":
            self._bump()
            return Token(TokenKind.UNQUOTE_SPLICING, Span(start, self._pos()))
        return Token(TokenKind.UNQUOTE, Span(start, self._pos()))


def lex(source: Iterable[str]) -> Iterator[Token]:
    """Token generator over `source`; raises LexerError on malformed input."""
    return Lexer(source)
