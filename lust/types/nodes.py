"""Node model for Lust.

A single closed family of immutable node types represents both source code and
runtime values:

    - atoms: Number, Bool, String, Symbol, Keyword
    - sequences: List (data and unexpanded code), Vec
    - canonical forms produced by the expander: Let, Fn, Macro, Def, Call, Alias

Every node renders to its printed form via ``str()``; that text is what error
messages and the REPL show.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

import numpy as np


def format_number(value: float) -> str:
    """Shortest positional rendering of a double: 1 -> "1", 0.5 -> "0.5"."""
    if math.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


def format_seq(nodes: Iterable[Node]) -> str:
    return " ".join(str(n) for n in nodes)


def _qualified(ns: Optional[str], name: str) -> str:
    return f"{ns}/{name}" if ns is not None else name


class Node:
    """Base class of all Lust nodes."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


def _freeze(obj: Node, *names: str) -> None:
    # Sequence fields accept any iterable but are stored as tuples.
    for name in names:
        object.__setattr__(obj, name, tuple(getattr(obj, name)))


# -------------------------------
# Atoms
# -------------------------------
@dataclass(frozen=True, repr=False)
class Number(Node):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True, repr=False)
class Bool(Node):
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, repr=False)
class String(Node):
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True, repr=False)
class Symbol(Node):
    ns: Optional[str]
    name: str

    @classmethod
    def parse(cls, text: str) -> Symbol:
        """Split ``ns/name`` on the first inner slash; ``/`` alone stays a name."""
        idx = text.find("/")
        if 0 < idx < len(text) - 1:
            return cls(text[:idx], text[idx + 1:])
        return cls(None, text)

    def __str__(self) -> str:
        return _qualified(self.ns, self.name)


@dataclass(frozen=True, repr=False)
class Keyword(Node):
    ns: Optional[str]
    name: str

    @classmethod
    def parse(cls, text: str) -> Keyword:
        sym = Symbol.parse(text)
        return cls(sym.ns, sym.name)

    def __str__(self) -> str:
        return ":" + _qualified(self.ns, self.name)


# -------------------------------
# Sequences
# -------------------------------
@dataclass(frozen=True, repr=False)
class List(Node):
    items: tuple[Node, ...] = ()

    def __post_init__(self):
        _freeze(self, "items")

    def __str__(self) -> str:
        return f"({format_seq(self.items)})"


@dataclass(frozen=True, repr=False)
class Vec(Node):
    items: tuple[Node, ...] = ()

    def __post_init__(self):
        _freeze(self, "items")

    def __str__(self) -> str:
        return f"[{format_seq(self.items)}]"


# -------------------------------
# Canonical (expanded) forms
# -------------------------------
@dataclass(frozen=True, repr=False)
class Let(Node):
    bindings: tuple[Node, ...]
    body: tuple[Node, ...]

    def __post_init__(self):
        _freeze(self, "bindings", "body")

    def __str__(self) -> str:
        return f"(let [{format_seq(self.bindings)}] {format_seq(self.body)})"


@dataclass(frozen=True, repr=False)
class Fn(Node):
    params: tuple[Node, ...]
    body: tuple[Node, ...]

    def __post_init__(self):
        _freeze(self, "params", "body")

    def __str__(self) -> str:
        return f"(fn [{format_seq(self.params)}] {format_seq(self.body)})"


@dataclass(frozen=True, repr=False)
class Macro(Node):
    params: tuple[Node, ...]
    body: tuple[Node, ...]

    def __post_init__(self):
        _freeze(self, "params", "body")

    def __str__(self) -> str:
        return f"(macro [{format_seq(self.params)}] {format_seq(self.body)})"


@dataclass(frozen=True, repr=False)
class Def(Node):
    sym: str
    expr: Node

    def __str__(self) -> str:
        return f"(def {self.sym} {self.expr})"


@dataclass(frozen=True, repr=False)
class Call(Node):
    ns: Optional[str]
    name: str
    args: tuple[Node, ...] = field(default=())

    def __post_init__(self):
        _freeze(self, "args")

    def __str__(self) -> str:
        head = _qualified(self.ns, self.name)
        if not self.args:
            return f"({head})"
        return f"({head} {format_seq(self.args)})"


@dataclass(frozen=True, repr=False)
class Alias(Node):
    ns: str
    name: str

    def __str__(self) -> str:
        return f"{self.ns}/{self.name}"


NIL = List()
TRUE = Bool(True)
FALSE = Bool(False)


def is_call_of(node: Node, name: str) -> bool:
    return isinstance(node, Call) and node.name == name


def is_truthy(node: Node) -> bool:
    """Everything except ``false`` is truthy, including 0 and ()."""
    return not (isinstance(node, Bool) and node.value is False)
