"""Runtime state for Lust.

A State is one link of the scope chain. The root state owns the namespace
table that `def`, `in-ns` and `refer` write to at top level, the gensym
counter, the file host and the recursion limit. Chained states are created
for every `let`, function call and macro call; each owns a single fresh
namespace named after its parent's current one and only ever reads from
its parent.
"""

from __future__ import annotations

import logging
import sys
from io import StringIO
from typing import Optional

from lust import config
from lust.errors import RecursionDepthError, ResolveError
from lust.evaluation.evaluator import evaluate
from lust.evaluation.expander import expand
from lust.host import FileHost
from lust.types.nodes import FALSE, NIL, TRUE, Alias, Node

logger = logging.getLogger(__name__)

# Python frames one level of chained scope may use (call, branch, arithmetic
# and their evaluate hops), plus room for the embedding program.
_FRAMES_PER_LEVEL = 40
_FRAMES_HEADROOM = 1000
_FRAMES_CEILING = 10000


def _reserve_stack(max_depth: int) -> None:
    """Raise the interpreter recursion limit so `max_depth` levels fit."""
    limit = min(max_depth * _FRAMES_PER_LEVEL + _FRAMES_HEADROOM, _FRAMES_CEILING)
    if limit > sys.getrecursionlimit():
        sys.setrecursionlimit(limit)


class State:
    """Namespace table plus a link to the enclosing scope."""

    __slots__ = ("current", "namespaces", "parent", "depth", "host", "max_depth", "_counter")

    def __init__(
        self,
        default: Optional[str] = None,
        host: Optional[FileHost] = None,
        max_depth: Optional[int] = None,
        parent: Optional[State] = None,
    ):
        self.parent: Optional[State] = parent
        self._counter = 0
        if parent is None:
            self.current: str = default or config.get_default_namespace()
            self.namespaces: dict[str, dict[str, Node]] = {
                self.current: {"nil": NIL, "true": TRUE, "false": FALSE}
            }
            self.depth = 0
            self.host = host if host is not None else FileHost()
            self.max_depth = max_depth if max_depth is not None else config.get_max_depth()
            _reserve_stack(self.max_depth)
        else:
            self.current = f"{parent.current}_chained"
            self.namespaces = {self.current: {}}
            self.depth = parent.depth + 1
            self.host = parent.host
            self.max_depth = parent.max_depth

    def chained(self, node: Node) -> State:
        """New child scope for evaluating `node`; enforces the depth limit."""
        if self.depth + 1 > self.max_depth:
            raise RecursionDepthError(node)
        return State(parent=self)

    @property
    def root(self) -> State:
        state = self
        while state.parent is not None:
            state = state.parent
        return state

    # ----------------------
    # Bindings
    # ----------------------
    def insert(self, name: str, node: Node, ns: Optional[str] = None) -> Optional[Node]:
        """Bind `name` in namespace `ns` (default: current) of this link only."""
        scope = self.namespaces.setdefault(ns if ns is not None else self.current, {})
        previous = scope.get(name)
        scope[name] = node
        return previous

    def get(self, ns: Optional[str], name: str) -> Optional[Node]:
        """Resolve `name` through the scope chain, following one alias hop."""
        state: Optional[State] = self
        while state is not None:
            scope = state.namespaces.get(ns if ns is not None else state.current)
            if scope is not None and name in scope:
                value = scope[name]
                if isinstance(value, Alias):
                    return self.root.namespaces.get(value.ns, {}).get(value.name)
                return value
            state = state.parent
        return None

    def resolve(self, ns: Optional[str], name: str) -> Node:
        value = self.get(ns, name)
        if value is None:
            raise ResolveError(name)
        return value

    def switch_namespace(self, name: str) -> str:
        """Make `name` current, creating it if needed; return the previous name."""
        previous = self.current
        self.namespaces.setdefault(name, {})
        self.current = name
        logger.debug("switched namespace %s -> %s", previous, name)
        return previous

    def next_id(self) -> int:
        root = self.root
        value = root._counter
        root._counter += 1
        return value

    # ----------------------
    # Expansion / evaluation
    # ----------------------
    def expand(self, node: Node) -> Node:
        try:
            return expand(node, self)
        except RecursionError as exc:
            raise RecursionDepthError(node) from exc

    def evaluate(self, node: Node) -> Node:
        """Evaluate an already expanded node."""
        try:
            return evaluate(node, self)
        except RecursionError as exc:
            # The host stack ran out before the depth limit did.
            raise RecursionDepthError(node) from exc

    def eval(self, node: Node) -> Node:
        return self.evaluate(self.expand(node))

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<State chain: ")
            links = []
            state: Optional[State] = self
            while state is not None:
                names = ", ".join(sorted(state.namespaces.get(state.current, {})))
                links.append(f"{state.current}{{{names}}}")
                state = state.parent
            buffer.write(" -> ".join(links))
            buffer.write(">")
            return buffer.getvalue()
