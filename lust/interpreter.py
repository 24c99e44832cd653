from __future__ import annotations

from pathlib import Path

from lust.host import FileHost
from lust.reader.parser import Parser
from lust.state import State
from lust.types.nodes import NIL, Call, Node, String


class Interpreter:
    """
    Feeds Lust source text through the parser and a persistent root State.
    Forms are parsed and evaluated one at a time; the first error stops the run.
    """
    def __init__(self, default_namespace: str | None = None, host: FileHost | None = None,
                 max_depth: int | None = None):
        self.state = State(default_namespace, host=host, max_depth=max_depth)

    def eval(self, code: str) -> Node:
        """Evaluate every form in `code`; return the last value, () if none."""
        result = NIL
        for node in Parser(code):
            result = self.state.eval(node)
        return result

    def eval_file(self, path: str | Path) -> Node:
        """Evaluate a script through the `load` builtin."""
        return self.state.eval(Call(None, "load", [String(str(path))]))

#  Example use-age:
if __name__ == "__main__":
    prelude = """
        (def square (fn [x] (* x x)))
        (def unless (macro [c a b] `(if ~c ~b ~a)))
    """
    interp = Interpreter()
    interp.eval(prelude)

    tests = [
        "(square 7)                      ;; -> 49",
        "(unless false 1 2)              ;; -> 1",
        "(let [a (+ 1 2) b (+ a 3)] (+ a b)) ;; -> 9",
        "'(1 ~(square 2) ~@(quote (3 4))) ;; -> (1 4 3 4)",
    ]

    for code in tests:
        result = interp.eval(code)
        print(code, "=>", result)
