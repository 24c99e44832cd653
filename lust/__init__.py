# Lust: a small Lisp with namespaces, syntax-quote and non-hygienic macros.
#
# Source text flows through three stages:
# - reader.lexer.Lexer:   characters -> positioned tokens
# - reader.parser.Parser: tokens -> Node trees, one per top-level form
# - state.State:          expand (macros run here), then evaluate
#
# Every node is an immutable value from lust.types.nodes; the same types
# represent code and data.

__version__ = "0.1.0"

from lust.errors import LustError
from lust.interpreter import Interpreter
from lust.reader.lexer import Lexer
from lust.reader.parser import Parser
from lust.state import State

__all__ = ["Interpreter", "Lexer", "LustError", "Parser", "State", "__version__"]
