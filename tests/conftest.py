import pytest

from lust.host import FileHost
from lust.interpreter import Interpreter
from lust.reader.parser import Parser
from lust.state import State


class MemoryHost(FileHost):
    """In-memory file host: `files` maps path -> text (or an exception to raise)."""

    def __init__(self, files=None, dirs=()):
        super().__init__()
        self.files = dict(files or {})
        self.dirs = set(dirs)

    def exists(self, path):
        return path in self.files or path in self.dirs

    def is_file(self, path):
        return path in self.files

    def read_text(self, path):
        text = self.files[path]
        if isinstance(text, Exception):
            raise text
        return text


@pytest.fixture
def state():
    """A fresh root state with the `user` namespace current."""
    return State("user")


@pytest.fixture
def run(state):
    """Evaluate every form of a source string in `state`; return the last value as text."""
    def _run(source):
        result = None
        for node in Parser(source):
            result = state.eval(node)
        return str(result)
    return _run


@pytest.fixture
def memory_host():
    return MemoryHost()


@pytest.fixture
def interp(memory_host):
    return Interpreter("user", host=memory_host)
