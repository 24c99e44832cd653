import pytest

from lust.errors import RecursionDepthError, ResolveError
from lust.state import State
from lust.types.nodes import FALSE, NIL, TRUE, Alias, Number, Symbol, String

KEY = "lust-is-terrific"


def test_root_state_has_default_bindings(state):
    assert state.current == "user"
    assert state.get(None, "nil") == NIL
    assert state.get(None, "true") == TRUE
    assert state.get(None, "false") == FALSE
    assert state.parent is None
    assert state.depth == 0


def test_default_namespace_from_environment(monkeypatch):
    monkeypatch.setenv("LUST_DEFAULT_NAMESPACE", "scratch")
    assert State().current == "scratch"


def test_insert_to_and_get_from_root_state(state):
    assert state.insert(KEY, Number(10.5)) is None
    assert state.get(None, KEY) == Number(10.5)


def test_insert_returns_previous_binding(state):
    state.insert(KEY, Number(1))
    assert state.insert(KEY, Number(2)) == Number(1)


def test_insert_to_and_get_from_child_state(state):
    child = state.chained(NIL)
    child.insert(KEY, Number(10.5))
    assert child.get(None, KEY) == Number(10.5)
    assert state.get(None, KEY) is None


def test_child_reads_through_to_root(state):
    state.insert(KEY, Number(10.5))
    child = state.chained(NIL)
    assert child.get(None, KEY) == Number(10.5)


def test_child_shadows_root(state):
    state.insert(KEY, Number(10.5))
    child = state.chained(NIL)
    child.insert(KEY, Number(0))
    assert child.get(None, KEY) == Number(0)
    assert state.get(None, KEY) == Number(10.5)


def test_chained_namespace_naming(state):
    child = state.chained(NIL)
    grandchild = child.chained(NIL)
    assert child.current == "user_chained"
    assert grandchild.current == "user_chained_chained"
    assert grandchild.depth == 2
    assert grandchild.root is state


def test_explicit_namespaces(state):
    state.insert(KEY, Number(10.5), ns="user")
    child = state.chained(NIL)
    child.insert(KEY, Number(0), ns="user_chained")
    assert child.get("user", KEY) == Number(10.5)
    assert child.get("user_chained", KEY) == Number(0)
    assert child.get(None, KEY) == Number(0)


def test_insert_to_child_with_root_namespace_is_invisible_to_root(state):
    child = state.chained(NIL)
    child.insert(KEY, Number(10.5), ns="user")
    assert state.get("user", KEY) is None
    assert child.get("user", KEY) == Number(10.5)


def test_resolve_unknown_symbol(state):
    with pytest.raises(ResolveError) as info:
        state.resolve(None, "missing")
    assert str(info.value) == 'Unable to resolve symbol "missing"'


def test_alias_is_followed_once_through_root(state):
    state.insert("target", String("hit"), ns="other")
    child = state.chained(NIL)
    child.insert("local", Alias("other", "target"))
    assert child.get(None, "local") == String("hit")


def test_alias_to_alias_is_not_followed(state):
    state.insert("a", Alias("user", "b"))
    state.insert("b", Alias("user", "c"))
    state.insert("c", Number(1))
    assert state.get(None, "a") == Alias("user", "c")


def test_dangling_alias_resolves_to_nothing(state):
    state.insert("a", Alias("nowhere", "b"))
    assert state.get(None, "a") is None


def test_switch_namespace(state):
    assert state.switch_namespace("other") == "user"
    assert state.current == "other"
    assert "other" in state.namespaces
    assert state.get(None, "nil") is None
    assert state.get("user", "nil") == NIL


def test_gensym_counter_is_shared_along_the_chain(state):
    child = state.chained(NIL)
    assert state.next_id() == 0
    assert child.next_id() == 1
    assert child.chained(NIL).next_id() == 2
    assert state.next_id() == 3


def test_depth_limit():
    state = State("user", max_depth=2)
    child = state.chained(NIL).chained(NIL)
    marker = Symbol(None, "here")
    with pytest.raises(RecursionDepthError) as info:
        child.chained(marker)
    assert info.value.node is marker


def test_depth_limit_from_environment(monkeypatch):
    monkeypatch.setenv("LUST_MAX_DEPTH", "3")
    assert State("user").max_depth == 3


def test_repr_lists_the_chain(state):
    child = state.chained(NIL)
    child.insert("x", Number(1))
    assert repr(child).startswith("<State chain: user_chained{x} -> user{")
