import pytest

from lust.errors import (
    IncorrectNumberOfArgumentsError,
    IncorrectTypeOfArgumentError,
    ResolveError,
)
from lust.types.nodes import Alias, Number


def test_in_ns_returns_previous_namespace(run, state):
    assert run("(in-ns 'other)") == "user"
    assert state.current == "other"
    assert run("(in-ns 'user)") == "other"


def test_definitions_live_in_the_current_namespace(run, state):
    run("(in-ns 'other) (def a 1) (in-ns 'user)")
    assert state.get("other", "a") == Number(1)
    assert state.get(None, "a") is None
    assert run("other/a") == "1"


def test_unqualified_lookup_misses_other_namespaces(run):
    run("(in-ns 'other) (def a 1) (in-ns 'user)")
    with pytest.raises(ResolveError):
        run("a")


def test_qualified_call_into_other_namespace(run):
    run("(in-ns 'math) (def double (fn [x] (* x 2))) (in-ns 'user)")
    assert run("(math/double 21)") == "42"


def test_refer_creates_alias(run, state):
    run("(in-ns 'math) (def double (fn [x] (* x 2))) (in-ns 'user)")
    assert run("(refer twice math/double)") == "math/double"
    assert state.namespaces["user"]["twice"] == Alias("math", "double")
    assert run("(twice 4)") == "8"


def test_refer_unqualified_target_uses_current_namespace(run):
    assert run("(def a 1) (refer b a) b") == "1"


def test_refer_is_resolved_on_lookup(run):
    assert run("(def a 1) (refer b a) (def a 2) b") == "2"


def test_refer_to_missing_binding(run):
    run("(refer b nowhere/x)")
    with pytest.raises(ResolveError):
        run("b")


def test_refer_inside_let_is_scoped(run):
    assert run("(def a 3) (let [] (refer b user/a) b)") == "3"
    with pytest.raises(ResolveError):
        run("b")


def test_unknown_namespace(run):
    with pytest.raises(ResolveError):
        run("nowhere/x")


def test_in_ns_requires_symbol(run):
    with pytest.raises(IncorrectTypeOfArgumentError):
        run('(in-ns "other")')


@pytest.mark.parametrize("source", ["(refer 1 a)", "(refer a 1)"])
def test_refer_requires_symbols(run, source):
    with pytest.raises(IncorrectTypeOfArgumentError):
        run(source)


@pytest.mark.parametrize("source", ["(in-ns)", "(refer a)", "(refer a b c)"])
def test_namespace_form_arity(run, source):
    with pytest.raises(IncorrectNumberOfArgumentsError):
        run(source)
