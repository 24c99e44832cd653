import pytest
from hypothesis import given, strategies as st

from lust.errors import (
    LexerError,
    NestingTooDeepError,
    ParserError,
    ParserLexerError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from lust.reader.parser import Parser, parse
from lust.types.nodes import Keyword, List, Number, String, Symbol, Vec


def sym(name, ns=None):
    return Symbol(ns, name)


def test_parse_list_expression():
    assert parse("(def a 1)") == [List([sym("def"), sym("a"), Number(1)])]


def test_parse_nested_list_expressions():
    expected = List([sym("def"), sym("a"), List([sym("+"), Number(1), Number(2)])])
    assert parse("(def a (+ 1 2))") == [expected]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", Number(42)),
        ("-0.5", Number(-0.5)),
        ('"hi there"', String("hi there")),
        ("foo", sym("foo")),
        ("other/foo", sym("foo", "other")),
        ("/", sym("/")),
        (":k", Keyword(None, "k")),
        (":ns/k", Keyword("ns", "k")),
        ("()", List()),
        ("[1 [2]]", Vec([Number(1), Vec([Number(2)])])),
    ],
)
def test_parse_atoms_and_sequences(source, expected):
    assert parse(source) == [expected]


@pytest.mark.parametrize(
    "source,head",
    [
        ("'x", "quote"),
        ("`x", "syntax-quote"),
        ("~x", "unquote"),
        ("~@x", "unquote-splicing"),
    ],
)
def test_reader_macros_desugar(source, head):
    assert parse(source) == [List([sym(head), sym("x")])]


def test_nested_reader_macros():
    assert parse("`(a ~b ~@c)") == [
        List([
            sym("syntax-quote"),
            List([
                sym("a"),
                List([sym("unquote"), sym("b")]),
                List([sym("unquote-splicing"), sym("c")]),
            ]),
        ])
    ]


def test_multiple_top_level_forms_are_yielded_lazily():
    parser = Parser("(a) 1 (b")
    assert next(parser) == List([sym("a")])
    assert next(parser) == Number(1)
    with pytest.raises(UnexpectedEndOfInput):
        next(parser)


def test_empty_input_yields_nothing():
    assert parse("") == []
    assert parse("  ; only a comment\n") == []


@pytest.mark.parametrize("source", ["(a b", "[1 2", "'", "(quote"])
def test_unexpected_end_of_input(source):
    with pytest.raises(UnexpectedEndOfInput) as info:
        parse(source)
    assert str(info.value) == "Unexpected end of file detected"


@pytest.mark.parametrize(
    "source,text,pos",
    [
        (")", ")", "1:1"),
        ("(a ]", "]", "1:4"),
        ("[a)", ")", "1:3"),
    ],
)
def test_unexpected_token(source, text, pos):
    with pytest.raises(UnexpectedToken) as info:
        parse(source)
    assert str(info.value.token) == text
    assert str(info.value) == f'Unexpected token "{text}" at {pos} detected'


def test_lexer_errors_are_wrapped():
    with pytest.raises(ParserLexerError) as info:
        parse("(a 6b)")
    assert isinstance(info.value, ParserError)
    assert isinstance(info.value.inner, LexerError)
    assert str(info.value) == "Invalid syntax at 1:5"


@given(st.integers(min_value=-10**9, max_value=10**9))
def test_integer_literals_parse_to_numbers(n):
    assert parse(f"({n})") == [List([Number(n)])]


@given(st.lists(st.from_regex(r"[a-z][a-z0-9\-]{0,8}", fullmatch=True), max_size=8))
def test_symbol_lists_print_back_to_source(names):
    source = "(" + " ".join(names) + ")"
    (node,) = parse(source)
    assert str(node) == source


@pytest.mark.parametrize("text", ["0.3", "1.7", "2.675", "123.456", "9007199254740993"])
def test_decimal_literals_are_correctly_rounded(text):
    (node,) = parse(text)
    assert node == Number(float(text))
    assert parse(str(node)) == [node]


def test_oversized_literal_is_infinite():
    assert parse("1" + "0" * 400) == [Number(float("inf"))]


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_number_literals_print_back_to_equal_nodes(value):
    node = Number(value)
    assert parse(str(node)) == [node]


@given(st.lists(st.floats(allow_nan=False, allow_infinity=False, width=32), max_size=5))
def test_vectors_of_numbers_print_back_to_equal_nodes(values):
    node = Vec([Number(v) for v in values])
    assert parse(str(node)) == [node]


def test_deeply_nested_input_is_a_parser_error():
    with pytest.raises(NestingTooDeepError) as info:
        parse("(" * 5000 + ")" * 5000)
    assert isinstance(info.value, ParserError)
    assert str(info.value) == "Too deeply nested form detected"
