"""
Tests for the two-pass expression evaluator
"""
import pytest

from expression_evaluator import (
    EvalError,
    Token,
    TokenKind,
    evaluate,
    is_alternating,
    reduce_add_sub,
    reduce_mul_div,
    tokenize,
)


@pytest.mark.parametrize("expr, expected", [
    ("2+3*4", 14.0),
    ("2*3+4", 10.0),
    ("2-3-4", -5.0),
    ("8/4/2", 1.0),
    ("2*3*4", 24.0),
    ("10-2*3+4/2", 6.0),
    ("5*-3", -15.0),
    ("-5+2", -3.0),
    ("+5", 5.0),
    ("12+3.5", 15.5),
    (".5+1", 1.5),
    ("5.", 5.0),
    ("-0.", 0.0),
    ("007+1", 8.0),
    ("  2 +  3 ", 5.0),
    ("15/4", 3.75),
])
def test_evaluates_with_precedence_and_left_associativity(expr, expected):
    result = evaluate(expr)
    assert result.ok
    assert result.error is None
    assert result.value == pytest.approx(expected)


def test_division_by_zero():
    result = evaluate("5/0")
    assert result.error == EvalError.DIVIDE_BY_ZERO
    assert result.value is None
    assert not result.ok


@pytest.mark.parametrize("expr", ["1/0.0000000000000001", "1/-0", "3+4/0.0*2"])
def test_divisor_below_epsilon_is_division_by_zero(expr):
    assert evaluate(expr).error == EvalError.DIVIDE_BY_ZERO


def test_tiny_divisor_above_epsilon_divides():
    result = evaluate("1/0.00000000000001")
    assert result.ok
    assert result.value == pytest.approx(1e14)


@pytest.mark.parametrize("expr", [
    "5..2+3",
    "5+",
    "5+*3",
    "+",
    "-",
    "5+-",
    "- 5",
    "5 5",
    "5x2",
    "abc",
    "*5",
])
def test_malformed_expressions(expr):
    result = evaluate(expr)
    assert result.error == EvalError.MALFORMED
    assert result.message


@pytest.mark.parametrize("expr", ["", "   "])
def test_blank_input_has_no_result(expr):
    result = evaluate(expr)
    assert result.is_empty
    assert result.error is None
    assert result.value is None


def test_failure_reports_position_and_reason():
    result = evaluate("5..2")
    assert result.error == EvalError.MALFORMED
    assert result.position == 2
    assert "dots" in result.message

    result = evaluate("5+")
    assert result.message == "Expression ends with operator."

    result = evaluate("5x2")
    assert result.position == 1
    assert "expecting operator" in result.message


def test_multiplicative_overflow_is_reported():
    big = "1" + "0" * 200
    result = evaluate(f"{big}*{big}")
    assert result.error == EvalError.OVERFLOW


def test_additive_overflow_is_reported():
    big = "9" * 308
    result = evaluate(f"{big}+{big}")
    assert result.error == EvalError.OVERFLOW


def test_evaluation_is_deterministic():
    assert evaluate("1/3+2*7") == evaluate("1/3+2*7")
    assert evaluate("5..1") == evaluate("5..1")


def test_tokenize_applies_unary_sign():
    tokens, failure = tokenize("12*-3")
    assert failure is None
    assert tokens == [Token.number(12.0), Token.operator("*"), Token.number(-3.0)]
    assert [str(t) for t in tokens] == ["12.0", "*", "-3.0"]


def test_tokenize_failure_returns_no_tokens():
    tokens, failure = tokenize("1+")
    assert tokens == []
    assert failure.error == EvalError.MALFORMED


def test_is_alternating():
    assert not is_alternating([])
    assert not is_alternating([Token.operator("+")])
    assert not is_alternating([Token.number(1), Token.number(2)])
    assert is_alternating([Token.number(1), Token.operator("+"), Token.number(2)])


def test_multiplicative_pass_leaves_additive_operators():
    tokens, _ = tokenize("1+2*3-8/4")
    reduced, failure = reduce_mul_div(tokens)
    assert failure is None
    assert reduced == [
        Token.number(1.0), Token.operator("+"), Token.number(6.0),
        Token.operator("-"), Token.number(2.0),
    ]


def test_additive_pass_rejects_leftover_multiplicative_operator():
    result = reduce_add_sub([Token.number(1.0), Token.operator("*"), Token.number(2.0)])
    assert result.error == EvalError.MALFORMED


def test_token_kinds():
    tokens, _ = tokenize("4/-2")
    assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.OPERATOR, TokenKind.NUMBER]
    assert TokenKind("operator") is TokenKind.OPERATOR
    assert Token.operator("/").op == "/"
    assert not Token.operator("/").is_number
