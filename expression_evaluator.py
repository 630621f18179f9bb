"""
Expression Evaluator for PocketCalc
Tokenizes a flat arithmetic expression and folds it in two passes:
multiplication/division first, then addition/subtraction, both left to right.

Failures are returned as an EvalResult carrying an EvalError, never raised.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import config

OPERATORS = "+-*/"
DIGITS = "0123456789"


class EvalError(str, Enum):
    """Why an expression could not be evaluated."""

    MALFORMED = "malformed"
    DIVIDE_BY_ZERO = "divide_by_zero"
    OVERFLOW = "overflow"


class TokenKind(str, Enum):
    NUMBER = "number"
    OPERATOR = "operator"


@dataclass(frozen=True)
class Token:
    """A number or a binary operator produced by the tokenizer."""

    kind: TokenKind
    value: float = 0.0
    op: str = ""

    @classmethod
    def number(cls, value: float) -> "Token":
        return cls(kind=TokenKind.NUMBER, value=value)

    @classmethod
    def operator(cls, op: str) -> "Token":
        return cls(kind=TokenKind.OPERATOR, op=op)

    @property
    def is_number(self) -> bool:
        return self.kind == TokenKind.NUMBER

    def __str__(self):
        return repr(self.value) if self.is_number else self.op


@dataclass(frozen=True)
class EvalResult:
    """Outcome of one evaluation.

    Exactly one of three shapes: a finite ``value``, an ``error`` (with a
    human-readable ``message`` and, for tokenizer failures, the character
    ``position``), or neither, meaning there was nothing to evaluate.
    """

    value: Optional[float] = None
    error: Optional[EvalError] = None
    message: str = ""
    position: Optional[int] = None

    @classmethod
    def success(cls, value: float) -> "EvalResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: EvalError, message: str, position: Optional[int] = None) -> "EvalResult":
        return cls(error=error, message=message, position=position)

    @classmethod
    def empty(cls) -> "EvalResult":
        return cls()

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None

    @property
    def is_empty(self) -> bool:
        return self.error is None and self.value is None


def is_operator(ch: str) -> bool:
    return len(ch) == 1 and ch in OPERATORS


def _malformed(message, position=None):
    return EvalResult.failure(EvalError.MALFORMED, message, position)


def tokenize(expr: str) -> Tuple[List[Token], Optional[EvalResult]]:
    """Split ``expr`` into alternating Number/Operator tokens.

    Returns ``(tokens, None)`` on success and ``([], failure)`` otherwise.
    """
    tokens = []
    i = 0
    n = len(expr)
    expect_number = True

    while i < n:
        ch = expr[i]

        if ch.isspace():
            i += 1
            continue

        if expect_number:
            sign = 1.0
            # Optional sign in front of a number
            if ch in "+-":
                if ch == "-":
                    sign = -1.0
                i += 1
                if i >= n:
                    return [], _malformed("Dangling sign at end.", i - 1)
                ch = expr[i]
                if ch not in DIGITS and ch != ".":
                    return [], _malformed("Sign not followed by number.", i)

            has_dot = False
            start = i
            while i < n:
                c = expr[i]
                if c in DIGITS:
                    i += 1
                elif c == ".":
                    if has_dot:
                        return [], _malformed("Multiple dots in number.", i)
                    has_dot = True
                    i += 1
                else:
                    break

            if i == start:
                return [], _malformed("Invalid number.", i)

            num_str = expr[start:i]
            if num_str.startswith("."):
                num_str = "0" + num_str

            tokens.append(Token.number(float(num_str) * sign))
            expect_number = False
        else:
            if not is_operator(ch):
                return [], _malformed(f"Unexpected character '{ch}' while expecting operator.", i)
            tokens.append(Token.operator(ch))
            i += 1
            expect_number = True

    if expect_number:
        return [], _malformed("Expression ends with operator.", n)

    # Structural check: Number, Op, Number, Op, ..., Number
    if not is_alternating(tokens):
        return [], _malformed("Bad token ordering.")

    return tokens, None


def is_alternating(tokens: List[Token]) -> bool:
    if not tokens or not tokens[0].is_number:
        return False
    for i, tok in enumerate(tokens[1:], start=1):
        if tok.is_number != (i % 2 == 0):
            return False
    return True


def _overflowed(value):
    return EvalResult.failure(EvalError.OVERFLOW, f"Result out of range ({value}).")


def reduce_mul_div(tokens: List[Token]) -> Tuple[List[Token], Optional[EvalResult]]:
    """Fold every ``*`` and ``/`` into the number before it."""
    out = [tokens[0]]

    for i in range(1, len(tokens), 2):
        op_tok = tokens[i]
        rhs_tok = tokens[i + 1]

        if op_tok.op in ("*", "/"):
            lhs = out[-1].value
            rhs = rhs_tok.value
            if op_tok.op == "/":
                if abs(rhs) < config.DIVISION_EPSILON:
                    return [], EvalResult.failure(EvalError.DIVIDE_BY_ZERO, "Division by zero.")
                value = lhs / rhs
            else:
                value = lhs * rhs
            if not math.isfinite(value):
                return [], _overflowed(value)
            out[-1] = Token.number(value)
        else:
            out.append(op_tok)
            out.append(rhs_tok)

    return out, None


def reduce_add_sub(tokens: List[Token]) -> EvalResult:
    """Sum the remaining ``+``/``-`` chain strictly left to right."""
    result = tokens[0].value

    for i in range(1, len(tokens), 2):
        op_tok = tokens[i]
        rhs = tokens[i + 1].value
        if op_tok.op == "+":
            result += rhs
        elif op_tok.op == "-":
            result -= rhs
        else:
            return _malformed(f"Unexpected operator '{op_tok.op}' in additive pass.")

    if not math.isfinite(result):
        return _overflowed(result)
    return EvalResult.success(result)


def evaluate(expr: str) -> EvalResult:
    """Evaluate a flat expression such as ``"12+3.5*-2"``.

    Empty or blank input yields an empty result (no value, no error).
    """
    if not expr or not expr.strip():
        return EvalResult.empty()

    tokens, failure = tokenize(expr)
    if failure is not None:
        return failure

    reduced, failure = reduce_mul_div(tokens)
    if failure is not None:
        return failure

    return reduce_add_sub(reduced)
