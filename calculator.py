"""
Calculator Engine for PocketCalc
Maintains the expression being typed one key at a time and hands the
finished expression to the evaluator.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import config
import display
from expression_evaluator import EvalError, EvalResult, evaluate, is_operator, DIGITS


class EditKind(str, Enum):
    DIGITS = "digits"
    DOT = "dot"
    OPERATOR = "operator"
    BACKSPACE = "backspace"
    RESET = "reset"
    EVALUATE = "evaluate"


@dataclass(frozen=True)
class EditToken:
    """One logical key press. ``value`` holds the digits or operator character."""

    kind: EditKind
    value: str = ""

    @classmethod
    def digits(cls, value: str) -> "EditToken":
        return cls(EditKind.DIGITS, value)

    @classmethod
    def operator(cls, op: str) -> "EditToken":
        return cls(EditKind.OPERATOR, op)


DOT = EditToken(EditKind.DOT)
BACKSPACE = EditToken(EditKind.BACKSPACE)
RESET = EditToken(EditKind.RESET)
EVALUATE = EditToken(EditKind.EVALUATE)


class ExpressionBuffer:
    """Expression text that stays locally well formed under single edits.

    Every edit returns the (possibly unchanged) text. An edit that would break
    the grammar or the length limit is ignored rather than reported.
    """

    def __init__(self, text: str = "", max_len: int = config.MAX_EXPRESSION_LEN):
        self.max_len = max_len
        self.text = text

    def _fits(self, extra: str) -> bool:
        return len(self.text) + len(extra) <= self.max_len

    def append_digits(self, token: str) -> str:
        if not self._fits(token):
            return self.text
        if any(ch not in DIGITS for ch in token):
            return self.text
        self.text += token
        return self.text

    def append_dot(self) -> str:
        # Start a fresh "0." at the beginning or right after an operator
        if not self.text or is_operator(self.text[-1]):
            if self._fits("0."):
                self.text += "0."
            return self.text

        if "." in self.current_number_segment():
            return self.text
        if self._fits("."):
            self.text += "."
        return self.text

    def append_operator(self, op: str) -> str:
        if not is_operator(op):
            return self.text

        if not self.text:
            # Only a leading minus sign may start an expression
            if op == "-":
                self.text = op
            return self.text

        last = self.text[-1]
        if is_operator(last):
            if op == "-" and last != "-":
                # "5*" -> "5*-": unary minus for the next number
                if self._fits(op):
                    self.text += op
                return self.text
            if self._ends_with_pending_sign():
                if op == "-" or len(self.text) == 1:
                    return self.text
                # "5*-" + "+" -> "5+"
                self.text = self.text[:-2] + op
                return self.text
            self.text = self.text[:-1] + op
            return self.text

        if self._fits(op):
            self.text += op
        return self.text

    def backspace(self) -> str:
        self.text = self.text[:-1]
        return self.text

    def reset(self) -> str:
        self.text = ""
        return self.text

    def apply(self, edit: EditToken) -> str:
        """Dispatch one EditToken; EVALUATE leaves the text alone."""
        if edit.kind == EditKind.DIGITS:
            return self.append_digits(edit.value)
        if edit.kind == EditKind.DOT:
            return self.append_dot()
        if edit.kind == EditKind.OPERATOR:
            return self.append_operator(edit.value)
        if edit.kind == EditKind.BACKSPACE:
            return self.backspace()
        if edit.kind == EditKind.RESET:
            return self.reset()
        return self.text

    def _ends_with_pending_sign(self) -> bool:
        """True when the text ends in a '-' acting as a sign (start, or after an operator)."""
        if not self.text or self.text[-1] != "-":
            return False
        return len(self.text) == 1 or is_operator(self.text[-2])

    def current_number_segment(self) -> str:
        """Chars after the most recent binary operator, keeping a leading sign."""
        start = 0
        for k in range(len(self.text) - 1, -1, -1):
            c = self.text[k]
            if is_operator(c):
                unary_minus = c == "-" and (k == 0 or is_operator(self.text[k - 1]))
                if not unary_minus:
                    start = k + 1
                    break
        return self.text[start:]

    def prepare_for_evaluation(self) -> Tuple[str, Optional[EvalResult]]:
        """Forgive one trailing operator before evaluating.

        Returns the text to evaluate, or an outcome that short-circuits it.
        The buffer itself is left untouched.
        """
        text = self.text
        if not text:
            return "", EvalResult.empty()

        if is_operator(text[-1]):
            # "5*-" is an unfinished negative number, not a typo
            if len(text) >= 2 and text[-1] == "-" and is_operator(text[-2]):
                return text, EvalResult.failure(EvalError.MALFORMED, "Expression ends with a dangling sign.")
            text = text[:-1]
            if not text:
                return text, EvalResult.failure(EvalError.MALFORMED, "Expression has no operands.")

        return text, None

    def evaluate(self) -> EvalResult:
        text, outcome = self.prepare_for_evaluation()
        if outcome is not None:
            return outcome
        return evaluate(text)


def apply_edit(current_text: str, edit: EditToken, max_len: int = config.MAX_EXPRESSION_LEN) -> str:
    """Stateless form of ExpressionBuffer.apply for callers that hold the text."""
    return ExpressionBuffer(current_text, max_len).apply(edit)


def get_text(current_text: str) -> str:
    return current_text


def evaluate_text(current_text: str) -> EvalResult:
    """Evaluate buffer text the way the '=' key does, trailing-operator forgiveness included."""
    return ExpressionBuffer(current_text).evaluate()


class Calculator:
    """One calculator: an expression buffer plus the last shown result."""

    def __init__(self, max_len=config.MAX_EXPRESSION_LEN, max_fraction_digits=config.MAX_FRACTION_DIGITS):
        self.buffer = ExpressionBuffer(max_len=max_len)
        self.max_fraction_digits = max_fraction_digits
        self.last_result = EvalResult.empty()

    def press(self, edit: Optional[EditToken]) -> str:
        """Apply one key and return the expression text."""
        if edit is None:
            return self.buffer.text
        if edit.kind == EditKind.EVALUATE:
            self.last_result = self.buffer.evaluate()
        elif edit.kind == EditKind.RESET:
            self.reset()
        else:
            self.buffer.apply(edit)
        return self.buffer.text

    def reset(self):
        self.buffer.reset()
        self.last_result = EvalResult.empty()

    @property
    def expression(self) -> str:
        return self.buffer.text

    @property
    def result_text(self) -> str:
        return display.format_outcome(self.last_result, self.max_fraction_digits)
