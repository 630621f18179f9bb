"""
Display formatting for PocketCalc
Turns evaluation outcomes into the text shown on the result line
"""
import config
from expression_evaluator import EvalResult


def format_number(value, max_fraction_digits=config.MAX_FRACTION_DIGITS):
    """Format a result: near-integers as integers, otherwise trimmed decimals."""
    rounded = round(value)
    if abs(value - rounded) < config.INTEGER_SNAP_TOLERANCE:
        return str(int(rounded))

    digits = min(max(max_fraction_digits, 0), 15)
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_outcome(result: EvalResult, max_fraction_digits=config.MAX_FRACTION_DIGITS):
    """Empty string for no result, ERROR_TEXT for any failure."""
    if result.is_empty:
        return ""
    if not result.ok:
        return config.ERROR_TEXT
    return format_number(result.value, max_fraction_digits)
