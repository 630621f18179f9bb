"""
Keypad bindings for PocketCalc
Translates button labels and keyboard events into calculator edits
"""
from calculator import BACKSPACE, DOT, EVALUATE, RESET, EditToken

# Button layout, row by row
BUTTON_ROWS = [
    ['AC', 'C', '÷', '×'],
    ['7', '8', '9', '-'],
    ['4', '5', '6', '+'],
    ['1', '2', '3', '='],
    ['0', '.'],
]

# Display glyphs used on the buttons
OPERATOR_GLYPHS = {'×': '*', '÷': '/'}

NAMED_KEYS = {
    '=': EVALUATE,
    'AC': RESET,
    'C': BACKSPACE,
    '.': DOT,
}

# Tk keysyms for keys that carry no usable char (or a locale dependent one)
KEYSYMS = {
    'Return': EVALUATE,
    'KP_Enter': EVALUATE,
    'BackSpace': BACKSPACE,
    'Delete': RESET,
    'Escape': RESET,
    'KP_Decimal': DOT,
    'KP_Add': EditToken.operator('+'),
    'KP_Subtract': EditToken.operator('-'),
    'KP_Multiply': EditToken.operator('*'),
    'KP_Divide': EditToken.operator('/'),
}
KEYSYMS.update({f'KP_{d}': EditToken.digits(str(d)) for d in range(10)})


def parse_key(token):
    """Map a button label such as '7', '×', '=' or 'AC' to an EditToken.

    Returns None for anything that is not a calculator key.
    """
    if not token:
        return None
    if token in NAMED_KEYS:
        return NAMED_KEYS[token]
    op = OPERATOR_GLYPHS.get(token, token)
    if op in ('+', '-', '*', '/'):
        return EditToken.operator(op)
    if all(ch in '0123456789' for ch in token):
        return EditToken.digits(token)
    return None


def from_key_event(char, keysym=''):
    """Map a Tk key event (event.char, event.keysym) to an EditToken."""
    if keysym in KEYSYMS:
        return KEYSYMS[keysym]
    if char in ('\r', '\n'):
        return EVALUATE
    if char in ('c', 'C'):
        # Plain 'c' on the keyboard is All Clear
        return RESET
    return parse_key(char)


def button_layout(label):
    """Return (style kind, rowspan, colspan) for a keypad button"""
    if label == '=':
        return "equals", 2, 1
    if label == '0':
        return "normal", 1, 2
    if label == 'AC':
        return "danger", 1, 1
    if label == 'C':
        return "mode", 1, 1
    if OPERATOR_GLYPHS.get(label, label) in ('+', '-', '*', '/'):
        return "operator", 1, 1
    return "normal", 1, 1
