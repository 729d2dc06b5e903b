"""
Input Handler for PocketCalc
Maps keyboard keys and keypad button actions onto engine operations
"""
from calculator import Operator


class InvalidInputError(ValueError):
    """Raised for a button action or value the keypad does not have"""


OPERATOR_KEYS = {
    '+': Operator.ADD,
    '-': Operator.SUBTRACT,
    '*': Operator.MULTIPLY,
    '/': Operator.DIVIDE,
}

# Browser and Tk key names for the same physical keys
BACKSPACE_KEYS = ('Backspace', 'BackSpace', 'Delete')
CLEAR_KEYS = ('Escape',)
EVALUATE_KEYS = ('Enter', 'Return', 'KP_Enter', '=')

ACTION_OPERATORS = {
    'add': Operator.ADD,
    'subtract': Operator.SUBTRACT,
    'multiply': Operator.MULTIPLY,
    'divide': Operator.DIVIDE,
}

SIMPLE_ACTIONS = {
    'clear': 'clear',
    'backspace': 'backspace',
    'decimal': 'append_decimal_point',
    'toggle-sign': 'negate',
    'percentage': 'percent',
    'equals': 'evaluate',
}


def handle_key(engine, key):
    """
    Apply a key press to the engine.

    Returns True when the key maps to an operation, False otherwise
    (the engine is left untouched).
    """
    if len(key) == 1 and key in '0123456789':
        engine.append_digit(key)
    elif key == '.':
        engine.append_decimal_point()
    elif key in BACKSPACE_KEYS:
        engine.backspace()
    elif key in CLEAR_KEYS:
        engine.clear()
    elif key in EVALUATE_KEYS:
        engine.evaluate()
    elif key in OPERATOR_KEYS:
        engine.choose_operator(OPERATOR_KEYS[key])
    else:
        return False
    return True


def handle_action(engine, action, value=None):
    """Apply a keypad button action; 'digit' takes the digit as value"""
    if action == 'digit':
        if not isinstance(value, str) or len(value) != 1 or value not in '0123456789':
            raise InvalidInputError(f"Invalid digit: {value!r}")
        engine.append_digit(value)
    elif action in ACTION_OPERATORS:
        engine.choose_operator(ACTION_OPERATORS[action])
    elif action in SIMPLE_ACTIONS:
        getattr(engine, SIMPLE_ACTIONS[action])()
    else:
        raise InvalidInputError(f"Unknown action: {action}")
