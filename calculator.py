"""
Calculator Engine for PocketCalc
Operand accumulation and fixed-point arithmetic behind the keypad
"""
import math
import re
from decimal import Decimal
from enum import Enum

import config

_NUMBER_PREFIX = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)')


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self):
        return self.value


def parse_operand(text):
    """Parse the numeric prefix of an operand string, None if there is none"""
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return None
    return float(match.group(0))


def _default_text(number):
    # Shortest round-trip digits; exponent form outside [1e-6, 1e21)
    magnitude = abs(number)
    if magnitude >= 1e21 or magnitude < 1e-6:
        return repr(number)
    return format(Decimal(repr(number)), "f")


def format_number(number):
    """
    Render a number the way the display shows it.

    Trailing zeros are dropped and the fraction is truncated (not rounded)
    to MAX_DECIMAL_PLACES digits. Non-finite values render as the error text.
    """
    if not math.isfinite(number):
        return config.ERROR_TEXT
    if number == 0:
        return "0"

    num_str = _default_text(number)
    if 'e' in num_str:
        fixed = f"{number:.{config.MAX_DECIMAL_PLACES}f}".rstrip('0').rstrip('.')
        return "0" if fixed == "-0" else fixed

    integer_part, _, decimal_part = num_str.partition('.')
    trimmed_decimal = decimal_part.rstrip('0')
    if not trimmed_decimal:
        return integer_part

    # Truncation can expose new trailing zeros (0.30000000000000004)
    limited_decimal = trimmed_decimal[:config.MAX_DECIMAL_PLACES].rstrip('0')
    if not limited_decimal:
        return integer_part
    return f"{integer_part}.{limited_decimal}"


def _scaled(value, factor):
    # Math.round semantics: halves go up
    return math.floor(value * factor + 0.5)


def _apply(operator, a, b):
    """Scaled-integer arithmetic on two finite operands"""
    factor = 10 ** config.MAX_DECIMAL_PLACES
    num1 = _scaled(a, factor)
    num2 = _scaled(b, factor)

    if operator is Operator.ADD:
        return (num1 + num2) / factor
    if operator is Operator.SUBTRACT:
        return (num1 - num2) / factor
    if operator is Operator.MULTIPLY:
        return (num1 * num2) / (factor * factor)
    if operator is Operator.DIVIDE:
        return num1 / num2
    raise TypeError(f"Unsupported operator: {operator!r}")


class CalculatorEngine:
    """
    Keypad state machine.

    Holds the operand being typed, a stored left-hand operand and the
    operator waiting for its right-hand side. Callers read display_text
    after each operation.
    """

    def __init__(self):
        self.clear()

    @property
    def display_text(self):
        return self.current_operand

    @property
    def is_error(self):
        return self.current_operand == config.ERROR_TEXT

    def clear(self):
        """Reset to the initial state"""
        self.current_operand = "0"
        self.previous_operand = ""
        self.pending_operator = None
        self.reset_on_next_digit = False

    def backspace(self):
        """Drop the last typed character of the current operand"""
        if self.is_error:
            self.clear()
            return
        if self.current_operand == "0":
            return
        if len(self.current_operand) == 1:
            self.current_operand = "0"
        else:
            self.current_operand = self.current_operand[:-1]

    def append_digit(self, digit):
        """Add a digit to the current operand"""
        if len(digit) != 1 or digit not in "0123456789":
            raise ValueError(f"Not a digit: {digit!r}")

        if self.reset_on_next_digit:
            self.current_operand = ""
            self.reset_on_next_digit = False
        if digit == "0" and self.current_operand == "0":
            return
        if digit != "0" and self.current_operand == "0":
            self.current_operand = ""
        if len(self.current_operand) >= config.MAX_OPERAND_LENGTH:
            return
        self.current_operand += digit

    def append_decimal_point(self):
        """Add a decimal point, keeping a visible leading zero"""
        if self.reset_on_next_digit:
            self.current_operand = "0"
            self.reset_on_next_digit = False
        if '.' in self.current_operand:
            return
        if len(self.current_operand) >= config.MAX_OPERAND_LENGTH:
            return
        self.current_operand += '.'

    def negate(self):
        """Flip the sign of the current operand"""
        if self.current_operand == "0":
            return
        value = parse_operand(self.current_operand)
        if value is None:
            return
        self.current_operand = format_number(value * -1)

    def percent(self):
        """Turn the current operand into a percentage (of the stored operand if any)"""
        value = parse_operand(self.current_operand)
        if value is None:
            return
        if self.previous_operand:
            base = parse_operand(self.previous_operand)
            if base is None:
                return
            value = (value * base) / 100
        else:
            value = value / 100
        if not math.isfinite(value):
            self._fail()
            return
        self.current_operand = format_number(value)

    def choose_operator(self, operator):
        """Store the current operand and wait for the right-hand side"""
        if not isinstance(operator, Operator):
            raise TypeError(f"Expected an Operator, got {operator!r}")
        if self.current_operand == "":
            return
        if self.is_error:
            self.clear()
            return
        # A lone "-" left by backspace is not an operand yet
        if parse_operand(self.current_operand) is None:
            return
        if self.previous_operand != "":
            self.evaluate()
            if self.is_error:
                return

        self.pending_operator = operator
        self.previous_operand = self.current_operand
        self.current_operand = "0"
        self.reset_on_next_digit = True

    def evaluate(self):
        """Apply the pending operator to the stored and current operands"""
        prev = parse_operand(self.previous_operand)
        current = parse_operand(self.current_operand)
        if prev is None or current is None or self.pending_operator is None:
            return

        if self.pending_operator is Operator.DIVIDE and current == 0:
            self._fail()
            return

        try:
            computation = _apply(self.pending_operator, prev, current)
        except (OverflowError, ZeroDivisionError):
            self._fail()
            return
        if not math.isfinite(computation):
            self._fail()
            return

        self.current_operand = format_number(computation)
        self.pending_operator = None
        self.previous_operand = ""
        self.reset_on_next_digit = True

    def _fail(self):
        self.current_operand = config.ERROR_TEXT
        self.pending_operator = None
        self.previous_operand = ""
        self.reset_on_next_digit = True

    def snapshot(self):
        """Current state as plain values, for serializing adapters"""
        operator = self.pending_operator
        return {
            'display': self.display_text,
            'current_operand': self.current_operand,
            'previous_operand': self.previous_operand,
            'pending_operator': operator.symbol if operator else None,
            'reset_on_next_digit': self.reset_on_next_digit,
            'error': self.is_error,
        }
