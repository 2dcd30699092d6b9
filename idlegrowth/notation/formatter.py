"""
Compact Notation for Idle Growth

Turns an arbitrarily large non-negative integer into a short display
string such as "1.2345e6" or "1234.5e60".

Rules:
- Fewer than 6 digits: printed verbatim.
- Otherwise: the first 5 digits form a mantissa, scaled so the exponent
  is a multiple of 6.

DESIGN DECISION: This is display only. Digits past the fifth are
dropped, and the result is never parsed back into a number.
"""

import math

NOTATION_GROUP = 6
NOTATION_PRECISION = 5

_LOG10_2 = math.log10(2)


class NotationError(ValueError):
    """Value cannot be rendered (not a non-negative integer)."""
    pass


def _decimal_length(value: int) -> int:
    """Number of decimal digits in `value`, without building its string."""
    if value == 0:
        return 1
    length = int((value.bit_length() - 1) * _LOG10_2) + 1
    while value >= 10 ** length:
        length += 1
    while length > 1 and value < 10 ** (length - 1):
        length -= 1
    return length


def to_notation(value: int) -> str:
    """
    Render a non-negative integer in compact notation.
    
    Examples:
        1234        -> "1234"
        123456      -> "0.12345e6"
        1234567     -> "1.2345e6"
        12345678901 -> "12345e6"
    """
    # bool is an int subclass but never a quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise NotationError(f"Expected an integer, got {type(value).__name__}")
    if value < 0:
        raise NotationError("Cannot render a negative value")
    
    length = _decimal_length(value)
    div, rem = divmod(length, NOTATION_GROUP)
    
    if div == 0:
        return str(value)
    
    # Leading digits by integer division; str() refuses ints past
    # sys.get_int_max_str_digits() and counters get there.
    number = float(value // 10 ** (length - NOTATION_PRECISION))
    power = 10 ** (NOTATION_PRECISION - rem)
    
    # "g" keeps the shortest form: 0.12345, 1234.5, and 12345 without ".0"
    return f"{number / power:g}e{div * NOTATION_GROUP}"


class NotationFormatter:
    """
    Stateless formatter used by the session to build display strings.
    """
    
    def format(self, value: int) -> str:
        """Render `value` in compact notation."""
        return to_notation(value)
